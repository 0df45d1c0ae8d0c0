"""Per-language rule tables for the generic scanner."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from codelex.tokens import Language


@dataclass(frozen=True, slots=True)
class LanguageRuleSet:
    """Keyword and type vocabularies plus comment syntax for one language."""

    keywords: frozenset[str]
    types: frozenset[str]
    comment_marker: str  # "//", "#" or "--"
    case_sensitive_keywords: bool = True
    block_comments: bool = False

    def is_keyword(self, word: str) -> bool:
        if self.case_sensitive_keywords:
            return word in self.keywords
        return word.upper() in self.keywords

    def is_type(self, word: str) -> bool:
        return word in self.types


def _words(text: str) -> frozenset[str]:
    return frozenset(text.split())


# Keywords are stored upper-case; matching upper-cases the candidate word.
SQL = LanguageRuleSet(
    keywords=_words(
        """
        SELECT FROM WHERE INSERT INTO VALUES UPDATE SET DELETE CREATE TABLE DROP
        ALTER INDEX JOIN LEFT RIGHT INNER OUTER ON AND OR NOT NULL IS IN LIKE
        BETWEEN ORDER BY GROUP HAVING LIMIT OFFSET AS DISTINCT COUNT SUM AVG MAX
        MIN PRIMARY KEY FOREIGN REFERENCES CASCADE CONSTRAINT
        """
    ),
    types=frozenset(),
    comment_marker="--",
    case_sensitive_keywords=False,
)

RUST = LanguageRuleSet(
    keywords=_words(
        """
        fn let mut const if else match while for loop return struct enum impl
        trait pub use mod crate self Self super where async await move ref
        static unsafe extern type dyn as in break continue
        """
    ),
    types=_words(
        """
        i8 i16 i32 i64 i128 isize u8 u16 u32 u64 u128 usize f32 f64 bool char
        str String Vec Option Result Box Rc Arc Cell RefCell HashMap HashSet
        BTreeMap
        """
    ),
    comment_marker="//",
    block_comments=True,
)

PYTHON = LanguageRuleSet(
    keywords=_words(
        """
        def class if elif else for while return import from as try except
        finally with lambda yield raise pass break continue and or not in is
        None True False global nonlocal assert del async await
        """
    ),
    types=_words(
        """
        int float str bool list dict tuple set bytes type object Exception List
        Dict Tuple Set Optional Union Any
        """
    ),
    comment_marker="#",
)

# TypeScript shares the JavaScript table.
JAVASCRIPT = LanguageRuleSet(
    keywords=_words(
        """
        function const let var if else for while do switch case break continue
        return throw try catch finally class extends new this super import
        export default async await yield typeof instanceof in of delete void
        null undefined true false NaN Infinity
        """
    ),
    types=_words(
        """
        Array Object String Number Boolean Function Symbol BigInt Promise Map
        Set WeakMap WeakSet Date RegExp Error
        """
    ),
    comment_marker="//",
    block_comments=True,
)

DART = LanguageRuleSet(
    keywords=_words(
        """
        abstract as assert async await break case catch class const continue
        covariant default deferred do dynamic else enum export extends
        extension external factory false final finally for Function get hide if
        implements import in interface is late library mixin new null on
        operator part required rethrow return set show static super switch sync
        this throw true try typedef var void while with yield
        """
    ),
    types=_words(
        """
        int double num String bool List Map Set Iterable Future Stream Object
        dynamic void Never Null
        """
    ),
    comment_marker="//",
    block_comments=True,
)

SHELL = LanguageRuleSet(
    keywords=_words(
        """
        if then else elif fi for while do done case esac function return exit
        export source alias unset local readonly declare typeset echo printf
        read cd pwd ls cp mv rm mkdir chmod chown grep sed awk cat head tail
        find xargs sort uniq wc
        """
    ),
    types=frozenset(),
    comment_marker="#",
)

RULES: Mapping[Language, LanguageRuleSet] = MappingProxyType(
    {
        Language.SQL: SQL,
        Language.RUST: RUST,
        Language.PYTHON: PYTHON,
        Language.JAVASCRIPT: JAVASCRIPT,
        Language.TYPESCRIPT: JAVASCRIPT,
        Language.DART: DART,
        Language.SHELL: SHELL,
    }
)
