"""Command-line interface for codelex."""

from __future__ import annotations

import argparse
import re
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from codelex.errors import ConfigError, ThemeError
from codelex.styles import DEFAULT_THEME, Theme, get_theme

CONFIG_FILENAME = "codelex.toml"

# tomllib reports positions only inside the message text
_TOML_LINE = re.compile(r"at line (\d+)")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    language_hint: str | None
    theme: Theme
    line_numbers: bool
    output_format: str
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="codelex",
        description="Syntax-highlight a source file",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-l",
        "--lang",
        metavar="HINT",
        help="Language hint, e.g. sql, rs, py (default: detect from content)",
    )
    p.add_argument("--theme", metavar="NAME", help="Colour theme (default: monokai)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_FILENAME})",
    )
    p.add_argument(
        "--line-numbers",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show the line-number gutter (default: on)",
    )
    p.add_argument(
        "--format",
        choices=("html", "tokens"),
        default="html",
        help="Output an HTML document or a token listing (default: html)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def config_path_for(config_path: Path | None, input_dir: Path) -> Path:
    return config_path if config_path is not None else input_dir / CONFIG_FILENAME


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path_for(config_path, input_dir)

    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        m = _TOML_LINE.search(str(exc))
        line = int(m.group(1)) if m else None
        raise ConfigError(f"invalid TOML: {exc}", path, line) from None


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    path = config_path_for(config_path, input_dir)
    config = load_config(config_path, input_dir)

    section = config.get("highlight")
    if section is None:
        section = {}
    elif not isinstance(section, dict):
        raise ConfigError("[highlight] must be a table", path)

    # Language hint: config < CLI
    language_hint = section.get("language")
    if language_hint is not None and not isinstance(language_hint, str):
        raise ConfigError("highlight.language must be a string", path)
    if args.lang is not None:
        language_hint = args.lang

    # Theme: config < CLI, then colour overrides from the config
    theme = DEFAULT_THEME
    cfg_theme = section.get("theme")
    if cfg_theme is not None:
        if not isinstance(cfg_theme, str):
            raise ConfigError("highlight.theme must be a string", path)
        theme = _theme_from_config(cfg_theme, path)
    if args.theme is not None:
        theme = get_theme(args.theme)

    theme_section = config.get("theme")
    if theme_section is not None and not isinstance(theme_section, dict):
        raise ConfigError("[theme] must be a table", path)
    if theme_section:
        colors = theme_section.get("colors")
        if colors is not None:
            if not isinstance(colors, dict):
                raise ConfigError("[theme.colors] must be a table", path)
            try:
                theme = theme.with_overrides(colors)
            except ThemeError as exc:
                raise ThemeError(exc.message, path) from None

    # Line numbers: config < CLI
    line_numbers = True
    cfg_numbers = section.get("line_numbers")
    if cfg_numbers is not None:
        if not isinstance(cfg_numbers, bool):
            raise ConfigError("highlight.line_numbers must be true or false", path)
        line_numbers = cfg_numbers
    if args.line_numbers is not None:
        line_numbers = args.line_numbers

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        language_hint=language_hint,
        theme=theme,
        line_numbers=line_numbers,
        output_format=args.format,
        debug=args.debug,
    )


def _theme_from_config(name: str, path: Path) -> Theme:
    try:
        return get_theme(name)
    except ThemeError as exc:
        raise ThemeError(exc.message, path) from None


def highlight_file(options: CliOptions) -> str:
    """Read, detect, tokenize, and format a source file."""
    from codelex.debug import dump_tokens, format_token
    from codelex.detect import detect_language, language_from_hint
    from codelex.lexer import highlight
    from codelex.render import render_block, render_document

    source = options.input_file.read_text(encoding="utf-8")

    hint = options.language_hint
    if hint is not None and language_from_hint(hint) is None:
        print(f"warning: unknown language '{hint}', detecting from content", file=sys.stderr)
    language = detect_language(source, hint)
    tokens = highlight(source, language)

    if options.debug:
        dump_tokens(tokens, language, file=sys.stderr)

    if options.output_format == "tokens":
        return "".join(format_token(t) + "\n" for t in tokens)

    block = render_block(
        tokens,
        options.theme,
        language=language,
        line_numbers=options.line_numbers,
    )
    return render_document([block], title=options.input_file.name)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    try:
        output = highlight_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 1

    if options.output_file:
        try:
            options.output_file.write_text(output, encoding="utf-8")
        except OSError as exc:
            print(f"error: cannot write {options.output_file}: {exc}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(output)

    return 0
