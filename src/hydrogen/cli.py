"""Command-line interface for Hydrogen."""

from __future__ import annotations

import argparse
import io
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from hydrogen.errors import LexError, ParseError

logger = logging.getLogger(__name__)

CONFIG_NAME = "hydrogen.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    tokens: bool
    keep_whitespace: bool
    debug: bool
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="hydrogen",
        description="Tokenize and parse Hydrogen source",
    )
    p.add_argument("input", help="Input source file, or - for stdin")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--tokens",
        action="store_true",
        default=None,
        help="Print the token stream instead of the AST",
    )
    p.add_argument(
        "--keep-whitespace",
        action="store_true",
        default=None,
        help="Include whitespace tokens in --tokens output",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump significant tokens to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = None if args.input == "-" else Path(args.input)
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    tokens = False
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict) and isinstance(cfg_output.get("tokens"), bool):
        tokens = cfg_output["tokens"]
    if args.tokens is not None:
        tokens = args.tokens

    keep_whitespace = False
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict) and isinstance(cfg_lexer.get("keep_whitespace"), bool):
        keep_whitespace = cfg_lexer["keep_whitespace"]
    if args.keep_whitespace is not None:
        keep_whitespace = args.keep_whitespace

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        tokens=tokens,
        keep_whitespace=keep_whitespace,
        debug=args.debug,
        verbose=args.verbose,
    )


def read_source(options: CliOptions) -> str:
    if options.input_file is None:
        return sys.stdin.read()
    return options.input_file.read_text(encoding="utf-8")


def render_tokens(source: str, keep_whitespace: bool = False) -> tuple[str, bool]:
    """Return the token listing for *source* and whether tokenizing faulted."""
    from hydrogen.debug import dump_tokens
    from hydrogen.language import REGISTRY
    from hydrogen.lexer import iter_outcomes

    outcomes = list(iter_outcomes(source, REGISTRY))
    if not keep_whitespace:
        outcomes = [o for o in outcomes if isinstance(o, LexError) or o.kind not in REGISTRY.trivia]

    buf = io.StringIO()
    dump_tokens(outcomes, file=buf)
    faulted = bool(outcomes) and isinstance(outcomes[-1], LexError)
    return buf.getvalue(), faulted


def render_ast(source: str, debug: bool = False) -> str:
    """Parse *source* and return the AST dump. Raises LexError or ParseError."""
    from hydrogen.debug import dump_ast, dump_tokens
    from hydrogen.language import REGISTRY
    from hydrogen.lexer import tokenize
    from hydrogen.parser import parse_source

    if debug:
        dump_tokens(REGISTRY.significant(tokenize(source, REGISTRY)), file=sys.stderr)

    program = parse_source(source)
    buf = io.StringIO()
    dump_ast(program, file=buf)
    return buf.getvalue()


def write_output(options: CliOptions, text: str) -> None:
    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        source = read_source(options)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    filename = str(options.input_file) if options.input_file is not None else "<stdin>"
    logger.debug("read %d characters from %s", len(source), filename)

    if options.tokens:
        text, faulted = render_tokens(source, options.keep_whitespace)
        write_output(options, text)
        return 1 if faulted else 0

    try:
        text = render_ast(source, options.debug)
    except (LexError, ParseError) as exc:
        print(exc.format(filename), file=sys.stderr)
        return 1

    write_output(options, text)
    return 0
