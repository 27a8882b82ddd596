"""
smartwrap: reflow commit-message style text to a display width.

Fenced code blocks, inline code and links are kept whole; CJK and emoji are
measured as two columns.

Usage:
    smartwrap [FILE] [--width N] [--paragraphs] [--config FILE]
              [--strategy NAME] [--no-wrap] [--verbose]

Config file (TOML):
    [text_wrap]
    default_width = 72
    hanging_indent = "  "
"""

import argparse
import dataclasses
import sys
import tomllib
from pathlib import Path

from pydantic import ValidationError

from .config import TextWrapConfig, WrapConfig
from .segments import segment
from .text import wrap
from .types import WrapStrategy
from .ui import ANSI_CYAN, ANSI_DIM, ansi, log, log_error
from .width import display_width


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartwrap",
        description="Wrap text to a display width, keeping code and links intact.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "file", nargs="?",
        help="Text file to wrap (default: read stdin)",
    )
    parser.add_argument(
        "--width", type=int, default=None,
        help="Line width in display columns (default: default_width from config, 80)",
    )
    parser.add_argument(
        "--paragraphs", action="store_true",
        help="Keep blank-line paragraphs and hard line breaks",
    )
    parser.add_argument(
        "--config", default=None,
        help="TOML file with a [text_wrap] table of defaults",
    )
    parser.add_argument(
        "--strategy", choices=[s.value for s in WrapStrategy],
        default=WrapStrategy.HYBRID.value,
        help="Wrapping strategy (default: hybrid)",
    )
    parser.add_argument(
        "--no-wrap", action="store_true",
        help="Print the input unchanged",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log the segment breakdown to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = TextWrapConfig.from_toml(args.config) if args.config else TextWrapConfig()
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        log_error(f"cannot load config {args.config}: {e}")
        return 1

    try:
        text = Path(args.file).read_text(encoding="utf-8") if args.file else sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        log_error(f"cannot read input: {e}")
        return 1

    if args.no_wrap:
        sys.stdout.write(text)
        return 0

    config = dataclasses.replace(
        WrapConfig.from_settings(settings, args.width, args.paragraphs),
        strategy=WrapStrategy(args.strategy),
    )

    if args.verbose:
        log(ansi(f"wrapping at {config.max_width} columns ({config.strategy.value})", ANSI_CYAN))
        for seg in segment(text):
            log(ansi(f"  {type(seg).__name__:<11}{display_width(seg.source):>6} cols", ANSI_DIM))

    print(wrap(text, config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
