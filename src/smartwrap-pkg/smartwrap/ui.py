"""ANSI terminal output utilities for the smartwrap command line.

Wrapped text goes to stdout; everything printed through this module goes to
stderr so it never mixes with the output.
"""

import sys

ANSI_RESET  = "\033[0m"
ANSI_DIM    = "\033[2m"
ANSI_RED    = "\033[31m"
ANSI_CYAN   = "\033[36m"


def ansi(text: str, *codes: str) -> str:
    """Wrap text in ANSI escape codes when stderr is a TTY (no-op otherwise)."""
    if not sys.stderr.isatty():
        return text
    return "".join(codes) + text + ANSI_RESET


def log(msg: str) -> None:
    """Print a progress line to stderr."""
    print(msg, file=sys.stderr)


def log_error(msg: str) -> None:
    print(ansi(f"Error: {msg}", ANSI_RED), file=sys.stderr)
