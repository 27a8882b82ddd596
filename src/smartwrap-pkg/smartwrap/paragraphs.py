"""Paragraph and hard-line-break detection."""

from typing import Iterator

from .segments import find_code_blocks


def _line_breaks(text: str) -> Iterator[int]:
    """Yield offsets of newlines that are not inside a fenced code block."""
    fenced = list(find_code_blocks(text))
    idx = 0
    for i, ch in enumerate(text):
        if ch != "\n":
            continue
        while idx < len(fenced) and fenced[idx][1] <= i:
            idx += 1
        if idx < len(fenced) and fenced[idx][0] <= i:
            continue
        yield i


def physical_lines(text: str) -> list[str]:
    """Split text on newlines, keeping each fenced code block inside one line."""
    lines = []
    start = 0
    for brk in _line_breaks(text):
        lines.append(text[start:brk])
        start = brk + 1
    lines.append(text[start:])
    return lines


def split_paragraphs(text: str) -> list[list[str]]:
    """Group the stripped physical lines of text into paragraphs.

    Blank (or whitespace-only) lines separate paragraphs.  Any number of
    consecutive blank lines counts as a single separator, and blank lines at
    the start or end of the text are dropped, so the result never contains an
    empty paragraph.
    """
    paragraphs: list[list[str]] = []
    current: list[str] = []
    for line in physical_lines(text):
        stripped = line.strip()
        if not stripped:
            if current:
                paragraphs.append(current)
                current = []
            continue
        current.append(stripped)
    if current:
        paragraphs.append(current)
    return paragraphs
