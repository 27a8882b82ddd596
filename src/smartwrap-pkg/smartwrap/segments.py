"""Split text into plain, code-block, link and inline-code segments.

Three scanners run in a fixed order, each one only over text the previous
ones left unclaimed:

1. fenced code blocks (``` ... ```, may span lines)
2. links, either a bare http(s):// URL or a markdown [text](url)
3. inline code wrapped in one to three backticks

Anything left over becomes PlainText.  Unterminated markup never matches, so
it ends up verbatim inside a PlainText segment.
"""

from typing import Iterator

from .types import CodeBlock, InlineCode, Link, PlainText, TextSegment

FENCE = "```"
URL_SCHEMES = ("http://", "https://")
MAX_TICKS = 3


def find_code_blocks(text: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) offsets of fenced code blocks, fences included."""
    pos = 0
    while True:
        start = text.find(FENCE, pos)
        if start == -1:
            return
        close = text.find(FENCE, start + len(FENCE))
        if close == -1:
            return
        end = close + len(FENCE)
        yield start, end
        pos = end


def _match_bare_url(text: str, i: int) -> int | None:
    """Return the end of a bare URL starting at i, or None."""
    for scheme in URL_SCHEMES:
        if text.startswith(scheme, i):
            body = i + len(scheme)
            end = body
            while end < len(text) and not text[end].isspace():
                end += 1
            return end if end > body else None
    return None


def _match_markdown_link(text: str, i: int) -> tuple[int, str, str] | None:
    """Return (end, display_text, url) for a [text](url) link at i, or None."""
    if text[i] != "[":
        return None
    close = text.find("]", i + 1)
    if close <= i + 1 or not text.startswith("(", close + 1):
        return None
    end = text.find(")", close + 2)
    if end <= close + 2:
        return None
    return end + 1, text[i + 1:close], text[close + 2:end]


def _find_links(text: str) -> Iterator[tuple[int, int, Link]]:
    i = 0
    while i < len(text):
        if text[i] == "h":
            end = _match_bare_url(text, i)
            if end is not None:
                url = text[i:end]
                yield i, end, Link(url, url, url)
                i = end
                continue
        elif text[i] == "[":
            match = _match_markdown_link(text, i)
            if match is not None:
                end, display, url = match
                yield i, end, Link(url, display, text[i:end])
                i = end
                continue
        i += 1


def _tick_run_end(text: str, i: int) -> int:
    while i < len(text) and text[i] == "`":
        i += 1
    return i


def _find_inline_code(text: str) -> Iterator[tuple[int, int]]:
    pos = 0
    while True:
        start = text.find("`", pos)
        if start == -1:
            return
        run_end = _tick_run_end(text, start)
        # A run longer than three opens with its last three ticks.
        start = max(start, run_end - MAX_TICKS)
        close = text.find("`", run_end)
        if close == -1:
            return
        end = min(_tick_run_end(text, close), close + MAX_TICKS)
        yield start, end
        pos = end


def _segment_inline_code(text: str) -> list[TextSegment]:
    segments: list[TextSegment] = []
    pos = 0
    for start, end in _find_inline_code(text):
        if start > pos:
            segments.append(PlainText(text[pos:start]))
        segments.append(InlineCode(text[start:end]))
        pos = end
    if pos < len(text):
        segments.append(PlainText(text[pos:]))
    return segments


def _segment_links(text: str) -> list[TextSegment]:
    segments: list[TextSegment] = []
    pos = 0
    for start, end, link in _find_links(text):
        if start > pos:
            segments.extend(_segment_inline_code(text[pos:start]))
        segments.append(link)
        pos = end
    if pos < len(text):
        segments.extend(_segment_inline_code(text[pos:]))
    return segments


def segment(text: str) -> list[TextSegment]:
    """Split text into an ordered list of segments.

    Joining the `source` of every returned segment reproduces text exactly.
    """
    segments: list[TextSegment] = []
    pos = 0
    for start, end in find_code_blocks(text):
        if start > pos:
            segments.extend(_segment_links(text[pos:start]))
        segments.append(CodeBlock(text[start:end]))
        pos = end
    if pos < len(text):
        segments.extend(_segment_links(text[pos:]))
    return segments
