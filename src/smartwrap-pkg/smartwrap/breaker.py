"""Split words that are too wide for a line."""

from .width import char_width


def split_at_width(word: str, width: int) -> tuple[str, str]:
    """Split word into the longest prefix that fits width columns and the rest."""
    used = 0
    for i, ch in enumerate(word):
        used += char_width(ch)
        if used > width:
            return word[:i], word[i:]
    return word, ""


def break_word(word: str, first_width: int, width: int) -> list[str]:
    """Slice word into chunks by display width.

    The first chunk fits first_width (the room left on the current line),
    every following chunk fits width (a full continuation line).  Each chunk
    holds at least one character even when the budget is too small for it,
    so nothing is dropped and the loop always ends.
    """
    chunks = []
    limit = first_width
    rest = word
    while rest:
        head, tail = split_at_width(rest, limit)
        if not head:
            head, tail = rest[:1], rest[1:]
        chunks.append(head)
        rest = tail
        limit = width
    return chunks
