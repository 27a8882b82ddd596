"""Display-width measurement for mixed Latin/CJK/emoji text."""

from wcwidth import wcwidth


def char_width(ch: str) -> int:
    """Return the terminal columns taken by a single character (1 or 2).

    Wide and fullwidth East Asian characters and emoji count as 2.  Everything
    else, including combining marks and control characters, counts as 1 so
    that no character is ever free.
    """
    return 2 if wcwidth(ch) == 2 else 1


def display_width(text: str) -> int:
    """Sum of char_width over every character in text."""
    return sum(char_width(ch) for ch in text)
