"""Greedy line packing over a segment list."""

from typing import Sequence

from .breaker import break_word
from .config import WrapConfig
from .types import CodeBlock, InlineCode, Link, PlainText, TextSegment
from .width import char_width, display_width

LIST_MARKER = "-"


class LineBuilder:
    """Accumulates output lines for one pack() call.

    The first line starts with config.indent; every line opened by a wrap
    starts with config.indent + config.hanging_indent.
    """

    def __init__(self, config: WrapConfig):
        self.config = config
        self.lines: list[str] = []
        self.budget = config.max_width - display_width(config.continuation_prefix)
        self._start(config.indent)

    def _start(self, prefix: str) -> None:
        self.prefix = prefix
        self.current = prefix
        self.width = display_width(prefix)

    @property
    def has_content(self) -> bool:
        return len(self.current) > len(self.prefix)

    @property
    def is_list_marker_only(self) -> bool:
        return self.current[len(self.prefix):].strip() == LIST_MARKER

    def room(self, space: bool) -> int:
        """Columns left on the current line after an optional separator."""
        sep = 1 if space and self.has_content else 0
        return self.config.max_width - self.width - sep

    def fits(self, width: int, space: bool) -> bool:
        return width <= self.room(space)

    def append(self, text: str, width: int, space: bool) -> None:
        if space and self.has_content:
            self.current += " "
            self.width += 1
        self.current += text
        self.width += width

    def newline(self) -> None:
        """Flush the current line and open a continuation line (no-op when empty)."""
        if not self.has_content:
            return
        self.lines.append(self.current.rstrip())
        self._start(self.config.continuation_prefix)

    def add_block(self, text: str) -> None:
        """Emit text verbatim on line(s) of its own."""
        if self.has_content:
            self.lines.append(self.current.rstrip())
        self.lines.append(text)
        self._start(self.config.continuation_prefix)

    def place(self, text: str, space: bool, breakable: bool = False) -> None:
        """Add one unit, wrapping before it if it does not fit.

        Only breakable units (plain-text words) are ever sliced; anything else
        too wide for a line is placed whole and overflows.
        """
        if not text:
            if self.fits(0, space):
                self.append("", 0, space)
            return
        width = display_width(text)
        if self.fits(width, space):
            self.append(text, width, space)
            return
        can_break = breakable and self.config.break_long_words
        if self.is_list_marker_only:
            # Never leave a list dash alone on its line.
            if can_break and width > self.config.max_width:
                self._place_broken(text, True)
            else:
                self.append(text, width, True)
            return
        if can_break and width > self.config.max_width:
            self._place_broken(text, space)
            return
        self.newline()
        if can_break and not self.fits(width, False):
            self._place_broken(text, False)
            return
        self.append(text, width, False)

    def _place_broken(self, word: str, space: bool) -> None:
        if (self.has_content and not self.is_list_marker_only
                and self.room(space) < char_width(word[0])):
            self.newline()
        for i, chunk in enumerate(break_word(word, self.room(space), self.budget)):
            if i:
                self.newline()
            self.append(chunk, display_width(chunk), space and i == 0)

    def finish(self) -> str:
        if self.has_content:
            self.lines.append(self.current.rstrip())
        return "\n".join(self.lines)


def _pack_plain(builder: LineBuilder, text: str, pending_space: bool) -> bool:
    """Pack a PlainText segment; return whether it ended in whitespace."""
    config = builder.config
    leading = pending_space or text[:1].isspace()
    trailing = text[-1:].isspace()
    if not config.handle_code_blocks:
        stripped = text.strip()
        if stripped:
            builder.place(stripped, leading)
        return trailing
    if config.preserve_words:
        for i, word in enumerate(text.split()):
            builder.place(word, leading if i == 0 else True, breakable=True)
        return trailing
    # Single-space splitting: empty words stand for the extra spaces.
    for i, word in enumerate(text.split(" ")):
        builder.place(word, pending_space if i == 0 else True, breakable=True)
    return False


def pack(segments: Sequence[TextSegment], config: WrapConfig) -> str:
    """Pack segments into lines no wider than config.max_width where possible."""
    builder = LineBuilder(config)
    pending_space = False
    for seg in segments:
        if isinstance(seg, PlainText):
            pending_space = _pack_plain(builder, seg.content, pending_space)
            continue
        if isinstance(seg, CodeBlock) and config.handle_code_blocks:
            builder.add_block(seg.content)
        elif isinstance(seg, Link):
            builder.place(seg.render(config.preserve_links), pending_space)
        elif isinstance(seg, (CodeBlock, InlineCode)):
            builder.place(seg.content, pending_space)
        pending_space = False
    return builder.finish()
