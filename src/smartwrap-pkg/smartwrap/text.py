"""Text wrapping entry points."""

from typing import Callable

from .config import WrapConfig
from .packer import pack
from .paragraphs import split_paragraphs
from .segments import segment
from .types import WrapStrategy


def _wrap_line(text: str, config: WrapConfig) -> str:
    return pack(segment(text), config)


def _wrap_paragraphs(text: str, config: WrapConfig) -> str:
    """Wrap each paragraph on its own, keeping hard line breaks inside it."""
    blocks = []
    for lines in split_paragraphs(text):
        blocks.append("\n".join(_wrap_line(line, config) for line in lines))
    return "\n\n".join(blocks)


def _wrap_hybrid(text: str, config: WrapConfig, paragraphs: bool) -> str:
    if not text:
        return ""
    if paragraphs:
        return _wrap_paragraphs(text, config)
    return _wrap_line(text, config)


# All strategies share the hybrid pipeline for now; WORD_BOUNDARY and
# SEMANTIC are kept as hooks for alternative packing rules.
_WRAPPERS: dict[WrapStrategy, Callable[[str, WrapConfig, bool], str]] = {
    WrapStrategy.WORD_BOUNDARY: _wrap_hybrid,
    WrapStrategy.HYBRID: _wrap_hybrid,
    WrapStrategy.SEMANTIC: _wrap_hybrid,
}


def wrap(text: str, config: WrapConfig | None = None) -> str:
    """Reflow text to config.max_width display columns.

    - Fenced code blocks go on their own lines, untouched
    - Inline code and links are never split across lines
    - A leading list dash is never left alone on a line
    - With preserve_paragraphs, paragraphs are wrapped separately and joined
      by exactly one blank line; single newlines inside a paragraph are kept
    """
    config = config or WrapConfig()
    return _WRAPPERS[config.strategy](text, config, config.preserve_paragraphs)


class TextWrapper:
    """A WrapConfig bound to the wrap() function."""

    def __init__(self, config: WrapConfig | None = None):
        self.config = config or WrapConfig()

    def wrap(self, text: str) -> str:
        return wrap(text, self.config)
