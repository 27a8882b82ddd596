"""Core data types for the smartwrap text wrapper."""

from dataclasses import dataclass
from enum import Enum


class WrapStrategy(Enum):
    """Wrapper variant selected by WrapConfig.strategy."""
    WORD_BOUNDARY = "word-boundary"
    HYBRID = "hybrid"
    SEMANTIC = "semantic"


@dataclass(frozen=True)
class PlainText:
    """Reflowable prose."""
    content: str

    @property
    def source(self) -> str:
        return self.content


@dataclass(frozen=True)
class CodeBlock:
    """A fenced block, fences included."""
    content: str

    @property
    def source(self) -> str:
        return self.content


@dataclass(frozen=True)
class InlineCode:
    """An inline code span, backtick delimiters included."""
    content: str

    @property
    def source(self) -> str:
        return self.content


@dataclass(frozen=True)
class Link:
    """A bare URL or a markdown [text](url) link.

    `source` keeps the exact matched input so segments can be joined back
    into the original text.  For a bare URL url, display_text and source are
    all the same string.
    """
    url: str
    display_text: str
    source: str = ""

    def __post_init__(self) -> None:
        if not self.source:
            object.__setattr__(self, "source", self.url)

    def render(self, preserve_links: bool) -> str:
        if preserve_links:
            return f"[{self.display_text}]({self.url})"
        return self.display_text


TextSegment = PlainText | CodeBlock | InlineCode | Link

