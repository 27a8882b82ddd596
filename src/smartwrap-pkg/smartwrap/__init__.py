"""smartwrap: segment-aware text wrapping for generated commit messages.

Public API re-exports for convenient single-import usage.
"""

__version__ = "0.1.0"

from .config import TextWrapConfig, WrapConfig
from .packer import pack
from .paragraphs import split_paragraphs
from .segments import segment
from .text import TextWrapper, wrap
from .types import CodeBlock, InlineCode, Link, PlainText, TextSegment, WrapStrategy
from .width import char_width, display_width

__all__ = [
    # config
    "TextWrapConfig",
    "WrapConfig",
    # engine
    "pack",
    "segment",
    "split_paragraphs",
    "TextWrapper",
    "wrap",
    # types
    "CodeBlock",
    "InlineCode",
    "Link",
    "PlainText",
    "TextSegment",
    "WrapStrategy",
    # width
    "char_width",
    "display_width",
]
