"""Configuration for the smartwrap text wrapper."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .types import WrapStrategy


class TextWrapConfig(BaseModel):
    """Persisted wrapping defaults, usually the [text_wrap] table of a config file.

    Per-invocation overrides (width, paragraph handling) are applied on top of
    this record by WrapConfig.from_settings().
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    default_width: int = Field(
        default=80, ge=1,
        description="Line width used when no --width override is given")
    preserve_words: bool = Field(
        default=True,
        description="Collapse whitespace runs between words (False splits on single spaces)")
    break_long_words: bool = Field(
        default=True,
        description="Split words wider than the line width")
    handle_code_blocks: bool = Field(
        default=True,
        description="Put fenced code blocks on their own lines and reflow prose")
    preserve_links: bool = Field(
        default=True,
        description="Render links as [text](url) instead of bare text")
    hanging_indent: str = Field(
        default="",
        description="Prefix added to wrapped continuation lines")

    @classmethod
    def from_toml(cls, path: str | Path) -> "TextWrapConfig":
        """Load the [text_wrap] table from a TOML file; a missing table gives defaults."""
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return cls.model_validate(data.get("text_wrap", {}))


@dataclass(frozen=True)
class WrapConfig:
    """Immutable input to every wrapping operation.

    Defaults match what the commit generator uses when nothing is configured:
    80 columns, word-preserving, code- and link-aware, no indentation.
    """
    max_width: int = 80
    preserve_words: bool = True
    break_long_words: bool = True
    handle_code_blocks: bool = True
    preserve_links: bool = True
    preserve_paragraphs: bool = False
    strategy: WrapStrategy = WrapStrategy.HYBRID
    indent: str = ""
    hanging_indent: str = ""

    @property
    def continuation_prefix(self) -> str:
        return self.indent + self.hanging_indent

    @classmethod
    def from_settings(cls, settings: TextWrapConfig,
                      wrap_width: int | None = None,
                      preserve_paragraphs: bool = False) -> "WrapConfig":
        """Merge persisted defaults with per-invocation overrides.

        Commit messages are wrapped with preserve_paragraphs=True; single-line
        outputs such as branch names leave it off.
        """
        return cls(
            max_width=wrap_width if wrap_width is not None else settings.default_width,
            preserve_words=settings.preserve_words,
            break_long_words=settings.break_long_words,
            handle_code_blocks=settings.handle_code_blocks,
            preserve_links=settings.preserve_links,
            preserve_paragraphs=preserve_paragraphs,
            strategy=WrapStrategy.HYBRID,
            indent="",
            hanging_indent=settings.hanging_indent,
        )
