"""Tests for smartwrap.segments."""

import pytest

from smartwrap.segments import find_code_blocks, segment
from smartwrap.types import CodeBlock, InlineCode, Link, PlainText

# ── code blocks ──────────────────────────────────────────────────────

class TestCodeBlocks:
    def test_inline_fence(self):
        assert segment("before ```code``` after") == [
            PlainText("before "),
            CodeBlock("```code```"),
            PlainText(" after"),
        ]

    def test_multiline_fence_with_language(self):
        text = "Example:\n```python\nprint('hi')\n```\nDone"
        assert segment(text) == [
            PlainText("Example:\n"),
            CodeBlock("```python\nprint('hi')\n```"),
            PlainText("\nDone"),
        ]

    def test_non_greedy_to_next_fence(self):
        assert segment("```a``` and ```b```") == [
            CodeBlock("```a```"),
            PlainText(" and "),
            CodeBlock("```b```"),
        ]

    def test_block_claims_links_and_inline_code(self):
        text = "```see https://example.com and `x` ```"
        assert segment(text) == [CodeBlock(text)]

    def test_find_code_blocks_offsets(self):
        assert list(find_code_blocks("ab ```x``` cd ```y```")) == [(3, 10), (14, 21)]

    def test_unterminated_fence_is_plain(self):
        assert segment("start ```never closed") == [PlainText("start ```never closed")]


# ── links ────────────────────────────────────────────────────────────

class TestLinks:
    def test_bare_url(self):
        assert segment("see https://example.com/x now") == [
            PlainText("see "),
            Link("https://example.com/x", "https://example.com/x"),
            PlainText(" now"),
        ]

    def test_http_url_at_start(self):
        assert segment("http://a.io") == [Link("http://a.io", "http://a.io")]

    def test_markdown_link(self):
        assert segment("See [Example](https://example.com) for details") == [
            PlainText("See "),
            Link("https://example.com", "Example", "[Example](https://example.com)"),
            PlainText(" for details"),
        ]

    def test_markdown_link_display_may_contain_spaces(self):
        (link,) = segment("[the docs](https://example.com/docs)")
        assert link.display_text == "the docs"
        assert link.url == "https://example.com/docs"

    @pytest.mark.parametrize("text", [
        "https:// nothing after the scheme",
        "[]()",
        "[empty url]()",
        "[no parens] here",
        "ftp://example.com",
    ])
    def test_not_a_link(self, text):
        assert all(not isinstance(s, Link) for s in segment(text))

    def test_bare_link_render(self):
        link = Link("https://x.io", "https://x.io")
        assert link.source == "https://x.io"
        assert link.render(True) == "[https://x.io](https://x.io)"
        assert link.render(False) == "https://x.io"


# ── inline code ──────────────────────────────────────────────────────

class TestInlineCode:
    def test_single_backticks(self):
        assert segment("Use the `command` to run it") == [
            PlainText("Use the "),
            InlineCode("`command`"),
            PlainText(" to run it"),
        ]

    def test_double_backticks_kept_with_delimiters(self):
        assert segment("from ``config.json`` to") == [
            PlainText("from "),
            InlineCode("``config.json``"),
            PlainText(" to"),
        ]

    def test_shortest_match_first(self):
        assert segment("`a` and `b`") == [
            InlineCode("`a`"),
            PlainText(" and "),
            InlineCode("`b`"),
        ]

    def test_long_tick_run_opens_with_last_three(self):
        assert segment("````x`") == [PlainText("`"), InlineCode("```x`")]

    def test_closing_run_capped_at_three(self):
        assert segment("`a````") == [InlineCode("`a```"), PlainText("`")]

    @pytest.mark.parametrize("text", ["a `b", "``", "trailing `"])
    def test_unterminated_is_plain(self, text):
        assert segment(text) == [PlainText(text)]


# ── ordering and round trip ──────────────────────────────────────────

class TestSegment:
    def test_empty(self):
        assert segment("") == []

    def test_precedence(self):
        segs = segment("`x` https://a.io ```y``` [t](u)")
        assert [type(s) for s in segs] == [
            InlineCode, PlainText, Link, PlainText, CodeBlock, PlainText, Link,
        ]

    @pytest.mark.parametrize("text", [
        "",
        "plain words only",
        "Use the `command` to run it",
        "See [Example](https://example.com) for details",
        "mixed https://example.com and ```block\nwith lines``` plus ``code``",
        "broken ``` fence and `tick and [link](",
        "中文 `代码` https://例子.com/路径",
    ])
    def test_sources_rebuild_input(self, text):
        assert "".join(s.source for s in segment(text)) == text

    def test_segments_rebuild_commit_message(self, commit_message):
        assert "".join(s.source for s in segment(commit_message)) == commit_message
