"""Shared test fixtures for smartwrap."""

import pytest

from smartwrap import WrapConfig


@pytest.fixture
def commit_message() -> str:
    """A generated commit message with every kind of segment in it."""
    return (
        "feat(wrap): keep code and links intact when reflowing\n"
        "\n"
        "Reflow the body to the configured width while keeping `inline_code`,\n"
        "links such as [the docs](https://example.com/docs/wrapping) and bare\n"
        "URLs like https://example.com/issues/42 on a single line.\n"
        "\n"
        "- Measure CJK text such as 中文提交信息 as two columns per character\n"
        "- Keep ```fenced blocks``` on lines of their own\n"
    )


@pytest.fixture
def narrow() -> WrapConfig:
    return WrapConfig(max_width=20)


@pytest.fixture
def tmp_config_dir(tmp_path):
    """Create a temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir
