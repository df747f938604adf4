"""Unit tests for src/inbox.py."""

import os
import textwrap
from pathlib import Path

from src.inbox import archive_file, load_prompt_file, parse_file, scan_inbox


def test_parse_file_no_frontmatter(tmp_path: Path) -> None:
    """File without frontmatter returns full content and empty metadata."""
    f = tmp_path / "prompt.md"
    f.write_text("Explain photosynthesis to a chef.", encoding="utf-8")
    content, metadata = parse_file(f)
    assert content == "Explain photosynthesis to a chef."
    assert metadata == {}


def test_load_prompt_file_with_frontmatter(tmp_path: Path) -> None:
    f = tmp_path / "prompt.md"
    f.write_text(
        textwrap.dedent("""\
            ---
            models: gpt-4o,grok-vision,mistral-large,command-r-plus
            type: multimodal
            image: assets/chart.png
            pick: grok-vision
            ---
            What does this chart say about churn?
        """),
        encoding="utf-8",
    )
    entry = load_prompt_file(f)
    assert entry.text == "What does this chart say about churn?"
    assert entry.models == "gpt-4o,grok-vision,mistral-large,command-r-plus"
    assert entry.prompt_type == "multimodal"
    assert entry.image == tmp_path / "assets" / "chart.png"
    assert entry.pick == "grok-vision"


def test_load_prompt_file_list_models(tmp_path: Path) -> None:
    f = tmp_path / "prompt.md"
    f.write_text("---\nmodels:\n  - gpt-4o\n  - grok-vision\n---\nHi\n", encoding="utf-8")
    entry = load_prompt_file(f)
    assert entry.models == ["gpt-4o", "grok-vision"]
    assert entry.image is None
    assert entry.prompt_type is None


def test_archive_file_success(tmp_path: Path) -> None:
    inbox = tmp_path / "inbox"
    archive = tmp_path / "archive"
    inbox.mkdir()
    archive.mkdir()

    src = inbox / "my-prompt.md"
    src.write_text("A prompt", encoding="utf-8")

    dest = archive_file(src, archive)

    assert not src.exists()
    assert dest.parent == archive
    assert dest.name.endswith("_my-prompt.md")
    assert not dest.name.startswith("FAILED_")


def test_archive_file_failed(tmp_path: Path) -> None:
    src = tmp_path / "broken.md"
    src.write_text("Bad prompt", encoding="utf-8")
    archive = tmp_path / "archive"
    archive.mkdir()

    dest = archive_file(src, archive, failed=True)

    assert dest.name.startswith("FAILED_")
    assert "broken.md" in dest.name


def test_scan_inbox_oldest_first(tmp_path: Path) -> None:
    older = tmp_path / "b.md"
    newer = tmp_path / "a.md"
    older.write_text("old", encoding="utf-8")
    newer.write_text("new", encoding="utf-8")
    (tmp_path / "ignored.txt").write_text("x", encoding="utf-8")
    os.utime(older, (1_000_000, 1_000_000))
    os.utime(newer, (2_000_000, 2_000_000))
    assert scan_inbox(tmp_path) == [older, newer]
