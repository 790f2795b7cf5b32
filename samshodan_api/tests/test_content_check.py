"""Tests for the content directory checker."""

from samshodan_api.services.content_check import check_content

GOOD = """---
title: Good Post
date: 2024-02-01
category: AI
---
Body
"""


def test_clean_directory_passes(tmp_path):
    (tmp_path / "good.md").write_text(GOOD, encoding="utf-8")

    result = check_content(tmp_path)

    assert result.ok
    assert result.checked == 1
    assert result.warnings == []


def test_missing_directory_is_an_error(tmp_path):
    result = check_content(tmp_path / "missing")

    assert not result.ok
    assert "does not exist" in result.errors[0]


def test_reports_malformed_and_missing_title(tmp_path):
    (tmp_path / "broken.md").write_text("---\ntitle: [oops\n---\n", encoding="utf-8")
    (tmp_path / "untitled.md").write_text("---\ndate: 2024-01-01\n---\nBody", encoding="utf-8")

    result = check_content(tmp_path)

    assert result.checked == 2
    assert any(e.startswith("broken.md") for e in result.errors)
    assert "untitled.md: missing title" in result.errors


def test_warnings_for_date_category_and_drafts(tmp_path):
    (tmp_path / "draft.md").write_text(
        "---\ntitle: Draft\ndate: someday\npublished: false\n---\n", encoding="utf-8"
    )

    result = check_content(tmp_path)

    assert result.ok
    assert "draft.md: missing or unparseable date" in result.warnings
    assert "draft.md: no category" in result.warnings
    assert "draft.md: unpublished draft" in result.warnings


def test_empty_directory_warns(tmp_path):
    result = check_content(tmp_path)

    assert result.ok
    assert result.checked == 0
    assert result.warnings
