"""Shared fixtures for core unit tests"""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from blogpub.core.models import DocumentRecord


SAMPLE_DOC = """\
---
title: Sample Doc
date: 2025-03-04
authors:
- ada lovelace
- GRACE hopper
tags:
- python
- markup
---

# Ignored Heading

An opening paragraph with **strong** and _emphasis_.

## Details

- first item
- second [link](https://example.com/?a=1&b=2)
"""


@pytest.fixture(name="sample_doc")
def sample_doc_fixture():
    return SAMPLE_DOC


@pytest.fixture(name="sample_path")
def sample_path_fixture():
    return Path("blog") / "sample-doc.md"


@pytest.fixture(name="fixed_now")
def fixed_now_fixture():
    return datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(name="make_record")
def make_record_fixture():
    """Factory for minimal DocumentRecords that bypass parsing."""
    def _make(slug: str, date: datetime, title: str = "") -> DocumentRecord:
        return DocumentRecord(
            title=title or slug,
            slug=slug,
            date=date,
            date_iso=date.strftime("%Y-%m-%d"),
            date_human=date.strftime("%B %d, %Y"),
            content="",
            source_path=f"blog/{slug}.md",
            output_path=f"blog/{slug}.html",
            href=f"{slug}.html",
        )
    return _make
