"""Root test configuration: isolate tests from user config and environment"""

import pytest

from blogpub.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove BLOGPUB_* env vars so settings come only from what a test sets."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"BLOGPUB_{name.upper()}", raising=False)


@pytest.fixture(name="blog_dir")
def blog_dir_fixture(tmp_path):
    """A blog directory with two dated posts and one non-document file."""
    blog = tmp_path / "blog"
    blog.mkdir()
    (blog / "first-post.md").write_text(
        "---\ntitle: First Post\ndate: 2024-06-01\nauthors:\n- ada lovelace\n---\n\nHello **there**.\n",
        encoding="utf-8",
    )
    (blog / "second-post.md").write_text(
        "---\ndate: 2025-01-01\ntags:\n- python\n- notes\n---\n# Second Post\n\nMore *text* here.\n",
        encoding="utf-8",
    )
    (blog / "notes.txt").write_text("not a post", encoding="utf-8")
    return blog
