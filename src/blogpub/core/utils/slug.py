"""Slug and fallback-title derivation from document filenames"""

import re
from pathlib import Path


_WORD_SPLIT_RE = re.compile(r'[-_ /]+')


def slug_from_path(path: Path) -> str:
    """Return the filename stem used as the document slug."""
    return Path(path).stem


def title_from_slug(slug: str) -> str:
    """Convert 'my-first_post' to 'My First Post'; upper-case slug if no words remain."""
    words = [w for w in _WORD_SPLIT_RE.split(slug) if w]
    if not words:
        return slug.upper()
    return " ".join(w[0].upper() + w[1:] for w in words)
