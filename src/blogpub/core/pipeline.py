"""Pipeline orchestration: load, sort, and write a blog directory"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from blogpub.core.export import make_environment, write_site
from blogpub.core.models import DocumentRecord
from blogpub.core.parse import DEFAULT_EXTENSION, load_records
from blogpub.core.records import EXCERPT_LIMIT


def run_build(
    blog_dir: Path,
    output_dir: Optional[Path] = None,
    extension: str = DEFAULT_EXTENSION,
    excerpt_limit: int = EXCERPT_LIMIT,
    template_dir: Optional[Path] = None,
    now: Optional[datetime] = None,
    ) -> tuple[list[DocumentRecord], list[Path]]:
    """Build every document under blog_dir and write the site.

    Returns (records, written_paths). Writes nothing when no documents are found.
    """
    output_dir = Path(output_dir or blog_dir)
    records = load_records(blog_dir, extension, output_dir, excerpt_limit, now)
    if not records:
        return [], []
    written = write_site(records, output_dir, make_environment(template_dir))
    return records, written
