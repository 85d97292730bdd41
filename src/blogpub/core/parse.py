"""File discovery and document loading from a blog directory"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from blogpub.core.collection import sort_records
from blogpub.core.models import DocumentRecord
from blogpub.core.records import EXCERPT_LIMIT, build_record


DEFAULT_EXTENSION = ".md"


def discover_files(path: Path, extension: str = DEFAULT_EXTENSION) -> list[Path]:
    """Return lexicographically sorted files with extension directly under path, or [path] if a file."""
    path = Path(path)
    if path.is_file():
        return [path] if path.suffix == extension else []
    return sorted(p for p in path.glob(f"*{extension}") if p.is_file())


def _mod_time(path: Path) -> Optional[datetime]:
    """Return the file's modification time as a local datetime, or None if stat fails."""
    try:
        return datetime.fromtimestamp(path.stat().st_mtime).astimezone()
    except OSError:
        return None


def load_document(
    path: Path,
    output_dir: Optional[Path] = None,
    excerpt_limit: int = EXCERPT_LIMIT,
    now: Optional[datetime] = None,
    ) -> DocumentRecord:
    """Read a single document from disk and build its record."""
    raw = path.read_text(encoding="utf-8")
    return build_record(
        path, raw,
        mod_time=_mod_time(path),
        now=now or datetime.now().astimezone(),
        output_dir=output_dir,
        excerpt_limit=excerpt_limit,
    )


def load_records(
    path: Path,
    extension: str = DEFAULT_EXTENSION,
    output_dir: Optional[Path] = None,
    excerpt_limit: int = EXCERPT_LIMIT,
    now: Optional[datetime] = None,
    ) -> list[DocumentRecord]:
    """Load every document under path and return them newest first.

    Fails fast: the first document that cannot be built aborts the batch.
    """
    now = now or datetime.now().astimezone()
    records = []
    for p in discover_files(Path(path), extension):
        try:
            records.append(load_document(p, output_dir, excerpt_limit, now))
        except (ValueError, OSError) as e:
            raise RuntimeError(f"Failed to parse {p}: {e}") from e
    return sort_records(records)
