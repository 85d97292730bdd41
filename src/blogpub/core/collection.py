"""Record ordering for the listing page"""

from typing import Iterable

from blogpub.core.models import Collection, DocumentRecord


def sort_records(records: Iterable[DocumentRecord]) -> list[DocumentRecord]:
    """Stable sort by date descending, equal dates by slug descending."""
    return sorted(records, key=lambda r: (r.date, r.slug), reverse=True)


def make_collection(records: Iterable[DocumentRecord]) -> Collection:
    """Wrap sorted records for the listing page template."""
    return Collection(posts=tuple(sort_records(records)))
