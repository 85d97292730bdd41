"""Document record assembly: title, date, byline, excerpt, and output paths"""

import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from blogpub.core.errors import InvalidDate
from blogpub.core.metadata import extract
from blogpub.core.models import DocumentRecord
from blogpub.core.render.blocks import render_block
from blogpub.core.utils.slug import slug_from_path, title_from_slug
from blogpub.core.utils.text import clean_authors, format_byline, make_excerpt


DATE_RE = re.compile(r'^[0-9]{4}-[0-9]{2}-[0-9]{2}$')
EXCERPT_LIMIT = 220


def parse_date(value: str) -> datetime:
    """Parse a YYYY-MM-DD string to midnight UTC; raise InvalidDate otherwise."""
    if not DATE_RE.match(value):
        raise InvalidDate(f"Invalid date {value!r}: expected YYYY-MM-DD")
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d")
    except ValueError as e:
        raise InvalidDate(f"Invalid date {value!r}: {e}") from e
    return parsed.replace(tzinfo=timezone.utc)


def _aware(moment: datetime) -> datetime:
    """Interpret naive datetimes as local time so all record dates compare."""
    return moment if moment.tzinfo is not None else moment.astimezone()


def resolve_date(value: str, mod_time: Optional[datetime], now: Optional[datetime]) -> datetime:
    """Explicit metadata date, else file modification time, else now."""
    if value:
        return parse_date(value)
    if mod_time is not None:
        return _aware(mod_time)
    return _aware(now) if now is not None else datetime.now().astimezone()


def human_date(moment: datetime) -> str:
    """Format as 'January 2, 2006'."""
    return f"{moment:%B} {moment.day}, {moment.year}"


def build_record(
    path: Path,
    raw: str,
    mod_time: Optional[datetime] = None,
    now: Optional[datetime] = None,
    output_dir: Optional[Path] = None,
    excerpt_limit: int = EXCERPT_LIMIT,
    ) -> DocumentRecord:
    """Build a DocumentRecord from a document's path and raw text.

    Raises MalformedMetadata / OrphanListItem from metadata extraction, or
    InvalidDate for an unparsable explicit date.
    """
    path = Path(path)
    meta, body = extract(raw)
    rendered = render_block(body)

    slug = slug_from_path(path)
    title = meta.scalar("title") or rendered.title or title_from_slug(slug)
    date = resolve_date(meta.scalar("date"), mod_time, now)
    authors = meta.list("authors")

    # Fallback excerpts the raw body, markup included.
    excerpt = make_excerpt(rendered.first_paragraph, excerpt_limit)
    if not excerpt:
        excerpt = make_excerpt(body, excerpt_limit)

    target_dir = Path(output_dir) if output_dir is not None else path.parent
    href = f"{slug}.html"
    return DocumentRecord(
        title=title,
        slug=slug,
        authors=tuple(clean_authors(authors)),
        author_line=format_byline(authors),
        tags=tuple(meta.list("tags")),
        date=date,
        date_iso=date.strftime("%Y-%m-%d"),
        date_human=human_date(date),
        content=rendered.html,
        excerpt=excerpt,
        source_path=str(path),
        output_path=str(target_dir / href),
        href=href,
    )
