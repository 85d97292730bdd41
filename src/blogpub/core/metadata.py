"""Metadata block extraction: '---' delimited key/value and key/list header"""

from blogpub.core.errors import MalformedMetadata, OrphanListItem
from blogpub.core.models import MetadataBlock


DELIMITER = "---"
BOM = "\ufeff"


def parse_metadata(lines: list[str]) -> MetadataBlock:
    """Parse the lines between the delimiters into a MetadataBlock."""
    meta = MetadataBlock()
    list_key = None

    for line in lines:
        trimmed = line.strip()
        if not trimmed:
            continue

        if trimmed.startswith("- "):
            if list_key is None:
                raise OrphanListItem(f"List item outside a key: {trimmed!r}")
            value = trimmed[2:].strip()
            if value:
                meta.lists[list_key].append(value)
            continue

        list_key = None
        key, sep, value = trimmed.partition(":")
        if not sep:
            continue
        key, value = key.strip().lower(), value.strip()
        if value:
            meta.lists.pop(key, None)
            meta.scalars[key] = value
        else:
            meta.scalars.pop(key, None)
            meta.lists.setdefault(key, [])
            list_key = key

    return meta


def extract(raw: str) -> tuple[MetadataBlock, str]:
    """Return (metadata, body) with the optional metadata header removed.

    Raises MalformedMetadata when the opening delimiter has no closing match.
    """
    raw = raw.lstrip(BOM)
    lines = raw.split("\n")
    if lines[0].strip() != DELIMITER:
        return MetadataBlock(), raw.strip()

    for end, line in enumerate(lines[1:], start=1):
        if line.strip() == DELIMITER:
            break
    else:
        raise MalformedMetadata("Missing closing metadata delimiter '---'")

    meta = parse_metadata(lines[1:end])
    body = "\n".join(lines[end + 1:])
    return meta, body.strip()
