"""Document-level errors raised while parsing metadata and building records"""


class BlogpubError(ValueError):
    """Base class for errors that fail a single document's build."""


class MalformedMetadata(BlogpubError):
    """Opening '---' delimiter without a matching closing delimiter."""


class OrphanListItem(BlogpubError):
    """List item line found before any list key was declared."""


class InvalidDate(BlogpubError):
    """Explicit date value is not a YYYY-MM-DD calendar date."""
