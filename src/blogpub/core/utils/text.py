"""Plain-text helpers: excerpts, name casing, and author bylines"""

ELLIPSIS = "…"


def make_excerpt(text: str, limit: int = 220) -> str:
    """Collapse whitespace and cut at the last space within limit, appending an ellipsis."""
    words = text.split()
    if not words:
        return ""
    joined = " ".join(words)
    if len(joined) <= limit:
        return joined
    cut = joined.rfind(" ", 0, limit)
    if cut == -1:
        cut = limit
    return joined[:cut].strip() + ELLIPSIS


def tidy_name(name: str) -> str:
    """Capitalise the first letter of each word and lower-case the rest."""
    return " ".join(w[0].upper() + w[1:].lower() for w in name.split())


def clean_authors(authors: list[str]) -> list[str]:
    """Trim and name-case authors, dropping empty entries."""
    return [tidy_name(a) for a in authors if a.strip()]


def format_byline(authors: list[str]) -> str:
    """Join cleaned names: 'A', 'A & B', or 'A, B, & C'."""
    names = clean_authors(authors)
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} & {names[1]}"
    return ", ".join(names[:-1]) + ", & " + names[-1]
