"""Block rendering: paragraphs, headings, and bullet lists from body lines"""

from blogpub.core.models import RenderedBlock
from blogpub.core.render.inline import render_inline, strip_inline


BLOCK_INDENT = "      "
ITEM_INDENT = BLOCK_INDENT + "  "


def heading_level(line: str) -> int:
    """Return heading level (1-6) for '# Title' style lines, else 0."""
    count = len(line) - len(line.lstrip("#"))
    if count == 0 or count > 6:
        return 0
    if line[count:count + 1] != " ":
        return 0
    return count


def render_block(body: str) -> RenderedBlock:
    """Render body text to an HTML fragment in a single pass over its lines.

    The first level-1 heading is consumed as the implicit title and not emitted;
    the first flushed paragraph is captured as plain text for excerpting.
    """
    out: list[str] = []
    paragraph: list[str] = []
    first_paragraph = ""
    title = ""
    in_list = False

    def flush_paragraph() -> None:
        nonlocal first_paragraph
        if not paragraph:
            return
        raw = " ".join(paragraph)
        if not first_paragraph:
            first_paragraph = strip_inline(raw)
        out.append(f"{BLOCK_INDENT}<p>{render_inline(raw)}</p>\n")
        paragraph.clear()

    def close_list() -> None:
        nonlocal in_list
        if in_list:
            out.append(f"{BLOCK_INDENT}</ul>\n")
            in_list = False

    for line in body.split("\n"):
        trimmed = line.rstrip(" \t").strip()
        if not trimmed:
            flush_paragraph()
            close_list()
            continue

        level = heading_level(trimmed)
        if level:
            flush_paragraph()
            close_list()
            text = trimmed[level:].strip()
            if level == 1 and not title:
                title = strip_inline(text)
                continue
            out.append(f"{BLOCK_INDENT}<h{level}>{render_inline(text)}</h{level}>\n")
            continue

        if trimmed.startswith("- "):
            flush_paragraph()
            if not in_list:
                out.append(f"{BLOCK_INDENT}<ul>\n")
                in_list = True
            out.append(f"{ITEM_INDENT}<li>{render_inline(trimmed[2:].strip())}</li>\n")
            continue

        paragraph.append(trimmed)

    flush_paragraph()
    close_list()

    return RenderedBlock(
        html="".join(out),
        first_paragraph=first_paragraph.strip(),
        title=title.strip() or None,
    )
