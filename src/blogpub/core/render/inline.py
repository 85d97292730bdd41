"""Inline markup rendering: strong, emphasis, code spans, and links"""

from typing import NamedTuple, Optional


STRONG, EM, CODE = "strong", "em", "code"

_TEXT_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&#34;",
})
_ATTR_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&#34;",
    "'": "&#39;",
})
_MARKUP_TOKENS = ("**", "__", "*", "_", "`")


class LinkMatch(NamedTuple):
    """A recognised [text](url) link: characters consumed and rendered anchor."""
    consumed: int
    html: str


def escape_text(text: str) -> str:
    """Escape &, <, > and double quotes for HTML text content."""
    return text.translate(_TEXT_ESCAPES)


def escape_attr(text: str) -> str:
    """Escape text for a double-quoted attribute value, single quotes included."""
    return text.translate(_ATTR_ESCAPES)


def strip_inline(text: str) -> str:
    """Remove inline markup characters literally, without parsing them."""
    for token in _MARKUP_TOKENS:
        text = text.replace(token, "")
    return text


def match_link(text: str, start: int) -> Optional[LinkMatch]:
    """Try to match [text](url) at start (which must index a '['), else None."""
    close_text = text.find("]", start)
    if close_text == -1 or close_text + 1 >= len(text) or text[close_text + 1] != "(":
        return None
    close_url = text.find(")", close_text + 2)
    if close_url == -1:
        return None

    label = text[start + 1:close_text]
    url = text[close_text + 2:close_url]
    anchor = f'<a href="{escape_attr(url)}">{render_inline(label)}</a>'
    return LinkMatch(consumed=close_url + 1 - start, html=anchor)


def _toggle(stack: list[str], kind: str) -> str:
    """Close kind if it is the innermost open span, else open it. Returns the tag."""
    if stack and stack[-1] == kind:
        stack.pop()
        return f"</{kind}>"
    stack.append(kind)
    return f"<{kind}>"


def render_inline(text: str) -> str:
    """Render inline markup in text to escaped HTML with balanced tags."""
    out: list[str] = []
    stack: list[str] = []
    i = 0

    while i < len(text):
        ch = text[i]
        if text.startswith("**", i):
            out.append(_toggle(stack, STRONG))
            i += 2
            continue
        if ch in "*_":
            out.append(_toggle(stack, EM))
        elif ch == "`":
            out.append(_toggle(stack, CODE))
        elif ch == "[" and (link := match_link(text, i)) is not None:
            out.append(link.html)
            i += link.consumed
            continue
        else:
            out.append(escape_text(ch))
        i += 1

    # Force-close unterminated spans, innermost first.
    while stack:
        out.append(f"</{stack.pop()}>")
    return "".join(out)
