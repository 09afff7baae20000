"""
Output sanitization for bookmark fields.

Two different rules apply to text leaving the API:

- `title` is escaped: markup characters become entities, so any tags render
  as literal text.
- `description` is sanitized: markup is parsed and only allow-listed tags and
  attributes survive. Event handlers, `<script>` and friends are stripped,
  while benign formatting such as `<strong>` is kept as-is.
"""
import html

from bleach.sanitizer import Cleaner


ALLOWED_DESCRIPTION_TAGS = frozenset({
    "a",
    "abbr",
    "b",
    "blockquote",
    "br",
    "code",
    "del",
    "div",
    "em",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hr",
    "i",
    "img",
    "ins",
    "li",
    "mark",
    "ol",
    "p",
    "pre",
    "s",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "u",
    "ul",
})

ALLOWED_DESCRIPTION_ATTRIBUTES = {
    "a": ["href", "title", "target"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
}

ALLOWED_DESCRIPTION_PROTOCOLS = frozenset({"http", "https", "mailto"})

_DESCRIPTION_CLEANER = Cleaner(
    tags=ALLOWED_DESCRIPTION_TAGS,
    attributes=ALLOWED_DESCRIPTION_ATTRIBUTES,
    protocols=ALLOWED_DESCRIPTION_PROTOCOLS,
    strip=True,
    strip_comments=True,
)


def escape_title(title: str) -> str:
    """
    Escape `&`, `<` and `>` so the title renders as plain text.

    Quotes are left alone: titles are only ever emitted as element text,
    never inside an attribute value.
    """
    return html.escape(title, quote=False)


def sanitize_description(description: str | None) -> str | None:
    """Strip unsafe tags and attributes from a description, keeping safe markup."""
    if description is None:
        return None
    return _DESCRIPTION_CLEANER.clean(description)
