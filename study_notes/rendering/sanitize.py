from __future__ import annotations

from urllib.parse import urlsplit

from bs4 import BeautifulSoup, Comment


ALLOWED_TAGS = frozenset(
    {
        "p", "ul", "ol", "li", "strong", "b", "em", "i", "br", "hr",
        "h1", "h2", "h3", "h4", "h5", "h6",
        "blockquote", "code", "pre", "a",
    }
)
ALLOWED_ATTRIBUTES: dict[str, frozenset[str]] = {"a": frozenset({"href", "title"})}

# Removed together with everything inside them.
_DROP_WITH_CONTENT = ("script", "style", "iframe", "object", "embed", "noscript", "template")

_SAFE_SCHEMES = frozenset({"", "http", "https", "mailto"})


def _is_safe_href(value: str) -> bool:
    try:
        scheme = urlsplit(value.strip()).scheme
    except ValueError:
        return False
    return scheme.lower() in _SAFE_SCHEMES


def sanitize_html(markup: str) -> str:
    """Reduce markup to an allow-listed subset of tags and attributes.

    Active content is dropped with its content, unknown tags are unwrapped so
    their text survives, and event handlers and unsafe links are stripped.
    """
    soup = BeautifulSoup(markup, "html.parser")

    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()

    for tag in soup.find_all(_DROP_WITH_CONTENT):
        if not tag.decomposed:
            tag.decompose()

    for tag in soup.find_all(True):
        if tag.name not in ALLOWED_TAGS:
            tag.unwrap()
            continue
        allowed = ALLOWED_ATTRIBUTES.get(tag.name, frozenset())
        attrs = {}
        for name, value in tag.attrs.items():
            if name not in allowed:
                continue
            if name == "href" and not _is_safe_href(str(value)):
                continue
            attrs[name] = value
        tag.attrs = attrs

    return str(soup)
