"""JSON:API link objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Link:
    """A link value; relative hrefs are prefixed with the url prefix on output."""

    SELF = "self"
    RELATED = "related"
    FIRST = "first"
    LAST = "last"
    PREV = "prev"
    NEXT = "next"

    href: str
    meta: Mapping[str, Any] | None = None
    treat_as_href: bool = False

    def to_value(self, url_prefix: str | None = None) -> str | dict[str, Any]:
        """Return the link as a string, or a link object when meta is present."""
        href = self.href
        if url_prefix and not self.treat_as_href:
            href = f"{url_prefix.rstrip('/')}{href}"
        if self.meta:
            return {"href": href, "meta": dict(self.meta)}
        return href


def render_links(
    links: Mapping[str, Any] | None, url_prefix: str | None = None
) -> dict[str, Any]:
    """Render a links mapping, dropping empty placeholders."""
    rendered: dict[str, Any] = {}
    for name, link in (links or {}).items():
        if link is None:
            continue
        if isinstance(link, Link):
            rendered[name] = link.to_value(url_prefix)
        else:
            rendered[name] = link
    return rendered
