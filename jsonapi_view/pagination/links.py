"""Translate externally computed pagination URLs into top-level links."""

from __future__ import annotations

from typing import Any, Mapping

from jsonapi_view.core.links import Link

PAGINATION_LINKS = (Link.SELF, Link.FIRST, Link.LAST, Link.PREV, Link.NEXT)


def get_pagination_links(pagination: Mapping[str, Any]) -> dict[str, Link | None]:
    """Return pagination links keyed by name.

    Every well known name is present; names missing from ``pagination`` map to
    ``None`` and are dropped when the document is rendered.
    """
    links: dict[str, Link | None] = dict.fromkeys(PAGINATION_LINKS)
    for name in PAGINATION_LINKS:
        url = pagination.get(name)
        if url is not None:
            links[name] = Link(url, treat_as_href=True)
    return links
