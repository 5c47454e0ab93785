"""Pagination link placement for JSON:API documents."""

from .links import PAGINATION_LINKS, get_pagination_links

__all__ = ["PAGINATION_LINKS", "get_pagination_links"]
