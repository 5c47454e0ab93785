"""Core JSON:API document, link and error helpers."""

from .document import JSONAPIDocumentBuilder
from .errors import JSONAPIErrorBuilder
from .links import Link, render_links

__all__ = ["JSONAPIDocumentBuilder", "JSONAPIErrorBuilder", "Link", "render_links"]
