"""JSON:API document construction."""

from typing import Any, Iterable, Mapping

JSONAPI_VERSION = "1.0"


class JSONAPIDocumentBuilder:
    """Build JSON:API documents from already rendered resource objects."""

    def build_data(
        self,
        data: Mapping[str, Any] | Iterable[Mapping[str, Any]] | None,
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
        jsonapi: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a document for a single resource, a collection or ``null``."""
        document = self._top_level(jsonapi=jsonapi, meta=meta, links=links)
        if data is None:
            document["data"] = None
        elif isinstance(data, Mapping):
            document["data"] = dict(data)
        else:
            document["data"] = [dict(item) for item in data]
        if included:
            document["included"] = [dict(item) for item in included]
        return document

    def build_meta(self, meta: Mapping[str, Any] | None) -> dict[str, Any]:
        """Return a document holding only the top-level meta node."""
        return {"meta": dict(meta or {})}

    def build_jsonapi(self, meta: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Return the ``jsonapi`` version object."""
        node: dict[str, Any] = {"version": JSONAPI_VERSION}
        if meta:
            node["meta"] = dict(meta)
        return node

    def _top_level(
        self,
        *,
        jsonapi: Mapping[str, Any] | None,
        meta: Mapping[str, Any] | None,
        links: Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        document: dict[str, Any] = {}
        if jsonapi:
            document["jsonapi"] = dict(jsonapi)
        if meta:
            document["meta"] = dict(meta)
        if links:
            document["links"] = dict(links)
        return document
