"""Encode entities into JSON:API document text."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from jsonapi_view.core.document import JSONAPIDocumentBuilder
from jsonapi_view.core.links import Link, render_links
from jsonapi_view.exceptions import UnresolvableResourceType
from jsonapi_view.schemas.base import JSONAPISchema

from .options import EncoderOptions, dumps
from .parameters import EncodingParameters
from .walker import ResourceGraphWalker


class Encoder:
    """Turn entities plus encoding parameters into a JSON:API document.

    ``schemas`` maps entity classes to schema factories. Factories are called
    at most once per entity class and encode call.
    """

    def __init__(
        self,
        schemas: Mapping[type, Callable[[], JSONAPISchema]],
        options: EncoderOptions | None = None,
        document_builder: JSONAPIDocumentBuilder | None = None,
    ) -> None:
        self.schemas = dict(schemas)
        self.options = options or EncoderOptions()
        self.document_builder = document_builder or JSONAPIDocumentBuilder()
        self._links: dict[str, Link | str | None] = {}
        self._meta: Mapping[str, Any] | None = None
        self._jsonapi: dict[str, Any] | None = None

    @classmethod
    def instance(
        cls,
        schemas: Mapping[type, Callable[[], JSONAPISchema]],
        options: EncoderOptions | None = None,
    ) -> "Encoder":
        return cls(schemas, options)

    def with_links(self, links: Mapping[str, Link | str | None]) -> "Encoder":
        """Add top-level links; later calls override earlier names.

        ``None`` values are placeholders and never replace an existing link.
        """
        for name, link in links.items():
            if link is None and self._links.get(name) is not None:
                continue
            self._links[name] = link
        return self

    def with_meta(self, meta: Mapping[str, Any]) -> "Encoder":
        """Add a top-level meta node next to ``data``."""
        self._meta = meta
        return self

    def with_jsonapi_version(self, meta: Mapping[str, Any] | None = None) -> "Encoder":
        """Add the top-level ``jsonapi`` node, optionally carrying custom meta."""
        self._jsonapi = self.document_builder.build_jsonapi(meta)
        return self

    def encode_data(self, data: Any, parameters: EncodingParameters | None = None) -> str:
        """Return the document text for ``data`` (entity, sequence of entities or None)."""
        return dumps(self.serialize_data(data, parameters), self.options.json_options)

    def encode_meta(self, meta: Mapping[str, Any] | None) -> str:
        """Return a document text holding only ``meta``."""
        return dumps(self.document_builder.build_meta(meta), self.options.json_options)

    def serialize_data(
        self, data: Any, parameters: EncodingParameters | None = None
    ) -> dict[str, Any]:
        """Return the document tree for ``data`` without converting it to text."""
        walker = ResourceGraphWalker(
            self._schema_resolver(),
            parameters or EncodingParameters(),
            self.options.url_prefix,
        )
        primary, included = walker.walk(data)
        return self.document_builder.build_data(
            primary,
            included=included,
            links=render_links(self._links, self.options.url_prefix),
            meta=self._meta,
            jsonapi=self._jsonapi,
        )

    def _schema_resolver(self) -> Callable[[Any], JSONAPISchema]:
        instances: dict[type, JSONAPISchema] = {}

        def schema_for(entity: Any) -> JSONAPISchema:
            entity_class = type(entity)
            if entity_class not in instances:
                instances[entity_class] = self._schema_factory(entity_class)()
            return instances[entity_class]

        return schema_for

    def _schema_factory(self, entity_class: type) -> Callable[[], JSONAPISchema]:
        for klass in entity_class.__mro__:
            factory = self.schemas.get(klass)
            if factory is not None:
                return factory
        raise UnresolvableResourceType(
            f"No schema is registered for entity class {entity_class.__name__}"
        )
