"""JSON:API view rendering entities, meta-only or empty documents."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from jsonapi_view.config import is_debug
from jsonapi_view.core.links import Link
from jsonapi_view.encoder import (
    Encoder,
    EncoderOptions,
    EncodingParameters,
    JSONOption,
    combine_json_options,
    dumps,
)
from jsonapi_view.exceptions import InvalidSerializeDirective
from jsonapi_view.pagination import get_pagination_links
from jsonapi_view.responses import JSONAPIResponse
from jsonapi_view.schemas.registry import SchemaFactory, SchemaRegistry
from jsonapi_view.schemas.registry import registry as default_registry
from jsonapi_view.utils.query_params import parse_query_params

from .directives import EncodingDirectives

logger = logging.getLogger(__name__)


class JSONAPIView:
    """Render view variables as one of the three supported JSON:API responses.

    - a body holding entity based resources (``data``)
    - an empty body
    - a body holding only the ``meta`` node

    Variables whose names are listed in ``special_vars`` are rendering
    directives; every other variable is a candidate for serialization.
    """

    special_vars: tuple[str, ...] = (
        "_url_prefix",
        "_with_jsonapi_version",
        "_entities",
        "_include",
        "_field_sets",
        "_links",
        "_meta",
        "_serialize",
        "_json_options",
        "_debug_pretty_print",
        "_debug_query_log",
        "_jsonp",
        "_pagination",
    )

    def __init__(
        self,
        view_vars: Mapping[str, Any] | None = None,
        *,
        registry: SchemaRegistry | None = None,
        debug: bool | None = None,
        query_logs: list[Any] | None = None,
    ) -> None:
        self.view_vars: dict[str, Any] = dict(view_vars or {})
        self.registry = registry or default_registry
        self.debug = is_debug() if debug is None else debug
        self.query_logs = list(query_logs or [])
        self._directives: EncodingDirectives | None = None

    def set(self, name: str | Mapping[str, Any], value: Any = None) -> "JSONAPIView":
        """Assign one view variable, or several from a mapping."""
        if isinstance(name, Mapping):
            self.view_vars.update(name)
        else:
            self.view_vars[name] = value
        self._directives = None
        return self

    def apply_query_params(self, params: Mapping[str, Any]) -> "JSONAPIView":
        """Set ``_include`` and ``_field_sets`` from JSON:API query parameters."""
        parsed = parse_query_params(params)
        if parsed["include"] is not None:
            self.set("_include", parsed["include"])
        if parsed["fields"]:
            self.set("_field_sets", parsed["fields"])
        return self

    @property
    def directives(self) -> EncodingDirectives:
        if self._directives is None:
            self._directives = EncodingDirectives.model_validate(self.view_vars)
        return self._directives

    @property
    def url_prefix(self) -> str | None:
        return self.directives.url_prefix

    def render(self) -> str:
        """Return the document text, or an empty string for an empty body."""
        self._check_serialize_directive(self.view_vars.get("_serialize"))

        if self.directives.entities is not None:
            json_text = self._encode_with_schemas()
        else:
            json_text = self._encode_without_schemas()

        # The query log is only exposed when configured AND in debug mode.
        if self.debug and self.directives.debug_query_log is True:
            document = json.loads(json_text) if json_text else {}
            document["query"] = self.query_logs
            json_text = dumps(document, self._json_options())

        return json_text

    def render_response(self, status_code: int = 200) -> JSONAPIResponse:
        """Render and wrap the document in a ``application/vnd.api+json`` response."""
        return JSONAPIResponse(content=self.render(), status_code=status_code)

    def _encode_without_schemas(self) -> str:
        if self.directives.meta is False:
            logger.debug("Rendering empty body")
            return ""

        logger.debug("Rendering meta-only document")
        encoder = Encoder.instance(
            {}, EncoderOptions(self._json_options(), self.directives.url_prefix)
        )
        return encoder.encode_meta(self.directives.meta)

    def _encode_with_schemas(self) -> str:
        directives = self.directives
        schemas = self._entities_to_schemas(directives.entity_names())

        encoder = Encoder.instance(
            schemas, EncoderOptions(self._json_options(), directives.url_prefix)
        )

        serialize = None
        if directives.serialize is not None and directives.serialize is not False:
            serialize = self._get_data_to_serialize(directives.serialize)

        # Explicit include paths take precedence over schema default include paths.
        parameters = EncodingParameters.create(directives.include, directives.field_sets)

        if directives.with_jsonapi_version:
            if isinstance(directives.with_jsonapi_version, dict):
                encoder.with_jsonapi_version(directives.with_jsonapi_version)
            else:
                encoder.with_jsonapi_version()

        if directives.links:
            encoder.with_links(self._get_literal_links(directives.links))

        if directives.pagination is not None:
            encoder.with_links(get_pagination_links(directives.pagination))

        if directives.meta:
            if self._is_empty(serialize):
                logger.debug("Nothing to serialize, rendering meta-only document")
                return encoder.encode_meta(directives.meta)
            encoder.with_meta(directives.meta)

        return encoder.encode_data(serialize, parameters)

    def _entities_to_schemas(self, entity_names: list[str]) -> dict[type, SchemaFactory]:
        """Map configured entity names to schema factories keyed by entity class."""
        schemas: dict[type, SchemaFactory] = {}
        for entity_name in entity_names:
            entity_class, factory = self.registry.resolve(entity_name, self)
            schemas[entity_class] = factory
        return schemas

    def _get_data_to_serialize(self, serialize: bool | str | list[str]) -> Any:
        """Return the value of the view variable named by ``serialize``.

        ``True`` selects the first variable that is not a rendering directive.
        This is order dependent; prefer naming the variable explicitly.
        """
        if serialize is True:
            candidates = [
                name for name in self.view_vars if name not in self.special_vars
            ]
            if not candidates:
                return None
            logger.debug("Serializing inferred view variable %s", candidates[0])
            return self.view_vars[candidates[0]]

        if isinstance(serialize, list):
            if not serialize:
                return None
            serialize = serialize[0]

        return self.view_vars.get(serialize)

    def _check_serialize_directive(self, serialize: Any) -> None:
        if serialize is None or isinstance(serialize, (bool, str)):
            return
        if isinstance(serialize, (list, tuple)) and all(isinstance(item, str) for item in serialize):
            return
        raise InvalidSerializeDirective(
            'Assigning an object to "_serialize" is not supported, assign the object '
            'to its own view variable and set "_serialize" to its name or True instead.'
        )

    def _get_literal_links(self, links: Mapping[str, Any]) -> dict[str, Any]:
        return {
            name: Link(link, treat_as_href=True) if isinstance(link, str) else link
            for name, link in links.items()
        }

    def _json_options(self) -> JSONOption:
        """Return the combined JSON flags, forcing pretty printing in debug mode."""
        json_options = combine_json_options(self.directives.json_options)

        if not self.debug:
            return json_options

        if self.directives.debug_pretty_print:
            json_options |= JSONOption.PRETTY_PRINT

        return json_options

    @staticmethod
    def _is_empty(serialize: Any) -> bool:
        return serialize is None or (isinstance(serialize, (list, tuple)) and not serialize)
