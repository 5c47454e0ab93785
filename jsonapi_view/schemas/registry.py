"""Registry mapping entity names to entity classes and schemas."""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable

from jsonapi_view.exceptions import UnresolvableResourceType

from .base import JSONAPISchema
from .dynamic import DynamicEntitySchema

logger = logging.getLogger(__name__)

SchemaFactory = Callable[[], JSONAPISchema]


class SchemaRegistry:
    """Resolve entity names to ``(entity class, schema factory)`` pairs.

    Applications register their entity classes by name and, optionally, a
    schema per entity name. Entities without a registered schema are rendered
    with ``dynamic_schema``.
    """

    def __init__(
        self,
        *,
        entities: dict[str, type] | None = None,
        schemas: dict[str, type[JSONAPISchema]] | None = None,
        dynamic_schema: type[JSONAPISchema] = DynamicEntitySchema,
    ) -> None:
        self._entities: dict[str, type] = dict(entities or {})
        self._schemas: dict[str, type[JSONAPISchema]] = dict(schemas or {})
        self.dynamic_schema = dynamic_schema

    def register_entity(self, name: str, entity_class: type) -> type:
        """Register ``entity_class`` under ``name`` and return it."""
        self._entities[name] = entity_class
        return entity_class

    def register_schema(self, name: str, schema_class: type[JSONAPISchema]) -> type[JSONAPISchema]:
        """Register the schema used for the entity called ``name``."""
        self._schemas[name] = schema_class
        return schema_class

    def entity(self, name: str | None = None) -> Callable[[type], type]:
        """Class decorator registering an entity (defaults to the class name)."""

        def decorator(entity_class: type) -> type:
            return self.register_entity(name or entity_class.__name__, entity_class)

        return decorator

    def schema(self, name: str) -> Callable[[type[JSONAPISchema]], type[JSONAPISchema]]:
        """Class decorator registering a schema for the entity called ``name``."""

        def decorator(schema_class: type[JSONAPISchema]) -> type[JSONAPISchema]:
            return self.register_schema(name, schema_class)

        return decorator

    def entity_class(self, name: str) -> type | None:
        return self._entities.get(name)

    def schema_class(self, name: str) -> type[JSONAPISchema]:
        """Return the registered schema for ``name`` or the dynamic schema."""
        schema_class = self._schemas.get(name)
        if schema_class is None:
            logger.debug("No schema registered for %s, using %s", name, self.dynamic_schema.__name__)
            return self.dynamic_schema
        return schema_class

    def is_entity(self, value: Any) -> bool:
        """Return True if ``value`` is an instance of a registered entity class."""
        return isinstance(value, tuple(self._entities.values()))

    def resolve(self, entity_name: str, view: Any = None) -> tuple[type, SchemaFactory]:
        """Return the entity class and a schema factory bound to ``view``."""
        entity_class = self.entity_class(entity_name)
        if entity_class is None:
            raise UnresolvableResourceType(f"Cannot find entity class {entity_name}")
        schema_class = self.schema_class(entity_name)
        logger.debug("Resolved %s to %s", entity_name, schema_class.__name__)
        return entity_class, partial(schema_class, view, entity_name)


registry = SchemaRegistry()


def register_entity(name: str | None = None) -> Callable[[type], type]:
    """Register an entity class on the default registry."""
    return registry.entity(name)


def register_schema(name: str) -> Callable[[type[JSONAPISchema]], type[JSONAPISchema]]:
    """Register a schema class on the default registry."""
    return registry.schema(name)
