"""Fallback schema that introspects entities at render time."""

from __future__ import annotations

from typing import Any

from sqlalchemy import inspect
from sqlalchemy.orm.attributes import NO_VALUE

from .base import JSONAPISchema, Relationship


class DynamicEntitySchema(JSONAPISchema):
    """Schema used for entities without an application provided schema.

    SQLAlchemy mapped entities expose their column attributes (except the
    ``id`` and foreign keys) and mapper relationships. Any other object
    exposes its public instance attributes; values that are registered
    entities, or lists of them, become relationships.
    """

    def get_attributes(self, instance: Any) -> dict[str, Any]:
        mapper = inspect(instance.__class__, raiseerr=False)
        if mapper is not None:
            return {
                prop.key: getattr(instance, prop.key)
                for prop in mapper.column_attrs
                if prop.key != "id" and not any(column.foreign_keys for column in prop.columns)
            }
        return {
            key: value
            for key, value in self._public_vars(instance).items()
            if not self._is_relationship_value(value)
        }

    def get_relationships(self, instance: Any) -> dict[str, Relationship]:
        mapper = inspect(instance.__class__, raiseerr=False)
        if mapper is not None:
            return {
                relationship.key: Relationship(
                    data=self._mapped_relationship_data(instance, relationship),
                    links=self.get_relationship_links(instance, relationship.key),
                )
                for relationship in mapper.relationships
            }
        return {
            key: Relationship(
                data=value,
                links=self.get_relationship_links(instance, key),
            )
            for key, value in self._public_vars(instance).items()
            if self._is_relationship_value(value)
        }

    def _public_vars(self, instance: Any) -> dict[str, Any]:
        if not hasattr(instance, "__dict__"):
            return {}
        return {
            key: value
            for key, value in vars(instance).items()
            if not key.startswith("_") and key != "id"
        }

    def _is_relationship_value(self, value: Any) -> bool:
        registry = getattr(self.view, "registry", None)
        if registry is None:
            return False
        if isinstance(value, (list, tuple)):
            return bool(value) and all(registry.is_entity(item) for item in value)
        return registry.is_entity(value)

    def _mapped_relationship_data(self, instance: Any, relationship: Any) -> Any:
        # Unloaded relationships render empty linkage instead of lazy loading.
        attr_state = inspect(instance).attrs[relationship.key]
        if attr_state.loaded_value is NO_VALUE:
            return [] if relationship.uselist else None
        related = getattr(instance, relationship.key)
        if relationship.uselist:
            return list(related or [])
        return related
