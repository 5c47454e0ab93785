"""Base schema describing how entities map to JSON:API resource objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from jsonapi_view.core.links import Link
from jsonapi_view.utils.inflector import tableize


@dataclass
class Relationship:
    """Related entity (or ordered sequence of entities) plus optional links and meta."""

    data: Any = None
    links: Mapping[str, Link] = field(default_factory=dict)
    meta: Mapping[str, Any] | None = None
    show_data: bool = True

    @property
    def is_many(self) -> bool:
        return isinstance(self.data, (list, tuple))

    def targets(self) -> list[Any]:
        """Return related entities as a list, skipping empty to-one values."""
        if self.data is None:
            return []
        if self.is_many:
            return [item for item in self.data if item is not None]
        return [self.data]


class JSONAPISchema:
    """Describe an entity type as JSON:API resource objects.

    Subclass per entity and set ``Meta``. Instances are bound to the entity
    name and the rendering view and must not keep state between renders.
    """

    class Meta:
        """Schema metadata (type, attribute fields, relationships, include paths)."""

        type_: str = ""
        fields: list[str] = []
        relationships: list[str] = []
        include_paths: list[str] = []

    def __init__(self, view: Any = None, entity_name: str = "") -> None:
        self.view = view
        self.entity_name = entity_name

    @property
    def url_prefix(self) -> str | None:
        return getattr(self.view, "url_prefix", None)

    def get_type(self) -> str:
        """Return the JSON:API resource type."""
        type_ = getattr(self.Meta, "type_", "")
        if type_:
            return type_
        return tableize(self.entity_name)

    def get_id(self, instance: Any) -> str:
        """Return the resource id as a string."""
        value = getattr(instance, "id", None)
        return "" if value is None else str(value)

    def get_attributes(self, instance: Any) -> dict[str, Any]:
        """Return every attribute of the instance; sparse fieldsets are applied later."""
        fields = [name for name in getattr(self.Meta, "fields", []) if name != "id"]
        return {name: getattr(instance, name, None) for name in fields}

    def get_relationships(self, instance: Any) -> dict[str, Relationship]:
        """Return relationships declared in ``Meta.relationships``."""
        return {
            name: Relationship(
                data=getattr(instance, name, None),
                links=self.get_relationship_links(instance, name),
            )
            for name in getattr(self.Meta, "relationships", [])
        }

    def get_links(self, instance: Any) -> dict[str, Link]:
        """Return resource level links (``self`` when a url prefix is configured)."""
        if not self.url_prefix:
            return {}
        return {Link.SELF: Link(self._self_path(instance))}

    def get_relationship_links(self, instance: Any, relationship: str) -> dict[str, Link]:
        if not self.url_prefix:
            return {}
        resource_path = self._self_path(instance)
        return {
            Link.SELF: Link(f"{resource_path}/relationships/{relationship}"),
            Link.RELATED: Link(f"{resource_path}/{relationship}"),
        }

    def get_meta(self, instance: Any) -> dict[str, Any] | None:
        """Return resource level meta, if any."""
        return None

    def get_include_paths(self) -> list[str]:
        """Return include paths used when the caller does not supply any."""
        return list(getattr(self.Meta, "include_paths", []))

    def _self_path(self, instance: Any) -> str:
        return f"/{self.get_type()}/{self.get_id(instance)}"
