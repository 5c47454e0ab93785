"""Walk primary resources and their relationship graph into ``data``/``included``."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable

from jsonapi_view.core.links import render_links
from jsonapi_view.schemas.base import JSONAPISchema, Relationship

from .parameters import EncodingParameters, IncludeTree, build_include_tree

ResourceKey = tuple[str, str]


def is_collection(data: Any) -> bool:
    return isinstance(data, (list, tuple))


class ResourceGraphWalker:
    """Build resource objects for primary data and included resources.

    The walk uses a work-list of ``(entity, schema, include subtree)`` items.
    A resource is rendered at most once per ``(type, id)``; an item is walked
    at most once per ``(type, id, subtree)`` so cyclic graphs terminate and
    depth is bounded by the include paths.
    """

    def __init__(
        self,
        schema_for: Callable[[Any], JSONAPISchema],
        parameters: EncodingParameters,
        url_prefix: str | None = None,
    ) -> None:
        self._schema_for = schema_for
        self._parameters = parameters
        self._url_prefix = url_prefix
        self._default_trees: dict[str, IncludeTree] = {}
        self._requested_tree: IncludeTree | None = (
            None
            if parameters.include_paths is None
            else build_include_tree(parameters.include_paths)
        )

    def walk(self, data: Any) -> tuple[Any, list[dict[str, Any]]]:
        """Return the ``data`` node and the ``included`` resource objects."""
        primaries = list(data) if is_collection(data) else ([] if data is None else [data])
        rendered: set[ResourceKey] = set()
        resources: list[dict[str, Any]] = []
        pending: deque[tuple[Any, JSONAPISchema, IncludeTree]] = deque()

        for entity in primaries:
            schema = self._schema_for(entity)
            key = self._key(entity, schema)
            if key not in rendered:
                rendered.add(key)
                resources.append(self.resource_object(entity, schema))
            pending.append((entity, schema, self._include_tree(schema)))

        included: list[dict[str, Any]] = []
        walked: set[tuple[str, str, int]] = set()
        while pending:
            entity, schema, tree = pending.popleft()
            if not tree:
                continue
            marker = (*self._key(entity, schema), id(tree))
            if marker in walked:
                continue
            walked.add(marker)

            # Included paths are followed even when a fieldset hides the relationship.
            for name, relationship in schema.get_relationships(entity).items():
                subtree = tree.get(name)
                if subtree is None:
                    continue
                for target in relationship.targets():
                    target_schema = self._schema_for(target)
                    key = self._key(target, target_schema)
                    if key not in rendered:
                        rendered.add(key)
                        included.append(self.resource_object(target, target_schema))
                    pending.append((target, target_schema, subtree))

        if is_collection(data):
            return resources, included
        return (resources[0] if resources else None), included

    def resource_object(self, entity: Any, schema: JSONAPISchema) -> dict[str, Any]:
        """Render one resource object, applying the sparse fieldset of its type."""
        resource_type = schema.get_type()
        resource: dict[str, Any] = {"type": resource_type, "id": schema.get_id(entity)}
        attributes = self._parameters.filter_fields(resource_type, schema.get_attributes(entity))
        if attributes:
            resource["attributes"] = attributes
        relationships: dict[str, Any] = {}
        for name, relationship in self._relationships(entity, schema).items():
            relationship_object = self._relationship_object(relationship)
            if relationship_object:
                relationships[name] = relationship_object
        if relationships:
            resource["relationships"] = relationships
        links = render_links(schema.get_links(entity), self._url_prefix)
        if links:
            resource["links"] = links
        meta = schema.get_meta(entity)
        if meta:
            resource["meta"] = dict(meta)
        return resource

    def _relationships(self, entity: Any, schema: JSONAPISchema) -> dict[str, Relationship]:
        return self._parameters.filter_fields(schema.get_type(), schema.get_relationships(entity))

    def _relationship_object(self, relationship: Relationship) -> dict[str, Any]:
        rendered: dict[str, Any] = {}
        if relationship.show_data:
            rendered["data"] = self._linkage(relationship)
        links = render_links(relationship.links, self._url_prefix)
        if links:
            rendered["links"] = links
        if relationship.meta:
            rendered["meta"] = dict(relationship.meta)
        return rendered

    def _linkage(self, relationship: Relationship) -> Any:
        identifiers = [self._identifier(target) for target in relationship.targets()]
        if relationship.is_many:
            return identifiers
        return identifiers[0] if identifiers else None

    def _identifier(self, entity: Any) -> dict[str, str]:
        schema = self._schema_for(entity)
        resource_type, resource_id = self._key(entity, schema)
        return {"type": resource_type, "id": resource_id}

    def _include_tree(self, schema: JSONAPISchema) -> IncludeTree:
        if self._requested_tree is not None:
            return self._requested_tree
        resource_type = schema.get_type()
        if resource_type not in self._default_trees:
            self._default_trees[resource_type] = build_include_tree(schema.get_include_paths())
        return self._default_trees[resource_type]

    @staticmethod
    def _key(entity: Any, schema: JSONAPISchema) -> ResourceKey:
        return schema.get_type(), schema.get_id(entity)
