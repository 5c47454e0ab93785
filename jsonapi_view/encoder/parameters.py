"""Encoding parameters: include paths and sparse fieldsets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

IncludeTree = dict[str, "IncludeTree"]


def build_include_tree(paths: Iterable[str]) -> IncludeTree:
    """Turn ``["author", "comments.author"]`` into nested relationship names."""
    tree: IncludeTree = {}
    for path in paths:
        node = tree
        for part in (part.strip() for part in path.split(".")):
            if not part:
                break
            node = node.setdefault(part, {})
    return tree


@dataclass(frozen=True)
class EncodingParameters:
    """Caller supplied include paths and fieldsets.

    ``include_paths`` of ``None`` means the caller supplied none and schema
    default include paths apply; an empty list disables inclusion.
    """

    include_paths: tuple[str, ...] | None = None
    field_sets: Mapping[str, tuple[str, ...]] | None = None

    @classmethod
    def create(
        cls,
        include_paths: Iterable[str] | None = None,
        field_sets: Mapping[str, Iterable[str]] | None = None,
    ) -> "EncodingParameters":
        return cls(
            include_paths=None if include_paths is None else tuple(include_paths),
            field_sets=None
            if field_sets is None
            else {type_: tuple(fields) for type_, fields in field_sets.items()},
        )

    def fields_for(self, resource_type: str) -> frozenset[str] | None:
        """Return allowed field names for ``resource_type`` or ``None`` if unrestricted."""
        if not self.field_sets or resource_type not in self.field_sets:
            return None
        return frozenset(self.field_sets[resource_type])

    def filter_fields(self, resource_type: str, values: Mapping[str, Any]) -> dict[str, Any]:
        allowed = self.fields_for(resource_type)
        if allowed is None:
            return dict(values)
        return {name: value for name, value in values.items() if name in allowed}
