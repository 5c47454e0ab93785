"""Schemas describing entities as JSON:API resources."""

from .base import JSONAPISchema, Relationship
from .dynamic import DynamicEntitySchema
from .registry import SchemaRegistry, register_entity, register_schema, registry

__all__ = [
    "DynamicEntitySchema",
    "JSONAPISchema",
    "Relationship",
    "SchemaRegistry",
    "register_entity",
    "register_schema",
    "registry",
]
