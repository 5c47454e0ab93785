"""Render entities as JSON:API documents."""

from .core.document import JSONAPIDocumentBuilder
from .core.errors import JSONAPIErrorBuilder
from .core.links import Link
from .encoder import Encoder, EncoderOptions, EncodingParameters, JSONOption
from .exceptions import InvalidSerializeDirective, JSONAPIViewError, UnresolvableResourceType
from .schemas import (
    DynamicEntitySchema,
    JSONAPISchema,
    Relationship,
    SchemaRegistry,
    register_entity,
    register_schema,
)
from .views import JSONAPIView

__all__ = [
    "DynamicEntitySchema",
    "Encoder",
    "EncoderOptions",
    "EncodingParameters",
    "InvalidSerializeDirective",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "JSONAPISchema",
    "JSONAPIView",
    "JSONAPIViewError",
    "JSONOption",
    "Link",
    "Relationship",
    "SchemaRegistry",
    "UnresolvableResourceType",
    "register_entity",
    "register_schema",
]
