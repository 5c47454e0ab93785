"""Exceptions raised while rendering JSON:API documents."""


class JSONAPIViewError(Exception):
    """Base class for rendering errors."""

    code = "jsonapi_view_error"


class UnresolvableResourceType(JSONAPIViewError):
    """Raised when a resource name cannot be mapped to an entity class or schema."""

    code = "unresolvable_resource_type"


class InvalidSerializeDirective(JSONAPIViewError):
    """Raised when an object is assigned to the serialize directive."""

    code = "invalid_serialize_directive"
