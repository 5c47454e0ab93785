"""Per-render directives read from the reserved view variables."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from jsonapi_view.config import default_url_prefix


class EncodingDirectives(BaseModel):
    """Validated, immutable rendering directives.

    Field aliases are the reserved view variable names, e.g. ``_entities``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    url_prefix: str | None = Field(default_factory=default_url_prefix, alias="_url_prefix")
    with_jsonapi_version: bool | dict[str, Any] = Field(default=False, alias="_with_jsonapi_version")
    entities: list[str] | dict[str, Any] | None = Field(default=None, alias="_entities")
    include: list[str] | None = Field(default=None, alias="_include")
    field_sets: dict[str, list[str]] | None = Field(default=None, alias="_field_sets")
    links: dict[str, Any] | None = Field(default=None, alias="_links")
    meta: dict[str, Any] | Literal[False] | None = Field(default=None, alias="_meta")
    serialize: bool | str | list[str] | None = Field(default=None, alias="_serialize")
    json_options: list[int] = Field(default_factory=list, alias="_json_options")
    debug_pretty_print: bool = Field(default=True, alias="_debug_pretty_print")
    debug_query_log: bool = Field(default=False, alias="_debug_query_log")
    pagination: dict[str, Any] | None = Field(default=None, alias="_pagination")

    def entity_names(self) -> list[str]:
        """Return configured entity names in declaration order."""
        return list(self.entities or [])
