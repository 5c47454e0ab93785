"""Helpers for JSON:API query parameter parsing."""

from __future__ import annotations

from typing import Any, Mapping


def _split_csv(value: str) -> list[str]:
    return [item for item in (part.strip() for part in value.split(",")) if item]


def parse_query_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize the ``include`` and ``fields[type]`` query parameter families.

    ``include`` is ``None`` when the parameter is absent so that schema default
    include paths still apply.
    """
    normalized: dict[str, Any] = {"include": None, "fields": {}}

    for key, value in params.items():
        if value is None:
            continue
        raw_value = str(value)
        if key == "include":
            normalized["include"] = _split_csv(raw_value)
        elif key.startswith("fields[") and key.endswith("]"):
            resource_type = key[len("fields[") : -1]
            normalized["fields"][resource_type] = _split_csv(raw_value)

    return normalized
