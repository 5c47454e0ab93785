"""Encoder options and JSON text formatting flags."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from functools import reduce
from operator import or_
from typing import Any, Iterable

from fastapi.encoders import jsonable_encoder


class JSONOption(enum.IntFlag):
    """Bit flags controlling how documents are written as text."""

    PRETTY_PRINT = 128
    UNESCAPED_UNICODE = 256
    SORT_KEYS = 4096


def combine_json_options(options: Iterable[int] | None) -> JSONOption:
    """OR every flag in ``options`` into a single value."""
    return JSONOption(reduce(or_, options or (), 0))


def dumps(document: Any, flags: int = 0) -> str:
    """Serialize a document tree according to ``flags``."""
    flags = JSONOption(flags)
    pretty = JSONOption.PRETTY_PRINT in flags
    return json.dumps(
        jsonable_encoder(document),
        ensure_ascii=JSONOption.UNESCAPED_UNICODE not in flags,
        sort_keys=JSONOption.SORT_KEYS in flags,
        allow_nan=False,
        indent=4 if pretty else None,
        separators=(",", ": ") if pretty else (",", ":"),
    )


@dataclass(frozen=True)
class EncoderOptions:
    """JSON flags and url prefix shared by one encoder."""

    json_options: int = 0
    url_prefix: str | None = None
