"""Utility helpers for query parsing and inflection."""

from .inflector import tableize
from .query_params import parse_query_params

__all__ = ["parse_query_params", "tableize"]
