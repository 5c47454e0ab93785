"""JSON:API views."""

from .base import JSONAPIView
from .directives import EncodingDirectives

__all__ = ["EncodingDirectives", "JSONAPIView"]
