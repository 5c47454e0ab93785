"""JSON:API document encoder."""

from .encoder import Encoder
from .options import EncoderOptions, JSONOption, combine_json_options, dumps
from .parameters import EncodingParameters
from .walker import ResourceGraphWalker

__all__ = [
    "Encoder",
    "EncoderOptions",
    "EncodingParameters",
    "JSONOption",
    "ResourceGraphWalker",
    "combine_json_options",
    "dumps",
]
