"""Response classes for JSON:API documents."""

from starlette.responses import Response

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class JSONAPIResponse(Response):
    """Response carrying already rendered JSON:API document text."""

    media_type = JSONAPI_MEDIA_TYPE
