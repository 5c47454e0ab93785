"""JSON:API error handling middleware."""

import logging
from typing import Any

from jsonapi_view.core.errors import JSONAPIErrorBuilder
from jsonapi_view.encoder.options import dumps
from jsonapi_view.responses import JSONAPIResponse

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert exceptions escaping the app into JSON:API error documents."""

    def __init__(self, app: Any, error_builder: JSONAPIErrorBuilder | None = None) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.error_builder = error_builder or JSONAPIErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return
        try:
            await self.app(scope, receive, send)
        except Exception as exc:  # noqa: BLE001 - last resort handler
            logger.exception("Unhandled error while rendering %s", scope.get("path"))
            document = self.error_builder.error_document(
                [self.error_builder.from_exception(exc)]
            )
            response = JSONAPIResponse(content=dumps(document), status_code=500)
            await response(scope, receive, send)
