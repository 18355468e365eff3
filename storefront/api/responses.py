"""Plain-text error responses shared by the routers."""
from fastapi.responses import PlainTextResponse

from storefront.utils.errors import StorefrontError, ServerError


def error_response(error: StorefrontError, status_code: int = None) -> PlainTextResponse:
    """Render a domain error as text, optionally overriding its status."""
    return PlainTextResponse(
        content=error.message,
        status_code=status_code or error.status_code,
    )


def server_error_response() -> PlainTextResponse:
    return error_response(ServerError())
