"""Interface layer error handling.

Every error leaves the API as plain text: this is what the browser client
shows in its alert boxes.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def _describe(exc: RequestValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location or 'body'}: {error.get('msg', 'invalid')}")
    return "; ".join(problems)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """Render HTTPException detail as plain text."""
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    """Map request validation failures to 400 Invalid payload."""
    message = f"Invalid payload: {_describe(exc)}"
    logfire.warn("Invalid payload", path=request.url.path, error=message)
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> PlainTextResponse:
    """Map anything uncaught to 500 with the error message."""
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return PlainTextResponse(
        str(exc) or "Server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the plain-text error handlers on an app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
