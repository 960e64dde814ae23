from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from event_booking.platform.exception.exceptions import CustomBaseError
from event_booking.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Collapse pydantic errors into one line, e.g. `event_id: Input should be a valid integer`."""
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get('loc', ()) if p not in ('body', 'path', 'query')]
        field = '.'.join(loc)
        msg = err.get('msg', 'Invalid value')
        parts.append(f'{field}: {msg}' if field else msg)
    return '; '.join(parts) or 'Invalid request'


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    if error.status_code >= 500:
        Logger.base.error(f'{request.method} {request.url.path} -> {type(error).__name__}: {error}')
    return JSONResponse(status_code=error.status_code, content={'error': error.message})


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'error': _describe_validation_errors(error)},
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={'error': str(exc.detail)},
            headers=getattr(exc, 'headers', None),
        )
    return await general_500_exception_handler(request, exc)


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(
        f'Unhandled {type(exc).__name__} on {request.method} {request.url.path}'
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'error': 'Internal server error'},
    )


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
