"""
Shared FastAPI App Factory

Common app setup for the production app (`event_booking.main`) and the test app.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, PlainTextResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from event_booking.platform.config.core_setting import settings
from event_booking.platform.constant import route_constant
from event_booking.platform.constant.path import PUBLIC_DIR
from event_booking.platform.exception.exception_handlers import register_exception_handlers
from event_booking.service.booking.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from event_booking.service.booking.driving_adapter.http_controller.event_controller import (
    router as event_router,
)
from event_booking.service.booking.driving_adapter.http_controller.user_controller import (
    router as user_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Event Booking Service',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(event_router, prefix=route_constant.EVENT_BASE, tags=['event'])
    app.include_router(user_router, prefix=route_constant.USER_BASE, tags=['user'])
    app.include_router(booking_router, prefix=route_constant.BOOKING_BASE, tags=['booking'])

    _register_common_endpoints(app)

    # Static front-end; mounted last so API routes take precedence
    if PUBLIC_DIR.is_dir():
        app.mount('/', StaticFiles(directory=PUBLIC_DIR), name='public')

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register root, health and metrics endpoints."""

    @app.get('/', include_in_schema=False)
    async def root() -> Response:
        """Serve the front-end when bundled, otherwise redirect to docs."""
        index = PUBLIC_DIR / 'index.html'
        if index.is_file():
            return FileResponse(index)
        return RedirectResponse(url='/docs')

    @app.get(route_constant.HEALTH)
    async def health_check() -> dict[str, str]:
        return {'status': 'OK', 'timestamp': datetime.now(timezone.utc).isoformat()}

    @app.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
