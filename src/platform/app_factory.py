"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import (
    ADMIN_BASE,
    API_BASE,
    AUTH_BASE,
    CHATBOT_BASE,
    EXHIBITION_BASE,
    HEALTH,
    PAYMENT_BASE,
    TICKET_BASE,
    TICKET_TYPES,
)
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.museum.driving_adapter.http_controller.admin_controller import (
    router as admin_router,
)
from src.service.museum.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from src.service.museum.driving_adapter.http_controller.chatbot_controller import (
    router as chatbot_router,
)
from src.service.museum.driving_adapter.http_controller.exhibition_controller import (
    router as exhibition_router,
    ticket_type_router,
)
from src.service.museum.driving_adapter.http_controller.payment_controller import (
    router as payment_router,
)
from src.service.museum.driving_adapter.http_controller.user_controller import (
    auth_router,
    router as user_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Museum Ticketing',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    title = f'{settings.PROJECT_NAME}{title_suffix}'

    app = FastAPI(
        title=title,
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(user_router, prefix=API_BASE, tags=['auth'])
    app.include_router(user_router, prefix=AUTH_BASE, tags=['auth'])
    app.include_router(auth_router, prefix=AUTH_BASE, tags=['auth'])
    app.include_router(booking_router, prefix=TICKET_BASE, tags=['ticket'])
    app.include_router(exhibition_router, prefix=EXHIBITION_BASE, tags=['exhibition'])
    app.include_router(ticket_type_router, prefix=TICKET_TYPES, tags=['exhibition'])
    app.include_router(admin_router, prefix=ADMIN_BASE, tags=['admin'])
    app.include_router(chatbot_router, prefix=CHATBOT_BASE, tags=['chatbot'])
    app.include_router(payment_router, prefix=PAYMENT_BASE, tags=['payment'])

    # Register common endpoints
    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}
