"""
Production FastAPI Application

Serve with: granian --interface asgi src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.command.seed_admin_use_case import SeedAdminUseCase
from src.service.museum.app.command.sign_up_user_use_case import SignUpUserUseCase


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Museum Service] Starting up...')

    setup()

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Museum Service] Dependency injection wired')

    await create_db_and_tables()
    Logger.base.info('🗄️  [Museum Service] Database tables ready')

    seed_admin = SeedAdminUseCase(
        sign_up_user_use_case=SignUpUserUseCase(
            user_command_repo=container.user_command_repo(),
            user_query_repo=container.user_query_repo(),
            password_hasher=container.password_hasher(),
        )
    )
    await seed_admin.execute(settings=container.config_service())

    Logger.base.info('✅ [Museum Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Museum Service] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Museum Service] Database engine disposed')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Museum Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(
    lifespan=lifespan,
    description='Museum Ticketing - visitor accounts, exhibitions, bookings, payments and the visitor assistant',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
