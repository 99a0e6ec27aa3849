"""
Production FastAPI Application

Booking engine service: catalog, showtime scheduling and seat booking over HTTP.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Booking Engine] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Booking Engine] Dependency injection wired')

    setup()
    Logger.base.info('✅ [Booking Engine] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Booking Engine] Shutting down...')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Booking Engine] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
