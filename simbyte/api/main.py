from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from .. import __version__
from .routes import router
from ..core.registry import PluginRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Discover and register all available generators
    PluginRegistry.discover_generators()
    logger.info("SIMBYTE ready with %d generators", len(PluginRegistry.list_generators()))
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="SIMBYTE",
        description="Synthetic byte payloads with tunable compressibility",
        version=__version__,
        lifespan=lifespan
    )

    app.include_router(router)

    return app


app = create_app()
