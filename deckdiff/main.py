import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deckdiff.api import cards_router, decks_router, health_router
from deckdiff.config import settings
from deckdiff.services.card_database import get_card_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the card catalog once before serving requests."""
    catalog = get_card_catalog()
    logger.info("Card catalog ready: %d unique names", len(catalog))
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("deckdiff"),
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(cards_router)
app.include_router(decks_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
