"""
Health check endpoints.

Provides liveness and readiness checks with card catalog checks.
"""

import logging
from importlib.metadata import version as pkg_version
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from deckdiff.services.card_database import CardCatalog, get_card_catalog

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str | None = None
    cards_loaded: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health(
    catalog: Annotated[CardCatalog, Depends(get_card_catalog)],
) -> HealthResponse:
    """
    Liveness check.

    Returns healthy with the number of unique card names loaded.
    """
    return HealthResponse(
        status="healthy",
        version=pkg_version("deckdiff"),
        cards_loaded=len(catalog),
    )


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(response: Response) -> HealthResponse:
    """
    Readiness check.

    Returns ready if the card catalog is loaded or can be loaded.
    Returns 503 if the card data file is missing or unreadable.
    """
    try:
        catalog = get_card_catalog()
    except (OSError, ValueError) as e:
        logger.error("Card catalog unavailable: %s", e)
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(
            status="not ready",
            version=pkg_version("deckdiff"),
            cards_loaded=0,
        )
    return HealthResponse(
        status="ready",
        version=pkg_version("deckdiff"),
        cards_loaded=len(catalog),
    )
