"""
Card API endpoints.

Exact-name lookups against the loaded card catalog.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from deckdiff.models.card import CardRecord
from deckdiff.services.card_database import CardCatalog, get_card_catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cards", tags=["cards"])


class ImageUrisResponse(BaseModel):
    """Image links for a card."""

    normal: str


class CardResponse(BaseModel):
    """Response model for a single card."""

    id: str
    name: str
    image_status: str
    image_uris: ImageUrisResponse | None = None

    @classmethod
    def from_record(cls, record: CardRecord) -> "CardResponse":
        return cls(
            id=record.id,
            name=record.name,
            image_status=record.image_status,
            image_uris=(
                ImageUrisResponse(normal=record.image_uris.normal)
                if record.image_uris is not None
                else None
            ),
        )


def card_or_none(record: CardRecord | None) -> CardResponse | None:
    return CardResponse.from_record(record) if record is not None else None


@router.get("/{name:path}", response_model=CardResponse)
async def get_card_by_name(
    name: str,
    catalog: Annotated[CardCatalog, Depends(get_card_catalog)],
) -> CardResponse:
    """
    Get a card by exact name.

    Matching is case-sensitive. Split card names ("Fire // Ice") may
    contain slashes. Returns 404 if no card has that name.
    """
    record = catalog.lookup_by_name(name)
    if record is None:
        logger.warning("Card not found: %s", name)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Card '{name}' not found",
        )

    logger.debug("Card found: %s", name)
    return CardResponse.from_record(record)
