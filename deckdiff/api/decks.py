"""
Deck list API endpoints.

Resolve, diff and summarize free-text deck lists. Resolve and stats
take the deck list as a plain text body; diff takes a JSON body with
both lists.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from deckdiff.analysis.deck_stats import summarize_deck
from deckdiff.api.cards import CardResponse, card_or_none
from deckdiff.models.deck import DeckLineEntry, DiffEntry, LineError
from deckdiff.services.card_database import CardCatalog, get_card_catalog
from deckdiff.services.deck_differ import diff_decks
from deckdiff.services.deck_resolver import resolve_deck_list

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/deck", tags=["deck"])


class DeckEntryResponse(BaseModel):
    """A resolved deck list line."""

    quantity: int
    name: str
    set_code: str | None = None
    collector_number: str | None = None
    categories: list[str] = Field(default_factory=list)
    card: CardResponse | None = None


class ParseErrorResponse(BaseModel):
    """A deck list line that could not be parsed."""

    line_number: int
    line: str
    error: str


class ResolveResponse(BaseModel):
    """Response model for a resolved deck list."""

    entries: list[DeckEntryResponse]
    total_cards: int
    errors: list[ParseErrorResponse]


class DiffRequest(BaseModel):
    """Two deck lists to compare, old first."""

    deck_list_1: str
    deck_list_2: str


class DiffEntryResponse(BaseModel):
    """One card's change between two deck lists."""

    card_name: str
    old_quantity: int
    new_quantity: int
    change_type: str
    card: CardResponse | None = None
    categories: list[str] = Field(default_factory=list)


class DiffResponse(BaseModel):
    """Response model for a deck diff. Every bucket is sorted by card name."""

    added: list[DiffEntryResponse]
    removed: list[DiffEntryResponse]
    modified: list[DiffEntryResponse]
    unchanged: list[DiffEntryResponse]
    errors_deck_1: list[ParseErrorResponse]
    errors_deck_2: list[ParseErrorResponse]


class CategoryCount(BaseModel):
    name: str
    count: int


class StatsResponse(BaseModel):
    """Response model for deck list statistics."""

    total_cards: int
    unique_cards: int
    resolved_cards: int
    unresolved_cards: int
    error_count: int
    resolution_percentage: int = Field(ge=0, le=100)
    top_categories: list[CategoryCount] = Field(default_factory=list)


def _entry_response(entry: DeckLineEntry) -> DeckEntryResponse:
    return DeckEntryResponse(
        quantity=entry.quantity,
        name=entry.name,
        set_code=entry.set_code,
        collector_number=entry.collector_number,
        categories=list(entry.categories),
        card=card_or_none(entry.card),
    )


def _error_response(error: LineError) -> ParseErrorResponse:
    return ParseErrorResponse(
        line_number=error.line_number,
        line=error.line,
        error=error.error.value,
    )


def _diff_entry_response(entry: DiffEntry) -> DiffEntryResponse:
    return DiffEntryResponse(
        card_name=entry.card_name,
        old_quantity=entry.old_quantity,
        new_quantity=entry.new_quantity,
        change_type=entry.change_kind.value,
        card=card_or_none(entry.card),
        categories=list(entry.categories),
    )


async def _read_text_body(request: Request) -> str:
    body = await request.body()
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Deck list must be UTF-8 text",
        ) from e


@router.post("/resolve", response_model=ResolveResponse)
async def resolve_deck(
    request: Request,
    catalog: Annotated[CardCatalog, Depends(get_card_catalog)],
) -> ResolveResponse:
    """
    Parse and resolve a deck list.

    Malformed lines are reported in errors without failing the request.
    Unknown card names are returned as entries with no card.
    """
    deck_text = await _read_text_body(request)
    result = resolve_deck_list(deck_text, catalog)

    logger.debug(
        "Resolved deck: %d entries, %d errors, %d total cards",
        len(result.entries),
        len(result.errors),
        result.total_cards,
    )

    return ResolveResponse(
        entries=[_entry_response(e) for e in result.entries],
        total_cards=result.total_cards,
        errors=[_error_response(e) for e in result.errors],
    )


@router.post("/diff", response_model=DiffResponse)
async def diff_deck_lists(
    diff_request: DiffRequest,
    catalog: Annotated[CardCatalog, Depends(get_card_catalog)],
) -> DiffResponse:
    """
    Compare two deck lists.

    Classifies every card as added, removed, modified or unchanged.
    """
    result = diff_decks(diff_request.deck_list_1, diff_request.deck_list_2, catalog)

    logger.debug(
        "Diffed decks: %d added, %d removed, %d modified, %d unchanged, "
        "%d/%d errors",
        len(result.added),
        len(result.removed),
        len(result.modified),
        len(result.unchanged),
        len(result.errors_deck_1),
        len(result.errors_deck_2),
    )

    return DiffResponse(
        added=[_diff_entry_response(e) for e in result.added],
        removed=[_diff_entry_response(e) for e in result.removed],
        modified=[_diff_entry_response(e) for e in result.modified],
        unchanged=[_diff_entry_response(e) for e in result.unchanged],
        errors_deck_1=[_error_response(e) for e in result.errors_deck_1],
        errors_deck_2=[_error_response(e) for e in result.errors_deck_2],
    )


@router.post("/stats", response_model=StatsResponse)
async def deck_stats(
    request: Request,
    catalog: Annotated[CardCatalog, Depends(get_card_catalog)],
) -> StatsResponse:
    """Summarize a deck list: resolution rate and largest categories."""
    deck_text = await _read_text_body(request)
    stats = summarize_deck(resolve_deck_list(deck_text, catalog))

    return StatsResponse(
        total_cards=stats.total_cards,
        unique_cards=stats.unique_cards,
        resolved_cards=stats.resolved_cards,
        unresolved_cards=stats.unresolved_cards,
        error_count=stats.error_count,
        resolution_percentage=stats.resolution_percentage,
        top_categories=[
            CategoryCount(name=name, count=count) for name, count in stats.top_categories
        ],
    )
