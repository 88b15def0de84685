"""
DeckDiff services.

Deck list resolution, diffing and the card catalog.
"""

from deckdiff.services.card_database import (
    CardCatalog,
    build_catalog,
    download_card_database,
    get_card_catalog,
    load_card_database,
)
from deckdiff.services.deck_differ import diff_decks, diff_resolved
from deckdiff.services.deck_resolver import CardLookup, resolve_deck_list

__all__ = [
    # Card catalog
    "CardCatalog",
    "build_catalog",
    "download_card_database",
    "get_card_catalog",
    "load_card_database",
    # Deck lists
    "CardLookup",
    "diff_decks",
    "diff_resolved",
    "resolve_deck_list",
]
