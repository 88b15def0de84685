from deckdiff.models.card import CardRecord, ImageUris
from deckdiff.models.deck import (
    ChangeKind,
    DeckDiffResult,
    DeckLineEntry,
    DiffEntry,
    LineError,
    LineErrorKind,
    ParsedLine,
    ResolveResult,
)
from deckdiff.models.stats import DeckStats

__all__ = [
    "CardRecord",
    "ChangeKind",
    "DeckDiffResult",
    "DeckLineEntry",
    "DeckStats",
    "DiffEntry",
    "ImageUris",
    "LineError",
    "LineErrorKind",
    "ParsedLine",
    "ResolveResult",
]
