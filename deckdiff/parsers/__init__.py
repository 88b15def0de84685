from deckdiff.parsers.deck_list import (
    DeckLineError,
    is_skippable,
    parse_line,
)

__all__ = [
    "DeckLineError",
    "is_skippable",
    "parse_line",
]
