"""
Deck list resolver.

Runs the line parser over a whole deck list and looks every parsed name
up in the card catalog. A bad line never stops the rest of the list from
being processed; it is reported as a LineError instead.
"""

from typing import Protocol

from deckdiff.models.card import CardRecord
from deckdiff.models.deck import DeckLineEntry, LineError, ResolveResult
from deckdiff.parsers.deck_list import DeckLineError, is_skippable, parse_line


class CardLookup(Protocol):
    """Anything that can resolve an exact card name to a record."""

    def lookup_by_name(self, name: str) -> CardRecord | None: ...


def resolve_deck_list(text: str, catalog: CardLookup) -> ResolveResult:
    """
    Parse and resolve a deck list.

    Args:
        text: Raw deck list, one card per line
        catalog: Card lookup used for each parsed name

    Returns:
        ResolveResult with entries and errors in input order. Unknown
        card names are entries with card=None, not errors.
    """
    entries: list[DeckLineEntry] = []
    errors: list[LineError] = []

    for line_number, line in enumerate(text.split("\n"), 1):
        # Skipped lines still consume a line number
        if is_skippable(line):
            continue

        try:
            parsed = parse_line(line)
        except DeckLineError as e:
            errors.append(LineError(line_number=line_number, line=e.line, error=e.kind))
            continue

        card = catalog.lookup_by_name(parsed.name)
        entries.append(DeckLineEntry.from_parsed(parsed, card))

    return ResolveResult(entries=tuple(entries), errors=tuple(errors))
