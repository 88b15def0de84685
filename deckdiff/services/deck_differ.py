"""
Deck list differ.

Compares two deck lists card by card and sorts every card name into
added, removed, modified or unchanged.
"""

from deckdiff.models.deck import (
    ChangeKind,
    DeckDiffResult,
    DeckLineEntry,
    DiffEntry,
    ResolveResult,
)
from deckdiff.services.deck_resolver import CardLookup, resolve_deck_list


def diff_decks(old_text: str, new_text: str, catalog: CardLookup) -> DeckDiffResult:
    """
    Resolve two deck lists and compare them.

    Args:
        old_text: The original deck list
        new_text: The updated deck list
        catalog: Card lookup shared by both sides

    Returns:
        DeckDiffResult with each bucket sorted by card name and each
        side's parse errors kept separately.
    """
    return diff_resolved(
        resolve_deck_list(old_text, catalog),
        resolve_deck_list(new_text, catalog),
    )


def diff_resolved(old: ResolveResult, new: ResolveResult) -> DeckDiffResult:
    """
    Compare two already resolved deck lists.

    Cards are matched by name text. If a list names the same card more
    than once, only its last entry counts; quantities are not summed.
    """
    # TODO: sum quantities of duplicate names instead of keeping the last entry
    old_by_name = _index_by_name(old.entries)
    new_by_name = _index_by_name(new.entries)

    buckets: dict[ChangeKind, list[DiffEntry]] = {kind: [] for kind in ChangeKind}

    for name in old_by_name.keys() | new_by_name.keys():
        diff_entry = _classify(name, old_by_name.get(name), new_by_name.get(name))
        buckets[diff_entry.change_kind].append(diff_entry)

    def _sorted(kind: ChangeKind) -> tuple[DiffEntry, ...]:
        # Plain str ordering is codepoint order, stable for snapshot output
        return tuple(sorted(buckets[kind], key=lambda d: d.card_name))

    return DeckDiffResult(
        added=_sorted(ChangeKind.ADDED),
        removed=_sorted(ChangeKind.REMOVED),
        modified=_sorted(ChangeKind.MODIFIED),
        unchanged=_sorted(ChangeKind.UNCHANGED),
        errors_deck_1=old.errors,
        errors_deck_2=new.errors,
    )


def _index_by_name(entries: tuple[DeckLineEntry, ...]) -> dict[str, DeckLineEntry]:
    return {entry.name: entry for entry in entries}


def _classify(
    name: str,
    old: DeckLineEntry | None,
    new: DeckLineEntry | None,
) -> DiffEntry:
    """
    Classify one card name.

    Raises:
        ValueError: If the name is in neither deck
    """
    match (old, new):
        case (None, DeckLineEntry() as added):
            return _diff_entry(name, 0, added.quantity, ChangeKind.ADDED, added)
        case (DeckLineEntry() as removed, None):
            return _diff_entry(name, removed.quantity, 0, ChangeKind.REMOVED, removed)
        case (DeckLineEntry() as before, DeckLineEntry() as after) if before.quantity == after.quantity:
            return _diff_entry(name, before.quantity, after.quantity, ChangeKind.UNCHANGED, before)
        case (DeckLineEntry() as before, DeckLineEntry() as after):
            return _diff_entry(name, before.quantity, after.quantity, ChangeKind.MODIFIED, after)
        case _:
            raise ValueError(f"Card {name!r} is in neither deck")


def _diff_entry(
    name: str,
    old_quantity: int,
    new_quantity: int,
    kind: ChangeKind,
    source: DeckLineEntry,
) -> DiffEntry:
    return DiffEntry(
        card_name=name,
        old_quantity=old_quantity,
        new_quantity=new_quantity,
        change_kind=kind,
        card=source.card,
        categories=source.categories,
    )
