from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class DeckStats:
    """
    Summary of a resolved deck list.

    Attributes:
        total_cards: Sum of quantities over all entries
        unique_cards: Number of entries (one per parsed line)
        resolved_cards: Entries whose name matched the catalog
        unresolved_cards: Entries with no catalog match
        error_count: Lines that failed to parse
        resolution_percentage: resolved / unique as a rounded percent
        top_categories: (category, card count) pairs, largest first
    """

    total_cards: int
    unique_cards: int
    resolved_cards: int
    unresolved_cards: int
    error_count: int
    resolution_percentage: int
    top_categories: list[tuple[str, int]] = field(default_factory=list)
