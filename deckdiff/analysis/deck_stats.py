"""
Deck list statistics.

Summarizes how much of a resolved deck list matched the catalog and
which categories hold the most cards.
"""

from deckdiff.models.deck import ResolveResult
from deckdiff.models.stats import DeckStats

DEFAULT_TOP_CATEGORIES = 5


def summarize_deck(
    result: ResolveResult,
    top_categories: int = DEFAULT_TOP_CATEGORIES,
) -> DeckStats:
    """
    Summarize a resolved deck list.

    Args:
        result: Output of resolve_deck_list
        top_categories: How many categories to report

    Returns:
        DeckStats with resolution counts and the largest categories
    """
    resolved = sum(1 for entry in result.entries if entry.is_resolved)
    unique = len(result.entries)
    percentage = round(resolved / unique * 100) if unique > 0 else 0

    return DeckStats(
        total_cards=result.total_cards,
        unique_cards=unique,
        resolved_cards=resolved,
        unresolved_cards=unique - resolved,
        error_count=len(result.errors),
        resolution_percentage=percentage,
        top_categories=count_categories(result)[:top_categories],
    )


def count_categories(result: ResolveResult) -> list[tuple[str, int]]:
    """
    Count cards per category, weighted by quantity.

    A card in several categories counts toward each of them.
    Sorted by count descending, then category name.
    """
    counts: dict[str, int] = {}
    for entry in result.entries:
        for category in entry.categories:
            counts[category] = counts.get(category, 0) + entry.quantity

    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))
