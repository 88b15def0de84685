from deckdiff.analysis.deck_stats import count_categories, summarize_deck

__all__ = [
    "count_categories",
    "summarize_deck",
]
