from deckdiff.analysis.deck_stats import count_categories, summarize_deck
from deckdiff.models.deck import ResolveResult
from deckdiff.services.card_database import CardCatalog
from deckdiff.services.deck_resolver import resolve_deck_list


class TestSummarizeDeck:
    def test_summary(self, catalog: CardCatalog, sample_deck_list: str) -> None:
        stats = summarize_deck(resolve_deck_list(sample_deck_list, catalog))

        assert stats.total_cards == 24
        assert stats.unique_cards == 4
        assert stats.resolved_cards == 3  # Sol Ring is not in the catalog
        assert stats.unresolved_cards == 1
        assert stats.error_count == 0
        assert stats.resolution_percentage == 75

    def test_counts_errors(self, catalog: CardCatalog) -> None:
        stats = summarize_deck(resolve_deck_list("xFoo\n0x Forest\n1x Forest", catalog))

        assert stats.error_count == 2
        assert stats.unique_cards == 1

    def test_empty_deck(self) -> None:
        stats = summarize_deck(ResolveResult())

        assert stats.total_cards == 0
        assert stats.resolution_percentage == 0
        assert stats.top_categories == []

    def test_top_categories_limited(self, empty_catalog: CardCatalog) -> None:
        text = "\n".join(f"{i}x Card {i} [Cat {i}]" for i in range(1, 9))
        stats = summarize_deck(resolve_deck_list(text, empty_catalog), top_categories=3)

        assert stats.top_categories == [("Cat 8", 8), ("Cat 7", 7), ("Cat 6", 6)]


class TestCountCategories:
    def test_weighted_by_quantity(self, catalog: CardCatalog, sample_deck_list: str) -> None:
        counts = count_categories(resolve_deck_list(sample_deck_list, catalog))

        assert counts == [
            ("Land", 20),
            ("Removal", 3),
            ("Artifact", 1),
            ("Burn", 1),
            ("Ramp", 1),
        ]

    def test_no_categories(self, empty_catalog: CardCatalog) -> None:
        assert count_categories(resolve_deck_list("4x Forest", empty_catalog)) == []
