"""DeckDiff: resolve and compare free-text deck lists against a card catalog."""
