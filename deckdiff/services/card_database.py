"""
Card database service.

Loads Scryfall card data once into an immutable name -> record lookup.
"""

import json
import logging
import time
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import httpx

from deckdiff.config import settings
from deckdiff.models.card import CardRecord

logger = logging.getLogger(__name__)

SCRYFALL_BULK_API = "https://api.scryfall.com/bulk-data"
BULK_DATA_TYPE = "oracle_cards"
USER_AGENT = "DeckDiff/1.0"


class CardCatalog:
    """
    Read-only card lookup keyed by exact card name.

    Every printing of a name is kept in load order. Lookups return the
    first one loaded. Nothing mutates a catalog after construction, so a
    single instance is shared across all requests.
    """

    def __init__(self, records: Iterable[CardRecord]) -> None:
        by_name: dict[str, list[CardRecord]] = {}
        for record in records:
            by_name.setdefault(record.name, []).append(record)

        self._cards: Mapping[str, tuple[CardRecord, ...]] = MappingProxyType(
            {name: tuple(printings) for name, printings in by_name.items()}
        )
        self.total_records = sum(len(p) for p in self._cards.values())

    def lookup_by_name(self, name: str) -> CardRecord | None:
        """Exact, case-sensitive lookup. Returns the first-loaded printing."""
        printings = self._cards.get(name)
        if not printings:
            return None
        return printings[0]

    def printings(self, name: str) -> tuple[CardRecord, ...]:
        """All loaded printings for a name, in load order."""
        return self._cards.get(name, ())

    def __contains__(self, name: object) -> bool:
        return name in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[str]:
        return iter(self._cards)


async def download_card_database(output_path: Path | None = None) -> Path:
    """
    Download latest Scryfall oracle-cards bulk data.

    Args:
        output_path: Where to save the file. Defaults to settings.card_data_path

    Returns:
        Path to downloaded file.

    Raises:
        ValueError: If bulk data URL not found
        httpx.HTTPError: If download fails
    """
    if output_path is None:
        output_path = settings.card_data_path

    output_path.parent.mkdir(parents=True, exist_ok=True)

    headers = {"User-Agent": USER_AGENT}
    async with httpx.AsyncClient(timeout=30.0, headers=headers) as client:
        response = await client.get(SCRYFALL_BULK_API)
        response.raise_for_status()
        data = response.json()

        download_url = None
        for item in data["data"]:
            if item["type"] == BULK_DATA_TYPE:
                download_url = item["download_uri"]
                break

        if not download_url:
            raise ValueError(f"Could not find {BULK_DATA_TYPE} bulk data URL")

        logger.info("Downloading %s from %s", BULK_DATA_TYPE, download_url)

        # Stream download (file is ~150MB)
        async with client.stream(
            "GET", download_url, timeout=300.0, follow_redirects=True
        ) as response:
            response.raise_for_status()
            with open(output_path, "wb") as f:
                async for chunk in response.aiter_bytes(8192):
                    f.write(chunk)

    return output_path


def build_catalog(cards: Iterable[dict[str, Any]]) -> CardCatalog:
    """
    Build a catalog from Scryfall card objects.

    Objects without an id or name are skipped.
    """
    records: list[CardRecord] = []
    skipped = 0
    for card in cards:
        try:
            records.append(CardRecord.from_scryfall(card))
        except ValueError:
            skipped += 1

    if skipped:
        logger.warning("Skipped %d card objects without id or name", skipped)

    return CardCatalog(records)


def load_card_database(path: Path | None = None) -> CardCatalog:
    """
    Load card database from file.

    Args:
        path: Path to JSON file. Defaults to settings.card_data_path

    Returns:
        CardCatalog indexed by card name.

    Raises:
        FileNotFoundError: If database file doesn't exist
        ValueError: If the file is not a JSON array of cards
    """
    if path is None:
        path = settings.card_data_path

    if not path.exists():
        raise FileNotFoundError(
            f"Card database not found at {path}. "
            "Run `python -m deckdiff.jobs.download_cards` first."
        )

    started = time.perf_counter()
    logger.info("Loading cards from %s", path)

    with open(path, encoding="utf-8") as f:
        cards = json.load(f)

    if not isinstance(cards, list):
        raise ValueError(f"Expected a JSON array of cards in {path}")

    catalog = build_catalog(cards)

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "Loaded %d unique names (%d records) in %.0f ms",
        len(catalog),
        catalog.total_records,
        elapsed_ms,
    )
    return catalog


@lru_cache(maxsize=1)
def get_card_catalog() -> CardCatalog:
    """
    Get cached card catalog.

    Loaded on first call and shared for the life of the process.

    Raises:
        FileNotFoundError: If database file doesn't exist
    """
    return load_card_database()
