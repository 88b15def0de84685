"""
Download Scryfall card database.

Run this job before starting the server; the catalog is loaded from
the downloaded file at startup. The file lands at
settings.card_data_path unless --output is given.
"""

import argparse
import asyncio
import logging
from pathlib import Path

from deckdiff.config import settings
from deckdiff.services.card_database import download_card_database, load_card_database

logger = logging.getLogger(__name__)


async def run_download(output_path: Path | None = None, verify: bool = True) -> Path:
    """
    Download the Scryfall oracle-cards file.

    Args:
        output_path: Where to save the file. Defaults to settings.card_data_path
        verify: Load the downloaded file as a catalog and log its size

    Returns:
        Path to the downloaded file.
    """
    target = output_path or settings.card_data_path
    logger.info("Downloading Scryfall card database to %s", target)

    try:
        path = await download_card_database(target)
    except Exception as e:
        logger.error("Failed to download card database: %s", e)
        raise

    if verify:
        catalog = load_card_database(path)
        logger.info("Verified %s: %d unique card names", path, len(catalog))

    return path


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Download Scryfall oracle-cards data")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help=f"Where to save the JSON file (default: {settings.card_data_path})",
    )
    parser.add_argument(
        "--no-verify",
        action="store_true",
        help="Skip loading the downloaded file as a card catalog",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_download(args.output, verify=not args.no_verify))


if __name__ == "__main__":
    main()
