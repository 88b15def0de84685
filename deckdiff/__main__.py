"""Run the DeckDiff API server."""

import logging

import uvicorn

from deckdiff.config import settings


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        "deckdiff.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
