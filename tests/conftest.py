from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from deckdiff.main import app
from deckdiff.services.card_database import (
    CardCatalog,
    get_card_catalog,
    load_card_database,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def cards_path() -> Path:
    """Sample Scryfall bulk file with a reprint and a malformed object."""
    return FIXTURES_DIR / "cards.json"


@pytest.fixture
def catalog(cards_path: Path) -> CardCatalog:
    return load_card_database(cards_path)


@pytest.fixture
def empty_catalog() -> CardCatalog:
    return CardCatalog([])


@pytest.fixture
def sample_deck_list() -> str:
    """Sample deck list for testing."""
    return """# Burn
1x Lightning Bolt [Removal, Burn]
2x Blasphemous Act (eoc) 86 [Removal]

// Lands
20x Forest (neo) 290a [Land]
1x Sol Ring [Artifact, Ramp]"""


@pytest.fixture
async def client(catalog: CardCatalog):
    """Provide an async test client with the fixture catalog."""
    app.dependency_overrides[get_card_catalog] = lambda: catalog

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
