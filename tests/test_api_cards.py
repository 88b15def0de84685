"""Tests for card lookup endpoint."""

import pytest
from httpx import AsyncClient


class TestGetCardByName:
    async def test_found(self, client: AsyncClient) -> None:
        response = await client.get("/cards/Lightning Bolt")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Lightning Bolt"
        assert data["id"] == "e3285e6b-3e79-4d7c-bf96-d920f973b122"
        assert data["image_status"] == "highres_scan"
        assert data["image_uris"] == {
            "normal": "https://cards.scryfall.io/normal/front/e/3/e3285e6b.jpg"
        }

    async def test_split_card_name(self, client: AsyncClient) -> None:
        response = await client.get("/cards/Fire // Ice")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Fire // Ice"
        assert data["image_uris"] is None

    async def test_not_found(self, client: AsyncClient, caplog: pytest.LogCaptureFixture) -> None:
        response = await client.get("/cards/Nonexistent Card")

        assert response.status_code == 404
        assert "not found" in response.json()["detail"].lower()
        assert "Card not found: Nonexistent Card" in caplog.text

    async def test_case_sensitive(self, client: AsyncClient) -> None:
        response = await client.get("/cards/lightning bolt")

        assert response.status_code == 404
