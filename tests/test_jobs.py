"""Tests for the card download job."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from deckdiff.config import settings
from deckdiff.jobs.download_cards import main, run_download


@pytest.fixture
def fake_download():
    """Replace the HTTP download with one that writes a tiny card file."""

    async def write_cards(output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps([{"id": "1", "name": "Forest"}]))
        return output_path

    with patch(
        "deckdiff.jobs.download_cards.download_card_database",
        new_callable=AsyncMock,
        side_effect=write_cards,
    ) as mock_download:
        yield mock_download


class TestRunDownload:
    async def test_downloads_to_given_path(
        self, fake_download: AsyncMock, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        output = tmp_path / "cards" / "oracle.json"

        with caplog.at_level("INFO", logger="deckdiff.jobs.download_cards"):
            path = await run_download(output)

        assert path == output
        fake_download.assert_awaited_once_with(output)
        assert f"Verified {output}: 1 unique card names" in caplog.text

    async def test_defaults_to_settings_path(self, fake_download: AsyncMock) -> None:
        await run_download(verify=False)

        fake_download.assert_awaited_once_with(settings.card_data_path)

    async def test_verify_rejects_bad_file(self, tmp_path: Path) -> None:
        async def write_garbage(output_path: Path) -> Path:
            output_path.write_text(json.dumps({"object": "error"}))
            return output_path

        with (
            patch(
                "deckdiff.jobs.download_cards.download_card_database",
                new_callable=AsyncMock,
                side_effect=write_garbage,
            ),
            pytest.raises(ValueError, match="JSON array"),
        ):
            await run_download(tmp_path / "cards.json")

    async def test_failure_reraises(self, caplog: pytest.LogCaptureFixture) -> None:
        with (
            patch(
                "deckdiff.jobs.download_cards.download_card_database",
                new_callable=AsyncMock,
                side_effect=ValueError("Could not find oracle_cards bulk data URL"),
            ),
            pytest.raises(ValueError),
        ):
            await run_download(Path("/tmp/unused.json"))

        assert "Failed to download card database" in caplog.text


class TestMain:
    def test_output_argument(self, fake_download: AsyncMock, tmp_path: Path) -> None:
        output = tmp_path / "oracle.json"

        main(["--output", str(output)])

        fake_download.assert_awaited_once_with(output)
        assert output.exists()

    def test_no_verify(self, fake_download: AsyncMock, tmp_path: Path) -> None:
        output = tmp_path / "oracle.json"

        with patch("deckdiff.jobs.download_cards.load_card_database") as mock_load:
            main(["--output", str(output), "--no-verify"])

        mock_load.assert_not_called()

    def test_log_level_from_settings(self, fake_download: AsyncMock, tmp_path: Path) -> None:
        with (
            patch.object(settings, "log_level", "debug"),
            patch("deckdiff.jobs.download_cards.logging.basicConfig") as mock_config,
        ):
            main(["--output", str(tmp_path / "oracle.json")])

        assert mock_config.call_args.kwargs["level"] == "DEBUG"
