from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent.parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DECKDIFF_")

    app_name: str = "DeckDiff"
    debug: bool = False
    log_level: str = "INFO"

    # Scryfall oracle-cards bulk file, loaded once at startup
    card_data_path: Path = DATA_DIR / "oracle-cards.json"

    host: str = "127.0.0.1"
    port: int = 5678

    cors_origins: list[str] = ["*"]


settings = Settings()
