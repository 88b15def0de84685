from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ImageUris:
    """Image links for a card printing."""

    normal: str


@dataclass(frozen=True, slots=True)
class CardRecord:
    """
    A catalog entry for a single card printing.

    Attributes:
        id: Scryfall card ID
        name: Card name exactly as printed (lookup key)
        image_status: Scryfall scan quality (e.g., "highres_scan")
        image_uris: Image links, absent for multi-faced cards
    """

    id: str
    name: str
    image_status: str = "missing"
    image_uris: ImageUris | None = None

    @classmethod
    def from_scryfall(cls, data: dict[str, Any]) -> "CardRecord":
        """
        Build a record from a Scryfall card object.

        Unknown keys are ignored.

        Raises:
            ValueError: If the object has no id or name
        """
        card_id = data.get("id")
        name = data.get("name")
        if not card_id or not name:
            raise ValueError(f"Card object missing id or name: {data!r:.80}")

        image_uris = None
        uris = data.get("image_uris")
        if isinstance(uris, dict) and uris.get("normal"):
            image_uris = ImageUris(normal=str(uris["normal"]))

        return cls(
            id=str(card_id),
            name=str(name),
            image_status=str(data.get("image_status", "missing")),
            image_uris=image_uris,
        )
