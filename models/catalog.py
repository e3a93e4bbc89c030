import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

# EXIF orientation values that swap width/height for display
_TRANSPOSING_ORIENTATIONS = frozenset({6, 8})


class Card(BaseModel):
    """One card in the masonry view: a photo plus its caption and comment.

    `photo_path` is relative to the catalog file's directory. When it is set
    and the pixel size is missing, CardCatalog.load reads the size from the
    image header.
    """

    id: str
    photo_width: int
    photo_height: int
    caption: str = ""
    comment: str = ""
    photo_path: Path | None = None

    @field_validator("photo_width", "photo_height")
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("photo_width and photo_height must be positive")
        return v

    @property
    def aspect_ratio(self) -> float:
        """Width / height."""
        return self.photo_width / self.photo_height


class CardCatalog(BaseModel):
    cards: list[Card] = Field(default_factory=list)

    @model_validator(mode="after")
    def ids_must_be_unique(self) -> "CardCatalog":
        seen: set[str] = set()
        for card in self.cards:
            if card.id in seen:
                raise ValueError(f"duplicate card id: {card.id}")
            seen.add(card.id)
        return self

    def __len__(self) -> int:
        return len(self.cards)

    def by_id(self, card_id: str) -> Card | None:
        return next((c for c in self.cards if c.id == card_id), None)

    @classmethod
    def load(cls, path: Path) -> "CardCatalog":
        """Load a catalog from a YAML file with a top-level `cards` list.

        Cards without an explicit size but with a `photo_path` get their size
        from the image file. Raises FileNotFoundError if path does not exist.
        """
        import yaml  # lazy, only needed at load time
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        entries = data.get("cards") or []
        for index, entry in enumerate(entries, start=1):
            entry.setdefault("id", f"card_{index:03d}")
            if entry.get("photo_path") and not (entry.get("photo_width") and entry.get("photo_height")):
                entry["photo_width"], entry["photo_height"] = read_photo_size(path.parent / entry["photo_path"])
        catalog = cls.model_validate({"cards": entries})
        logger.debug("Loaded %d cards from %s", len(catalog), path)
        return catalog


def read_photo_size(path: Path) -> tuple[int, int]:
    """Return the displayed (width, height) of an image without decoding pixels.

    EXIF-rotated images report their dimensions as displayed.
    """
    from PIL import Image  # lazy, only needed for path-only catalog entries

    with Image.open(path) as img:
        width, height = img.size
        orientation_tag = img.getexif().get(274, 1)  # 274 = Orientation
    if orientation_tag in _TRANSPOSING_ORIENTATIONS:
        width, height = height, width
    return width, height
