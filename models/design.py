"""Card design model: typed representation of design.yaml.

Describes how a card's annotation block is measured: padding between the
photo and the text, and the caption/comment text styles. Used by
CardHeightProvider to turn caption text into an annotation height.
"""
import math
from pathlib import Path

from pydantic import BaseModel, Field


class TextStyle(BaseModel):
    font: str = "AvenirNext-Regular"
    size_pt: float = Field(default=10.0, gt=0.0)
    line_height: float = Field(default=1.2, gt=0.0)  # multiple of size_pt
    char_width_ratio: float = Field(default=0.5, gt=0.0)  # average glyph width / size_pt
    max_lines: int | None = Field(default=None, ge=1)

    @property
    def line_height_pt(self) -> float:
        return self.size_pt * self.line_height

    def text_height(self, text: str, width: float) -> float:
        """Estimate the rendered height of `text` wrapped to `width`.

        Explicit newlines start a new line; each paragraph wraps at the
        average glyph width. Empty text has no height.
        """
        if not text.strip() or width <= 0:
            return 0.0
        chars_per_line = max(1, int(width // (self.size_pt * self.char_width_ratio)))
        lines = sum(
            max(1, math.ceil(len(paragraph) / chars_per_line))
            for paragraph in text.strip().splitlines()
        )
        if self.max_lines is not None:
            lines = min(lines, self.max_lines)
        return lines * self.line_height_pt


class CardDesign(BaseModel):
    """Complete card design loaded from design.yaml.

    Provides defaults for every field so it is usable even when design.yaml
    is absent or partially specified.
    """
    annotation_padding: float = Field(default=4.0, ge=0.0)
    caption: TextStyle = Field(default_factory=lambda: TextStyle(font="AvenirNext-DemiBold", size_pt=15.0))
    comment: TextStyle = Field(default_factory=lambda: TextStyle(size_pt=10.0))

    @classmethod
    def load(cls, path: Path) -> "CardDesign":
        """Load from a YAML file. Missing fields use Pydantic defaults.

        Raises FileNotFoundError if path does not exist.
        """
        import yaml  # lazy, only needed at load time
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path | None) -> "CardDesign":
        """Load from path if it exists, otherwise return the default design."""
        if path is not None and path.exists():
            return cls.load(path)
        return cls()
