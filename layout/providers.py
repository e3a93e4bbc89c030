"""Height providers: the host-side collaborator that sizes each card.

MasonryLayout only knows item indexes and widths; a provider answers how tall
an item's photo and annotation blocks are at a given width.
"""
from typing import Callable, Protocol

from models.catalog import CardCatalog
from models.design import CardDesign


class HeightProvider(Protocol):
    def height_for_photo(self, index: int, width: float) -> float: ...

    def height_for_annotation(self, index: int, width: float) -> float: ...


class CallableHeightProvider:
    """Adapts `func(index, width) -> (photo_height, annotation_height)`.

    The engine asks for both heights of an item back to back; the last answer
    is kept so `func` runs once per item.
    """

    def __init__(self, func: Callable[[int, float], tuple[float, float]]) -> None:
        self._func = func
        self._last_key: tuple[int, float] | None = None
        self._last_heights: tuple[float, float] = (0.0, 0.0)

    def _heights(self, index: int, width: float) -> tuple[float, float]:
        if self._last_key != (index, width):
            self._last_heights = self._func(index, width)
            self._last_key = (index, width)
        return self._last_heights

    def height_for_photo(self, index: int, width: float) -> float:
        return self._heights(index, width)[0]

    def height_for_annotation(self, index: int, width: float) -> float:
        return self._heights(index, width)[1]


class CardHeightProvider:
    """Sizes cards from a CardCatalog.

    The photo is scaled to fill the item width at its own aspect ratio. The
    annotation is the design's annotation padding plus the wrapped caption and
    comment heights; a card with neither has no annotation block.
    """

    def __init__(self, catalog: CardCatalog, design: CardDesign | None = None) -> None:
        self.catalog = catalog
        self.design = design or CardDesign()

    def height_for_photo(self, index: int, width: float) -> float:
        card = self.catalog.cards[index]
        return width / card.aspect_ratio

    def height_for_annotation(self, index: int, width: float) -> float:
        card = self.catalog.cards[index]
        text_height = (
            self.design.caption.text_height(card.caption, width)
            + self.design.comment.text_height(card.comment, width)
        )
        if text_height == 0:
            return 0.0
        return self.design.annotation_padding + text_height
