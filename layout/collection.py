"""Card collection view model: binds a CardCatalog to a MasonryLayout.

Plays the host's part of the engine contract: it tracks the viewport width and
the number of cards, invalidates the engine when either changes, and turns a
scroll window into the list of cards to show.
"""
import logging

from layout.masonry import MasonryLayout
from layout.providers import CardHeightProvider
from models.catalog import Card, CardCatalog
from models.design import CardDesign
from models.geometry import Rect
from models.layout import LayoutItem, LayoutResult

logger = logging.getLogger(__name__)


class CardCollectionView:
    def __init__(
        self,
        engine: MasonryLayout,
        catalog: CardCatalog,
        viewport_width: float,
        design: CardDesign | None = None,
    ) -> None:
        self.engine = engine
        self.design = design or CardDesign()
        self.catalog = catalog
        self.viewport_width = viewport_width
        self._provider = CardHeightProvider(catalog, self.design)
        self._laid_out_count: int | None = None

    def resize(self, viewport_width: float) -> None:
        """Apply a new viewport width; the layout is recomputed only if it changed."""
        if self.engine.should_invalidate_for_width(viewport_width):
            logger.debug("Viewport width %.1f → %.1f", self.viewport_width, viewport_width)
            self.engine.invalidate()
        self.viewport_width = viewport_width

    def reload(self, catalog: CardCatalog) -> None:
        """Swap in new cards. Card sizes may have changed, so always relayout."""
        self.catalog = catalog
        self._provider = CardHeightProvider(catalog, self.design)
        self.engine.invalidate()

    def layout(self) -> LayoutResult:
        if self._laid_out_count is not None and self._laid_out_count != len(self.catalog):
            self.engine.invalidate()
        result = self.engine.compute_layout(len(self.catalog), self.viewport_width, self._provider)
        self._laid_out_count = len(result)
        return result

    def visible_items(self, offset_y: float, height: float) -> list[LayoutItem]:
        """Items intersecting the scroll window starting at `offset_y`."""
        result = self.layout()
        window = Rect(x=0.0, y=offset_y, width=result.content_width, height=max(height, 0.0))
        return self.engine.frames_intersecting(window)

    def cards_in(self, rect: Rect) -> list[tuple[Card, LayoutItem]]:
        self.layout()
        return [(self.catalog.cards[item.index], item) for item in self.engine.frames_intersecting(rect)]
