"""Masonry layout engine: place cards into fixed-width columns.

Items are assigned to columns round-robin (item i goes to column
i % number_of_columns) and stacked top to bottom within their column, so rows
are staggered by the varying card heights. Each item gets an outer slot of
`column_width` x `padding + photo + annotation + padding`; the stored frame is
that slot shrunk by the padding on every side.

A computed LayoutResult is cached until invalidate() is called. The engine
does no I/O; heights come only from the HeightProvider passed to
compute_layout().
"""
import logging
import math
from typing import Literal

from layout.providers import HeightProvider
from models.geometry import EdgeInsets, Rect, Size
from models.layout import LayoutItem, LayoutResult
from settings import Settings

logger = logging.getLogger(__name__)


class LayoutError(ValueError):
    """Base class for layout failures. The cached result is never modified."""


class LayoutConfigurationError(LayoutError):
    """The engine cannot lay out with its current configuration or inputs."""


class InvalidHeightError(LayoutError):
    """A height provider returned a negative height under the 'reject' policy."""

    def __init__(self, index: int, kind: str, value: float) -> None:
        super().__init__(f"{kind} height for item {index} is negative: {value}")
        self.index = index
        self.kind = kind
        self.value = value


class MasonryLayout:
    def __init__(
        self,
        number_of_columns: int = 2,
        cell_padding: float = 6.0,
        content_insets: EdgeInsets | None = None,
        negative_height_policy: Literal["clamp", "reject"] = "clamp",
    ) -> None:
        self._cache: LayoutResult | None = None
        self._viewport_width: float | None = None
        self._number_of_columns = number_of_columns
        self._cell_padding = cell_padding
        self._content_insets = content_insets or EdgeInsets()
        self.negative_height_policy = negative_height_policy
        self.recompute_count = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> "MasonryLayout":
        return cls(
            number_of_columns=settings.number_of_columns,
            cell_padding=settings.cell_padding,
            content_insets=EdgeInsets(
                left=settings.content_inset_left,
                right=settings.content_inset_right,
            ),
            negative_height_policy=settings.negative_height_policy,
        )

    # ------------------------------------------------------------------
    # Configuration (changing it drops the cached layout)
    # ------------------------------------------------------------------

    @property
    def number_of_columns(self) -> int:
        return self._number_of_columns

    @number_of_columns.setter
    def number_of_columns(self, value: int) -> None:
        if value != self._number_of_columns:
            self.invalidate()
        self._number_of_columns = value

    @property
    def cell_padding(self) -> float:
        return self._cell_padding

    @cell_padding.setter
    def cell_padding(self, value: float) -> None:
        if value != self._cell_padding:
            self.invalidate()
        self._cell_padding = value

    @property
    def content_insets(self) -> EdgeInsets:
        return self._content_insets

    @content_insets.setter
    def content_insets(self, value: EdgeInsets) -> None:
        if value != self._content_insets:
            self.invalidate()
        self._content_insets = value

    # ------------------------------------------------------------------
    # Cache state
    # ------------------------------------------------------------------

    @property
    def is_prepared(self) -> bool:
        return self._cache is not None

    @property
    def result(self) -> LayoutResult | None:
        return self._cache

    @property
    def content_size(self) -> Size:
        if self._cache is None:
            return Size()
        return self._cache.content_size

    def invalidate(self) -> None:
        """Drop the cached layout so the next compute_layout() starts over."""
        if self._cache is not None:
            logger.debug("Layout invalidated (%d items dropped)", len(self._cache))
        self._cache = None
        self._viewport_width = None

    def should_invalidate_for_width(self, viewport_width: float) -> bool:
        return self._cache is not None and viewport_width != self._viewport_width

    # ------------------------------------------------------------------
    # Layout pass
    # ------------------------------------------------------------------

    def compute_layout(
        self,
        item_count: int,
        viewport_width: float,
        height_provider: HeightProvider,
    ) -> LayoutResult:
        """Return the layout for `item_count` items, computing it if not cached.

        A warm cache is returned as-is; the caller invalidates when the item
        count, viewport width or provider heights change.

        Raises LayoutConfigurationError for unusable configuration or inputs
        and InvalidHeightError for negative heights under the 'reject' policy.
        """
        if self._cache is not None:
            return self._cache

        result = self._layout_pass(item_count, viewport_width, height_provider)

        self._cache = result
        self._viewport_width = viewport_width
        self.recompute_count += 1
        logger.debug(
            "Laid out %d items in %d columns → %.1f x %.1f",
            len(result), self.number_of_columns, result.content_width, result.content_height,
        )
        return result

    def _layout_pass(
        self,
        item_count: int,
        viewport_width: float,
        height_provider: HeightProvider,
    ) -> LayoutResult:
        columns = self.number_of_columns
        padding = self.cell_padding
        if columns <= 0:
            raise LayoutConfigurationError(f"number_of_columns must be at least 1, got {columns}")
        if not math.isfinite(padding) or padding < 0:
            raise LayoutConfigurationError(f"cell_padding must be finite and not negative, got {padding}")
        if item_count < 0:
            raise LayoutConfigurationError(f"item_count must not be negative, got {item_count}")
        if not math.isfinite(viewport_width) or viewport_width <= 0:
            raise LayoutConfigurationError(f"viewport_width must be finite and positive, got {viewport_width}")
        insets = self.content_insets
        if not (math.isfinite(insets.left) and math.isfinite(insets.right)):
            raise LayoutConfigurationError(
                f"content insets must be finite, got left={insets.left} right={insets.right}"
            )

        content_width = viewport_width - self.content_insets.horizontal
        if content_width <= 0:
            raise LayoutConfigurationError(
                f"content insets ({self.content_insets.horizontal}) leave no room "
                f"in a viewport of width {viewport_width}"
            )
        column_width = content_width / columns
        item_width = column_width - 2 * padding
        if item_width < 0:
            raise LayoutConfigurationError(
                f"column width {column_width:.2f} is too narrow for cell_padding {padding}"
            )

        y_offsets = [0.0] * columns
        content_height = 0.0
        items: list[LayoutItem] = []

        for index in range(item_count):
            column = index % columns
            photo_height = self._checked_height(
                index, "photo", height_provider.height_for_photo(index, item_width)
            )
            annotation_height = self._checked_height(
                index, "annotation", height_provider.height_for_annotation(index, item_width)
            )
            slot_height = padding + photo_height + annotation_height + padding
            slot = Rect(
                x=column * column_width,
                y=y_offsets[column],
                width=column_width,
                height=slot_height,
            )
            items.append(LayoutItem(
                index=index,
                frame=slot.inset(padding, padding),
                photo_height=photo_height,
                annotation_height=annotation_height,
            ))
            content_height = max(content_height, slot.max_y)
            y_offsets[column] += slot_height

        return LayoutResult(
            items=tuple(items),
            content_width=content_width,
            content_height=content_height,
            column_width=column_width,
        )

    def _checked_height(self, index: int, kind: str, value: float) -> float:
        value = float(value)
        if value >= 0:
            return value
        if self.negative_height_policy == "reject":
            raise InvalidHeightError(index, kind, value)
        logger.warning("Clamping negative %s height %.2f for item %d to 0", kind, value, index)
        return 0.0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def frames_intersecting(self, rect: Rect) -> list[LayoutItem]:
        """Cached items whose frame intersects `rect`, in index order."""
        if self._cache is None:
            return []
        return [item for item in self._cache.items if item.frame.intersects(rect)]

    def item_at(self, index: int) -> LayoutItem | None:
        if self._cache is None or not 0 <= index < len(self._cache):
            return None
        return self._cache.items[index]
