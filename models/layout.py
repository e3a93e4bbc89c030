from pydantic import BaseModel, ConfigDict, Field

from models.geometry import Rect, Size


class LayoutItem(BaseModel):
    """Placement of one item: its inset frame plus the heights it was sized from.

    `photo_height` lets the consumer size the image view independently of the
    annotation block below it.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    frame: Rect
    photo_height: float = Field(ge=0.0)
    annotation_height: float = Field(default=0.0, ge=0.0)


class LayoutResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: tuple[LayoutItem, ...] = ()
    content_width: float = Field(default=0.0, ge=0.0)
    content_height: float = Field(default=0.0, ge=0.0)
    column_width: float = Field(default=0.0, ge=0.0)

    @property
    def content_size(self) -> Size:
        return Size(width=self.content_width, height=self.content_height)

    def __len__(self) -> int:
        return len(self.items)
