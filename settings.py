from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    number_of_columns: int = 2
    cell_padding: float = 6.0
    content_inset_left: float = 0.0
    content_inset_right: float = 0.0
    negative_height_policy: Literal["clamp", "reject"] = "clamp"
    design_path: Path | None = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MASONRY_",
        env_file_encoding="utf-8",
    )

    @field_validator("number_of_columns")
    @classmethod
    def columns_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("number_of_columns must be at least 1")
        return v

    @field_validator("cell_padding", "content_inset_left", "content_inset_right")
    @classmethod
    def must_be_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("padding and insets must not be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()
