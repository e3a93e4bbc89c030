from pathlib import Path

import pytest

from layout.masonry import MasonryLayout
from layout.providers import CallableHeightProvider
from models.catalog import CardCatalog
from models.design import CardDesign
from settings import Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any MASONRY_* variables or .env in the working directory."""
    return Settings(_env_file=None)


@pytest.fixture
def catalog() -> CardCatalog:
    """Four cards of mixed orientation, two with captions and comments."""
    return CardCatalog.load(FIXTURES_DIR / "cards.yaml")


@pytest.fixture
def design() -> CardDesign:
    return CardDesign.load(FIXTURES_DIR / "design.yaml")


@pytest.fixture
def engine() -> MasonryLayout:
    return MasonryLayout()


def fixed_heights(photo: float, annotation: float = 0.0) -> CallableHeightProvider:
    """Provider returning the same heights for every item."""
    return CallableHeightProvider(lambda index, width: (photo, annotation))


def listed_heights(photos: list[float], annotations: list[float] | None = None) -> CallableHeightProvider:
    """Provider returning photos[i] (and annotations[i], default 0) for item i."""
    annotations = annotations or [0.0] * len(photos)
    return CallableHeightProvider(lambda index, width: (photos[index], annotations[index]))
