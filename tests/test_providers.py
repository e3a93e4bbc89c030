"""Tests for the height providers."""
import pytest

from layout.masonry import MasonryLayout
from layout.providers import CallableHeightProvider, CardHeightProvider, HeightProvider
from models.catalog import Card, CardCatalog
from models.design import CardDesign


class TestCallableHeightProvider:
    def test_splits_tuple(self):
        provider = CallableHeightProvider(lambda index, width: (index * 10.0, width / 2))
        assert provider.height_for_photo(3, 100.0) == 30.0
        assert provider.height_for_annotation(3, 100.0) == 50.0

    def test_callback_runs_once_per_item(self):
        calls = []

        def heights(index, width):
            calls.append((index, width))
            return 10.0, 2.0

        provider = CallableHeightProvider(heights)
        engine = MasonryLayout(number_of_columns=2, cell_padding=0.0)
        engine.compute_layout(4, 200.0, provider)
        assert calls == [(0, 100.0), (1, 100.0), (2, 100.0), (3, 100.0)]

    def test_new_width_calls_again(self):
        calls = []
        provider = CallableHeightProvider(lambda index, width: calls.append(width) or (width, 0.0))
        assert provider.height_for_photo(0, 100.0) == 100.0
        assert provider.height_for_annotation(0, 100.0) == 0.0
        assert provider.height_for_photo(0, 50.0) == 50.0
        assert calls == [100.0, 50.0]

    def test_satisfies_protocol(self):
        provider: HeightProvider = CallableHeightProvider(lambda index, width: (0.0, 0.0))
        assert provider.height_for_photo(0, 1.0) == 0.0


class TestCardHeightProvider:
    def test_photo_height_follows_aspect_ratio(self, catalog, design):
        provider = CardHeightProvider(catalog, design)
        assert provider.height_for_photo(0, 138.0) == pytest.approx(92.0)   # 600x400
        assert provider.height_for_photo(1, 138.0) == pytest.approx(207.0)  # 400x600
        assert provider.height_for_photo(2, 138.0) == pytest.approx(138.0)  # square

    def test_annotation_is_padding_plus_caption_and_comment(self, catalog, design):
        provider = CardHeightProvider(catalog, design)
        # caption: 1 line of 15pt * 1.2; comment: 45 chars at 27 per line → 2 lines of 12
        assert provider.height_for_annotation(0, 138.0) == pytest.approx(4.0 + 18.0 + 24.0)

    def test_caption_only(self, catalog, design):
        provider = CardHeightProvider(catalog, design)
        assert provider.height_for_annotation(1, 138.0) == pytest.approx(4.0 + 18.0)

    def test_no_text_means_no_annotation(self, catalog, design):
        provider = CardHeightProvider(catalog, design)
        assert provider.height_for_annotation(2, 138.0) == 0.0

    def test_multiline_comment(self, catalog, design):
        provider = CardHeightProvider(catalog, design)
        assert provider.height_for_annotation(3, 138.0) == pytest.approx(4.0 + 18.0 + 24.0)

    def test_default_design(self):
        catalog = CardCatalog(cards=[Card(id="a", photo_width=100, photo_height=50, caption="Hi")])
        provider = CardHeightProvider(catalog)
        assert provider.design == CardDesign()
        assert provider.height_for_annotation(0, 100.0) == pytest.approx(4.0 + 18.0)

    def test_drives_engine(self, catalog, design):
        engine = MasonryLayout(number_of_columns=2, cell_padding=6.0)
        result = engine.compute_layout(len(catalog), 300.0, CardHeightProvider(catalog, design))

        tea, bridge, harbour, market = result.items
        assert tea.photo_height == pytest.approx(92.0)
        assert tea.frame.height == pytest.approx(92.0 + 46.0)
        # harbour sits under tea in column 0
        assert harbour.frame.y == pytest.approx(6.0 + 92.0 + 46.0 + 6.0 + 6.0)
        assert market.frame.x == 156.0
        assert result.content_height == pytest.approx(max(
            (6 + 92 + 46 + 6) + (6 + 138 + 6),
            (6 + 207 + 22 + 6) + (6 + 103.5 + 46 + 6),
        ))
