"""Tests for headless preview rendering."""

from pathlib import Path
from unittest.mock import patch

import numpy as np
import pytest
from PIL import Image

from gridworld.chunks import ChunkStore
from gridworld.colors import color_for_tile
from gridworld.preview import compute_terrain_stats, render_preview, save_preview


class TestRenderPreview:
    def test_size(self, store: ChunkStore) -> None:
        image = render_preview(store, (-10, -10), 20, 12)
        assert image.size == (20, 12)
        assert image.mode == "RGB"

    def test_pixels_match_tile_colors(self, store: ChunkStore) -> None:
        origin = (-3, -2)
        pixels = np.asarray(render_preview(store, origin, 6, 4))
        for y in range(4):
            for x in range(6):
                tile = store.get_tile((origin[0] + x, origin[1] + y))
                assert tuple(pixels[y, x]) == color_for_tile(tile)

    def test_tile_pixels_scale(self, store: ChunkStore) -> None:
        small = np.asarray(render_preview(store, (0, 0), 5, 5))
        large = np.asarray(render_preview(store, (0, 0), 5, 5, tile_pixels=3))
        assert large.shape == (15, 15, 3)
        assert tuple(large[14, 14]) == tuple(small[4, 4])
        assert tuple(large[3, 0]) == tuple(small[1, 0])

    def test_invalid_dimensions(self, store: ChunkStore) -> None:
        with pytest.raises(ValueError):
            render_preview(store, (0, 0), 0, 5)

    def test_prefetches_region_chunks(self, store: ChunkStore) -> None:
        """The chunks under the region are generated in one batch up front."""
        with patch.object(store, "prefetch", wraps=store.prefetch) as spy:
            render_preview(store, (-10, -10), 20, 20)

        spy.assert_called_once_with([(-1, -1), (0, -1), (-1, 0), (0, 0)])
        assert store.generated_count == 4
        assert len(store) == 4


class TestSavePreview:
    def test_writes_png(self, store: ChunkStore, tmp_path: Path) -> None:
        path = tmp_path / "out" / "preview.png"
        save_preview(path, store, (0, 0), 30, 30)
        assert path.exists()
        with Image.open(path) as image:
            assert image.size == (30, 30)
        # 30x30 tiles from (0, 0) span 2x2 chunks of 25
        assert len(store) == 4


class TestTerrainStats:
    def test_counts_sum_to_total(self, store: ChunkStore) -> None:
        stats = compute_terrain_stats(store, (-20, -20), 40, 40)
        total = sum(entry["count"] for entry in stats["terrain"].values())
        assert total == 1600
        assert stats["dimensions"]["total_tiles"] == 1600
        assert stats["terrain"]["Undefined"]["count"] == 0
        assert 0 <= stats["summary"]["waterlogged_tiles"] <= 1600

    def test_prefetches_region_chunks(self, store: ChunkStore) -> None:
        with patch.object(store, "prefetch", wraps=store.prefetch) as spy:
            compute_terrain_stats(store, (0, 0), 26, 1)

        spy.assert_called_once_with([(0, 0), (1, 0)])
        assert len(store) == 2

    def test_invalid_dimensions(self, store: ChunkStore) -> None:
        with pytest.raises(ValueError):
            compute_terrain_stats(store, (0, 0), 5, 0)
