"""Tests for per-frame viewport orchestration."""

import pytest
from structlog.testing import capture_logs

from gridworld.camera import Camera
from gridworld.config import Config, DisplayConfig, Size
from gridworld.controls import Controls
from gridworld.terrain_types import Tile
from gridworld.world import World


def collect(world: World) -> list[tuple[Tile, tuple[float, float]]]:
    cells: list[tuple[Tile, tuple[float, float]]] = []
    world.draw(lambda tile, screen: cells.append((tile, screen)))
    return cells


class TestWorldSetup:
    def test_defaults_from_config(self, small_config: Config) -> None:
        world = World(small_config)
        assert world.window_size == (100, 60)
        assert world.tile_size == (10, 10)
        assert world.camera.center == (0.0, 0.0)
        assert world.camera.move_speed == 5.25
        assert len(world.store) == 0

    def test_creation_logged(self, small_config: Config) -> None:
        with capture_logs() as logs:
            World(small_config)
        assert any(log["event"] == "world_created" for log in logs)

    def test_worlds_are_isolated(self, small_config: Config) -> None:
        """Zooming or moving one world leaves another untouched."""
        a = World(small_config)
        b = World(small_config)
        a.zoom(3)
        a.camera.apply_input(1, 1)
        assert b.tile_size == (10, 10)
        assert b.camera.center == (0.0, 0.0)


class TestScreenTiles:
    def test_screen_center_is_tile_origin(self, small_config: Config) -> None:
        world = World(small_config)
        assert world.screen_to_world((50, 30)) == (0.0, 0.0)
        assert world.tile_coordinate_at_screen((50, 30)) == (0, 0)

    def test_just_left_of_center_is_negative_tile(self, small_config: Config) -> None:
        world = World(small_config)
        assert world.tile_coordinate_at_screen((49, 29)) == (-1, -1)

    def test_camera_shifts_tiles(self, small_config: Config) -> None:
        world = World(small_config, camera=Camera(x=100.0, y=-20.0))
        assert world.tile_coordinate_at_screen((50, 30)) == (10, -2)

    def test_world_screen_inverse(self, small_config: Config) -> None:
        world = World(small_config, camera=Camera(x=-33.3, y=71.25))
        point = (12.5, -8.75)
        assert world.screen_to_world(world.world_to_screen(point)) == pytest.approx(point)

    def test_tile_at_screen_uses_store(self, small_config: Config) -> None:
        world = World(small_config)
        assert world.tile_at_screen((0, 0)) == world.store.get_tile((-5, -3))


class TestDraw:
    def test_exhaustive_row_major(self, small_config: Config) -> None:
        world = World(small_config)
        cells = collect(world)
        positions = [screen for _, screen in cells]

        assert len(cells) == 60
        assert positions == [
            (float(x * 10), float(y * 10)) for y in range(6) for x in range(10)
        ]
        assert len(set(positions)) == len(positions)

    def test_draw_returns_count(self, small_config: Config) -> None:
        world = World(small_config)
        assert world.draw(lambda tile, screen: None) == 60

    def test_cells_resolve_expected_tiles(self, small_config: Config) -> None:
        world = World(small_config)
        for tile, screen in collect(world):
            column, row = int(screen[0] // 10), int(screen[1] // 10)
            assert tile == world.store.get_tile((column - 5, row - 3))

    def test_only_visible_chunks_generated(self, small_config: Config) -> None:
        """Tiles (-5..4, -3..2) span chunks (-1..0, -1..0)."""
        world = World(small_config)
        collect(world)
        assert len(world.store) == 4
        for chunk in [(-1, -1), (0, -1), (-1, 0), (0, 0)]:
            assert chunk in world.store

    def test_partial_edge_cells_skipped(self, small_config: Config) -> None:
        config = small_config.model_copy(
            update={
                "display": DisplayConfig(
                    window=Size(width=105, height=65),
                    tile_size=Size(width=10, height=10),
                )
            }
        )
        cells = collect(World(config))
        assert len(cells) == 60
        assert max(screen[0] for _, screen in cells) == 90.0

    def test_same_frame_twice_identical(self, small_config: Config) -> None:
        world = World(small_config)
        assert collect(world) == collect(world)

    def test_two_worlds_same_seed_identical(self, small_config: Config) -> None:
        assert collect(World(small_config)) == collect(World(small_config))


class TestInput:
    def test_zoom_in_and_out(self, small_config: Config) -> None:
        world = World(small_config)
        world.zoom(1)
        assert world.tile_size == (11, 11)
        world.zoom(-2)
        assert world.tile_size == (9, 9)

    def test_zoom_clamped_at_one(self, small_config: Config) -> None:
        world = World(small_config)
        world.zoom(-50)
        assert world.tile_size == (1, 1)
        world.zoom(-1)
        assert world.tile_size == (1, 1)

    def test_zoom_changes_cell_count(self, small_config: Config) -> None:
        world = World(small_config)
        world.zoom(10)
        assert world.draw(lambda tile, screen: None) == 5 * 3

    def test_handle_input_moves_and_zooms(self, small_config: Config) -> None:
        world = World(small_config)
        world.handle_input(Controls(right=True, up=True, zoom_out=True))
        assert world.camera.center == (5.25, -5.25)
        assert world.tile_size == (9, 9)

    def test_no_input_no_change(self, small_config: Config) -> None:
        world = World(small_config)
        world.handle_input(Controls())
        assert world.camera.center == (0.0, 0.0)
        assert world.tile_size == (10, 10)
