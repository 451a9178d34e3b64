"""Shared test fixtures for tile world tests."""

import pytest
import structlog

from gridworld.chunks import ChunkGenerator, ChunkStore
from gridworld.config import Config, DisplayConfig, GenerationConfig, Scale, Size
from gridworld.noise import NoiseField


@pytest.fixture
def generation_config() -> GenerationConfig:
    """Seed 256, 25x25 chunks, 100x100 map scale, water at 0.4."""
    return GenerationConfig(
        seed=256,
        map_scale=Scale(x=100, y=100),
        chunk_size=Size(width=25, height=25),
        water_level=0.4,
    )


@pytest.fixture
def noise_field(generation_config: GenerationConfig) -> NoiseField:
    return NoiseField(generation_config.seed, generation_config.map_scale)


@pytest.fixture
def generator(
    noise_field: NoiseField, generation_config: GenerationConfig
) -> ChunkGenerator:
    return ChunkGenerator(noise_field, generation_config)


@pytest.fixture
def store(generator: ChunkGenerator) -> ChunkStore:
    """Empty chunk store."""
    return ChunkStore(generator)


@pytest.fixture
def small_config(generation_config: GenerationConfig) -> Config:
    """100x60 window with 10px tiles: a 10x6 grid of visible cells."""
    return Config(
        generation=generation_config,
        display=DisplayConfig(
            window=Size(width=100, height=60),
            tile_size=Size(width=10, height=10),
        ),
    )


@pytest.fixture
def reset_structlog():
    """Restore default structlog configuration after a test configures it."""
    yield
    structlog.reset_defaults()
