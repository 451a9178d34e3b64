"""World configuration models and TOML loading."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Size(BaseModel, frozen=True):
    """Positive integer width/height pair."""

    width: int = Field(gt=0)
    height: int = Field(gt=0)

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)


class Scale(BaseModel, frozen=True):
    """Per-axis noise sampling stretch. Larger values give smoother terrain."""

    x: float = Field(gt=0)
    y: float = Field(gt=0)


class GenerationConfig(BaseModel, frozen=True):
    """Settings that affect generated terrain. Fixed at startup."""

    seed: int = Field(
        default=256,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Noise seed, the sole source of randomness",
    )
    map_scale: Scale = Field(
        default_factory=lambda: Scale(x=50, y=50),
        description="Noise is sampled at (x / map_scale.x, y / map_scale.y)",
    )
    chunk_size: Size = Field(
        default_factory=lambda: Size(width=25, height=25),
        description="Tiles per chunk edge",
    )
    water_level: float = Field(
        default=0.4, ge=0.0, le=1.0, description="Heights below this are waterlogged"
    )


class DisplayConfig(BaseModel):
    """Viewport settings. tile_size is the starting zoom level."""

    window: Size = Field(
        default_factory=lambda: Size(width=1080, height=720),
        description="Viewport size in pixels",
    )
    tile_size: Size = Field(
        default_factory=lambda: Size(width=5, height=5),
        description="Pixels per tile edge",
    )
    clear_color: tuple[int, int, int] = Field(
        default=(255, 255, 255), description="Background RGB"
    )
    move_speed: float = Field(default=5.25, description="Camera pixels per frame")
    fps: int = Field(default=60, gt=0)
    title: str = "Another grid game"
    show_chunk_borders: bool = Field(
        default=False, description="Outline chunk edges in the viewer"
    )


class Config(BaseModel):
    """Complete configuration for a tile world."""

    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


def load_config(config_path: Path) -> Config:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed Config object.

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid.
    """
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Config file not found: {config_path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Malformed TOML in {config_path}: {exc}") from exc

    try:
        return Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid config {config_path}:\n{exc}") from exc


def configs_dir() -> Path:
    """Directory holding the bundled TOML configs."""
    return Path(__file__).parent.parent.parent / "configs"


def find_config(name: str) -> Path:
    """Find a config file by name.

    Searches in the following order:
    1. Exact path if name contains path separator or ends with .toml
    2. configs/{name}.toml

    Raises:
        ConfigurationError: If config file is not found.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise ConfigurationError(f"Config file not found: {name}")

    config_path = configs_dir() / f"{name}.toml"
    if config_path.exists():
        return config_path

    raise ConfigurationError(
        f"Config '{name}' not found in {configs_dir()}. "
        f"Available configs: {list_configs()}"
    )


def list_configs() -> list[str]:
    """List available config names."""
    directory = configs_dir()
    if not directory.exists():
        return []
    return sorted(p.stem for p in directory.glob("*.toml"))
