"""Load/save simulation parameters. Config is a JSON object (default ./config.json) merged over defaults, then validated."""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path

from world.constants import (
    CONTINUOUS, DISCRETE, VARIANTS,
    DEFAULT_H, DEFAULT_W, DEFAULT_HOTSPOTS, DEFAULT_HEAT, DEFAULT_MAX_ENERGY,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.json")

_KEYS = ("dims", "hotspots", "heat", "variant", "seed", "sleep_interval_ms", "size_factor", "max_energy")


class ConfigError(ValueError):
    """Bad or unreadable configuration. Raised before any simulation step runs."""


@dataclass(frozen=True)
class SimConfig:
    """
    Simulation parameters. dims/hotspots/heat/variant/seed drive the core; sleep_interval_ms,
    size_factor and max_energy only matter to the window loop and renderer.
    """
    dims: tuple[int, int] = (DEFAULT_H, DEFAULT_W)
    hotspots: int = DEFAULT_HOTSPOTS
    heat: float = DEFAULT_HEAT             # discrete only: chance a cell scatters this tick
    variant: str = CONTINUOUS
    seed: int = -1                         # -1 = fresh random seed each run
    sleep_interval_ms: int = 20
    size_factor: int = 8                   # screen pixels per cell side
    max_energy: float = DEFAULT_MAX_ENERGY

    def __post_init__(self) -> None:
        _validate(self)

    @property
    def height(self) -> int:
        return self.dims[0]

    @property
    def width(self) -> int:
        return self.dims[1]


def _is_int(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _is_number(v) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _validate(cfg: SimConfig) -> None:
    dims = cfg.dims
    if not isinstance(dims, (tuple, list)) or len(dims) != 2 or not all(_is_int(d) for d in dims):
        raise ConfigError(f"dims must be two integers (height, width), got {dims!r}")
    h, w = dims
    if h <= 0 or w <= 0:
        raise ConfigError(f"dims must be positive, got {h}×{w}")
    if cfg.variant not in VARIANTS:
        raise ConfigError(f"variant must be one of {', '.join(VARIANTS)}, got {cfg.variant!r}")
    if cfg.variant == CONTINUOUS and (h < 2 or w < 2):
        raise ConfigError(f"continuous diffusion needs at least a 2×2 grid, got {h}×{w}")
    if not _is_int(cfg.hotspots) or not 0 < cfg.hotspots <= h * w:
        raise ConfigError(f"hotspots must be an integer in [1, {h * w}], got {cfg.hotspots!r}")
    if cfg.variant == DISCRETE and (w * w) // cfg.hotspots < 1:
        raise ConfigError(f"{cfg.hotspots} hotspots leave less than one unit each on a {h}×{w} grid")
    if not _is_number(cfg.heat) or not 0.0 <= cfg.heat <= 1.0:
        raise ConfigError(f"heat must be a probability in [0, 1], got {cfg.heat!r}")
    if not _is_int(cfg.seed) or (cfg.seed < 0 and cfg.seed != -1):
        raise ConfigError(f"seed must be -1 or a non-negative integer, got {cfg.seed!r}")
    if not _is_int(cfg.sleep_interval_ms) or cfg.sleep_interval_ms < 0:
        raise ConfigError(f"sleep_interval_ms must be a non-negative integer, got {cfg.sleep_interval_ms!r}")
    if not _is_int(cfg.size_factor) or cfg.size_factor < 1:
        raise ConfigError(f"size_factor must be a positive integer, got {cfg.size_factor!r}")
    if not _is_number(cfg.max_energy) or cfg.max_energy <= 0:
        raise ConfigError(f"max_energy must be positive, got {cfg.max_energy!r}")


def _default_config() -> dict:
    return {
        "dims": [DEFAULT_H, DEFAULT_W],
        "hotspots": DEFAULT_HOTSPOTS,
        "heat": DEFAULT_HEAT,
        "variant": CONTINUOUS,
        "seed": -1,
        "sleep_interval_ms": 20,
        "size_factor": 8,
        "max_energy": DEFAULT_MAX_ENERGY,
    }


def _merge_defaults(data: dict) -> dict:
    d = _default_config()
    unknown = sorted(set(data) - set(_KEYS))
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
    for k in _KEYS:
        if k in data:
            d[k] = data[k]
    return d


def parse_config(data: dict) -> SimConfig:
    """Merge a raw dict over the defaults and validate it."""
    if not isinstance(data, dict):
        raise ConfigError(f"config must be a JSON object, got {type(data).__name__}")
    d = _merge_defaults(data)
    dims = d["dims"]
    if not isinstance(dims, (list, tuple)):
        raise ConfigError(f"dims must be a [height, width] pair, got {dims!r}")
    d["dims"] = tuple(dims)
    return SimConfig(**d)


def load_config(path: Path | str | None = None) -> SimConfig:
    """
    Read and validate a config file. With no path, ./config.json is used if present and the
    defaults otherwise; an explicit path that does not exist is an error.
    """
    if path is None:
        p = DEFAULT_CONFIG_PATH
        if not p.exists():
            logger.info("No %s found, using defaults", p)
            return parse_config({})
    else:
        p = Path(path)
        if not p.exists():
            raise ConfigError(f"config file not found: {p}")
    try:
        with open(p, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"could not parse {p}: {e}") from e
    except OSError as e:
        raise ConfigError(f"could not read {p}: {e}") from e
    cfg = parse_config(data)
    logger.info("Loaded config from %s", p)
    return cfg


def config_to_dict(cfg: SimConfig) -> dict:
    d = asdict(cfg)
    d["dims"] = list(cfg.dims)
    return d


def save_config(cfg: SimConfig, path: Path | str = DEFAULT_CONFIG_PATH) -> Path:
    p = Path(path)
    if p.parent != Path("."):
        p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w") as f:
        json.dump(config_to_dict(cfg), f, indent=2)
    return p
