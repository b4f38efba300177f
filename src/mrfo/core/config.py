"""
Run configuration for the MRFO engine.

``MRFOConfig`` is an immutable record; build it through ``make_config`` (or
``load_config`` for YAML/JSON files), which rejects incomplete or inconsistent
parameter sets up front.
"""
from __future__ import annotations
import math
import numbers
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
import yaml


class ConfigError(ValueError):
    """Raised when a configuration is missing a field or holds invalid values."""


@dataclass(frozen=True)
class MRFOConfig:
    population_size: int
    dimensions: int
    max_iterations: int
    search_space_min: float
    search_space_max: float
    enable_logging: bool = False
    seed: Optional[int] = None


_REQUIRED = ("population_size", "dimensions", "max_iterations", "search_space_min", "search_space_max")

# file keys accepted in addition to the field names themselves
_ALIASES = {
    "populationSize": "population_size",
    "maxIterations": "max_iterations",
    "searchSpaceMin": "search_space_min",
    "searchSpaceMax": "search_space_max",
    "enableLogging": "enable_logging",
}


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if not math.isfinite(value) or value != int(value):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    return int(value)


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ConfigError(f"{name} must be finite, got {value!r}")
    return value


def make_config(population_size: Optional[int] = None,
                dimensions: Optional[int] = None,
                max_iterations: Optional[int] = None,
                search_space_min: Optional[float] = None,
                search_space_max: Optional[float] = None,
                enable_logging: bool = False,
                seed: Optional[int] = None) -> MRFOConfig:
    """Validate the parameters and build an ``MRFOConfig``.

    Raises:
        ConfigError: a required field is unset, a size is not positive, or
            the bounds are not finite with ``search_space_min < search_space_max``.
    """
    given = dict(population_size=population_size, dimensions=dimensions, max_iterations=max_iterations,
                 search_space_min=search_space_min, search_space_max=search_space_max)
    missing = [k for k in _REQUIRED if given[k] is None]
    if missing:
        raise ConfigError(f"all arguments must be set; missing: {', '.join(missing)}")

    N = _as_int("population_size", population_size)
    D = _as_int("dimensions", dimensions)
    T = _as_int("max_iterations", max_iterations)
    for name, v in (("population_size", N), ("dimensions", D), ("max_iterations", T)):
        if v < 1:
            raise ConfigError(f"{name} must be >= 1, got {v}")
    lo = _as_float("search_space_min", search_space_min)
    hi = _as_float("search_space_max", search_space_max)
    if not lo < hi:
        raise ConfigError(f"search_space_min ({lo}) must be < search_space_max ({hi})")
    if seed is not None:
        seed = _as_int("seed", seed)
    return MRFOConfig(N, D, T, lo, hi, bool(enable_logging), seed)


def config_from_mapping(data: Dict[str, Any]) -> MRFOConfig:
    if not isinstance(data, dict):
        raise ConfigError(f"configuration must be a mapping, got {type(data).__name__}")
    kwargs: Dict[str, Any] = {}
    for key, value in data.items():
        name = _ALIASES.get(key, key)
        if name not in MRFOConfig.__dataclass_fields__:
            raise ConfigError(f"unknown configuration key {key!r}")
        kwargs[name] = value
    return make_config(**kwargs)


def load_config(path: str | Path) -> MRFOConfig:
    """Read a YAML (or JSON) configuration file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"cannot parse {path}: {e}") from e
    return config_from_mapping(data or {})
