import dataclasses
import json
import math
import numpy as np
import pytest
from mrfo.core.config import ConfigError, MRFOConfig, config_from_mapping, load_config, make_config

FULL = dict(population_size=30, dimensions=2, max_iterations=200, search_space_min=-10.0, search_space_max=10.0)


def test_make_config() -> None:
    cfg = make_config(**FULL)
    assert cfg == MRFOConfig(30, 2, 200, -10.0, 10.0, False, None)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.dimensions = 3


@pytest.mark.parametrize("missing", sorted(FULL))
def test_missing_field(missing: str) -> None:
    params = dict(FULL)
    del params[missing]
    with pytest.raises(ConfigError, match=missing):
        make_config(**params)


@pytest.mark.parametrize("override", [
    dict(population_size=0),
    dict(dimensions=-1),
    dict(max_iterations=0),
    dict(population_size=2.5),
    dict(search_space_min=10.0),
    dict(search_space_min=11.0),
    dict(search_space_max=math.inf),
    dict(search_space_min=math.nan),
    dict(search_space_max="10"),
    dict(seed=1.5),
    dict(max_iterations=math.inf),
    dict(population_size=math.nan),
    dict(dimensions=-math.inf),
    dict(seed=math.nan),
])
def test_invalid_values(override) -> None:
    with pytest.raises(ConfigError):
        make_config(**{**FULL, **override})


def test_config_error_is_value_error() -> None:
    assert issubclass(ConfigError, ValueError)


def test_load_json(tmp_path) -> None:
    path = tmp_path / "parameters.json"
    path.write_text(json.dumps({"populationSize": 10, "dimensions": 3, "maxIterations": 20,
                                "searchSpaceMin": -5, "searchSpaceMax": 5, "enableLogging": True}))
    cfg = load_config(path)
    assert cfg == MRFOConfig(10, 3, 20, -5.0, 5.0, True, None)


def test_load_yaml(tmp_path) -> None:
    path = tmp_path / "main.yaml"
    path.write_text("population_size: 4\ndimensions: 1\nmax_iterations: 2\n"
                    "search_space_min: 0\nsearch_space_max: 1.5\nseed: 9\n")
    assert load_config(path).seed == 9


def test_load_errors(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")
    bad = tmp_path / "bad.yaml"
    bad.write_text("dimensions: [1, 2\n")
    with pytest.raises(ConfigError):
        load_config(bad)
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    with pytest.raises(ConfigError, match="must be set"):
        load_config(empty)


def test_unknown_key() -> None:
    with pytest.raises(ConfigError, match="unknown configuration key"):
        config_from_mapping({**FULL, "stepSize": 0.1})
    with pytest.raises(ConfigError, match="mapping"):
        config_from_mapping([1, 2])


def test_numpy_scalars_accepted() -> None:
    cfg = make_config(population_size=np.int64(30), dimensions=np.int32(2), max_iterations=np.float64(200.0),
                      search_space_min=np.float32(-10.0), search_space_max=np.int64(10), seed=np.uint16(7))
    assert cfg == MRFOConfig(30, 2, 200, -10.0, 10.0, False, 7)
    assert type(cfg.population_size) is int and type(cfg.search_space_max) is float


def test_load_non_finite_yaml(tmp_path) -> None:
    path = tmp_path / "inf.yaml"
    path.write_text("populationSize: .inf\ndimensions: 2\nmaxIterations: 5\n"
                    "searchSpaceMin: -1\nsearchSpaceMax: 1\n")
    with pytest.raises(ConfigError, match="population_size"):
        load_config(path)
