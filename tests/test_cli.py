import json
import logging
import pytest
from mrfo.cli import main

ARGS = ["-N", "10", "-d", "2", "-T", "5", "-L", "-5", "-U", "5", "--seed", "1"]


def test_no_arguments_prints_help(capsys) -> None:
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Manta Ray Foraging Optimization" in out
    assert "--populationSize" in out


def test_run_from_flags(caplog) -> None:
    caplog.set_level(logging.INFO)
    assert main(ARGS + ["--function", "sphere"]) == 0
    messages = [r.getMessage() for r in caplog.records]
    assert "Optimization complete!" in messages
    assert any(m.startswith("Best fitness:") for m in messages)
    assert not any(m.startswith("Iteration:") for m in messages)


def test_verbose_logs_iterations(caplog) -> None:
    caplog.set_level(logging.INFO)
    assert main(ARGS + ["-v"]) == 0
    messages = [r.getMessage() for r in caplog.records]
    assert "Iteration: 5" in messages


def test_run_from_file(tmp_path, caplog) -> None:
    caplog.set_level(logging.INFO)
    path = tmp_path / "parameters.json"
    path.write_text(json.dumps({"populationSize": 5, "dimensions": 2, "maxIterations": 3,
                                "searchSpaceMin": -1.0, "searchSpaceMax": 1.0}))
    assert main(["-f", str(path)]) == 0
    assert "Optimization complete!" in [r.getMessage() for r in caplog.records]


@pytest.mark.parametrize("argv", [
    ["-N", "10", "-d", "2", "-L", "-5", "-U", "5"],
    ["-N", "10", "-d", "2", "-T", "5", "-L", "5", "-U", "-5"],
    ["-f", "does-not-exist.yaml"],
    ["--bogus"],
])
def test_bad_arguments_exit(argv, capsys) -> None:
    with pytest.raises(SystemExit) as e:
        main(argv)
    assert e.value.code == 2
    assert "error" in capsys.readouterr().err


def test_non_finite_file_value_exits(tmp_path, capsys) -> None:
    path = tmp_path / "inf.yaml"
    path.write_text("populationSize: 10\ndimensions: 2\nmaxIterations: .inf\n"
                    "searchSpaceMin: -1\nsearchSpaceMax: 1\n")
    with pytest.raises(SystemExit) as e:
        main(["-f", str(path)])
    assert e.value.code == 2
    assert "max_iterations" in capsys.readouterr().err


def test_runs_without_seed_are_reproducible(caplog) -> None:
    caplog.set_level(logging.INFO)
    argv = ["-N", "8", "-d", "3", "-T", "10", "-L", "-5", "-U", "5"]
    best = []
    for _ in range(2):
        caplog.clear()
        assert main(argv) == 0
        best.append([r.getMessage() for r in caplog.records if r.getMessage().startswith("Best")])
    assert best[0] and best[0] == best[1]
