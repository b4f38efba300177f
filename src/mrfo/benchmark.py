"""
Multi-trial benchmark of MRFO over the bundled objective functions.

What this module produces (all reproducible from the seed):
- per-function summary: mean, std, min, max, success rate, 95% CI of the mean
- results.csv          : one row per (function, trial) with the final cost
- average_convergence.png : mean ± std best-so-far fitness by iteration
"""
from __future__ import annotations
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import yaml
from scipy import stats
from .algorithms.mrfo import MRFO
from .core.config import ConfigError, MRFOConfig, config_from_mapping
from .core.fitness import get_function

logger = logging.getLogger(__name__)


def run_multiple_trials(objectives: Mapping[str, Callable[[np.ndarray], float]], cfg: MRFOConfig,
                        num_trials: int = 30) -> Dict[str, Dict[str, List[Any]]]:
    """Run ``num_trials`` independent MRFO runs per objective.

    Trial ``k`` is seeded with ``cfg.seed + k`` (or ``k`` when no seed is set),
    so the same trial index sees the same random stream for every objective.
    """
    base_seed = cfg.seed or 0
    results = {name: {"costs": [], "histories": [], "solutions": []} for name in objectives}
    for trial in range(num_trials):
        logger.info("Trial %d/%d", trial + 1, num_trials)
        trial_cfg = replace(cfg, seed=base_seed + trial)
        for name, fn in objectives.items():
            out = MRFO(trial_cfg, fn).run()
            results[name]["costs"].append(out["f_best"])
            results[name]["histories"].append(out["history"])
            results[name]["solutions"].append(out["X_best"])
    return results


def analyze_results(results: Mapping[str, Mapping[str, List[Any]]], confidence: float = 0.95) -> Dict[str, Dict[str, float]]:
    analysis = {}
    for name, data in results.items():
        costs = np.asarray(data["costs"], dtype=float)
        valid = costs[np.isfinite(costs)]
        if valid.size == 0:
            analysis[name] = {"mean": np.nan, "std": np.nan, "min": np.nan, "max": np.nan,
                              "ci_lo": np.nan, "ci_hi": np.nan, "success_rate": 0.0}
            continue
        mean = float(valid.mean())
        if valid.size > 1 and valid.std(ddof=1) > 0:
            lo, hi = stats.t.interval(confidence, valid.size - 1, loc=mean, scale=stats.sem(valid))
        else:
            lo = hi = mean
        analysis[name] = {
            "mean": mean,
            "std": float(valid.std()),
            "min": float(valid.min()),
            "max": float(valid.max()),
            "ci_lo": float(lo),
            "ci_hi": float(hi),
            "success_rate": valid.size / costs.size,
        }
    return analysis


def results_to_frame(results: Mapping[str, Mapping[str, List[Any]]]) -> pd.DataFrame:
    rows = []
    for name, data in results.items():
        for trial, (cost, x) in enumerate(zip(data["costs"], data["solutions"])):
            rows.append({"function": name, "trial": trial, "cost": cost,
                         "solution": " ".join(f"{v:.6g}" for v in x)})
    return pd.DataFrame(rows, columns=["function", "trial", "cost", "solution"])


def plot_mean_convergence(results: Mapping[str, Mapping[str, List[Any]]], path: str | Path) -> Path:
    path = Path(path)
    if not results:
        raise ValueError("no results to plot")
    plt.figure(figsize=(12, 8))
    for name, data in results.items():
        H = np.asarray(data["histories"], dtype=float)
        mean_history = np.nanmean(H, axis=0)
        std_history = np.nanstd(H, axis=0)
        plt.plot(mean_history, label=name)
        plt.fill_between(range(H.shape[1]), mean_history - std_history, mean_history + std_history, alpha=0.2)
    plt.title(f"Average Convergence ({len(next(iter(results.values()))['costs'])} Trials)")
    plt.xlabel("Iteration")
    plt.ylabel("Best fitness")
    plt.yscale("symlog", linthresh=1e-8)
    plt.legend()
    plt.grid(True)
    plt.savefig(path)
    plt.close()
    return path


def main(cfg_path: str, out_dir: str | None = None) -> Dict[str, Dict[str, float]]:
    raw = yaml.safe_load(Path(cfg_path).read_text()) or {}
    functions = raw.pop("functions", ["ackley", "sphere", "rastrigin"])
    if not functions:
        raise ConfigError(f"{cfg_path}: functions must list at least one objective")
    num_trials = int(raw.pop("num_trials", 30))
    output_dir = raw.pop("output_dir", "outputs")
    out = Path(out_dir or output_dir)
    cfg = config_from_mapping(raw)

    results = run_multiple_trials({name: get_function(name) for name in functions}, cfg, num_trials)
    analysis = analyze_results(results)

    out.mkdir(parents=True, exist_ok=True)
    results_to_frame(results).to_csv(out / "results.csv", index=False)
    plot_mean_convergence(results, out / "average_convergence.png")

    print("\n=== Final Performance Summary ===")
    print(f"{'Function':<10}\t{'Mean':<12}\t{'Std':<10}\t{'Min':<12}\t{'Max':<12}\t{'95% CI':<24}\t{'Success':<8}")
    for name, a in analysis.items():
        print(f"{name:<10}\t{a['mean']:<12.4g}\t±{a['std']:<9.3g}\t{a['min']:<12.4g}\t{a['max']:<12.4g}\t"
              f"[{a['ci_lo']:.3g}, {a['ci_hi']:.3g}]{'':<8}\t{a['success_rate']:.1%}")
    return analysis

