from __future__ import annotations
import logging
import math
import numpy as np
from typing import Any, Callable, Dict, List, Optional
from ..core.config import MRFOConfig
from ..core.rng import make_rng

logger = logging.getLogger(__name__)


class NotInitializedError(RuntimeError):
    """``step()`` or a result accessor was used before ``initialize()``."""


class OptimizationFinished(RuntimeError):
    """``step()`` was called after the iteration budget was spent."""


class Algorithm:
    """Population-based minimizer driven by ``initialize`` / ``step`` / ``is_done``.

    The population array is owned by the instance and updated in place by
    ``evolve``; the recorded best is a separate copy. Subclasses implement
    ``evolve`` and report candidate positions through ``_evaluate``.
    """
    name: str = "BASE"

    def __init__(self, cfg: MRFOConfig, fitness_fn: Callable[[np.ndarray], float],
                 rng: Optional[np.random.Generator] = None):
        self.cfg, self.fitness_fn = cfg, fitness_fn
        self.rng = rng if rng is not None else make_rng(cfg.seed)
        self.lb, self.ub = cfg.search_space_min, cfg.search_space_max
        self.X: Optional[np.ndarray] = None
        self._Xb: Optional[np.ndarray] = None
        self._fb = math.inf
        self._t = 0
        self._history: List[float] = []

    def initialize(self) -> np.ndarray:
        self._t, self._fb, self._history = 0, math.inf, []
        self.X = self.lb + (self.ub - self.lb) * self.rng.random((self.cfg.population_size, self.cfg.dimensions))
        # placeholder until a finite fitness shows up
        self._Xb = self.X[0].copy()
        for i in range(self.cfg.population_size):
            self._evaluate(i)
        self._history.append(self._fb)
        return self.X

    def evolve(self) -> None:
        raise NotImplementedError

    def step(self) -> None:
        if self.X is None:
            raise NotInitializedError(f"{self.name}: call initialize() before step()")
        if self.is_done():
            raise OptimizationFinished(f"{self.name}: all {self.cfg.max_iterations} iterations already done")
        self.evolve()
        self._t += 1
        self._history.append(self._fb)
        if self.cfg.enable_logging:
            logger.info("Iteration: %d", self._t)
            logger.info("Global-Best-Solution: %s", np.array2string(self._Xb))
            logger.info("Fitness: %s", self._fb)

    def is_done(self) -> bool:
        return self._t >= self.cfg.max_iterations

    def _clip(self, x: np.ndarray) -> np.ndarray:
        return np.clip(x, self.lb, self.ub)

    def _evaluate(self, i: int) -> float:
        """Score individual ``i`` and record it as the best on strict improvement."""
        f = float(self.fitness_fn(self.X[i]))
        if not math.isfinite(f):
            logger.debug("non-finite fitness %r for individual %d at iteration %d", f, i, self._t)
            return f
        if f < self._fb:
            self._fb = f
            self._Xb[:] = self.X[i]
        return f

    def _require_init(self) -> None:
        if self._Xb is None:
            raise NotInitializedError(f"{self.name}: call initialize() first")

    @property
    def best_solution(self) -> np.ndarray:
        self._require_init()
        return self._Xb.copy()

    @property
    def best_fitness(self) -> float:
        return self._fb

    @property
    def current_iteration(self) -> int:
        return self._t

    @property
    def history(self) -> List[float]:
        return list(self._history)

    def run(self) -> Dict[str, Any]:
        self.initialize()
        while not self.is_done():
            self.step()
        return {"X_best": self.best_solution, "f_best": self._fb, "history": self.history}
