import numpy as np
from .base import Algorithm
from ..operators.foraging import chain_foraging, cyclone_foraging, somersault_foraging, random_point
from ..operators.schedules import cyclone_beta, somersault_factor


class MRFO(Algorithm):
    """Manta Ray Foraging Optimization.

    Every generation walks the population in index order. Individual ``i``
    first does chain or cyclone foraging (coin flip on ``r``), then a
    somersault around the best; each move is clipped to the box and scored.
    Individual ``i > 0`` follows the position individual ``i - 1`` already
    reached in the same generation, so the loop cannot be vectorized over
    individuals.
    """
    name = "MRFO"

    def evolve(self) -> None:
        X, rng = self.X, self.rng
        N, D = X.shape
        t, T = self._t, self.cfg.max_iterations
        S = somersault_factor(t, T)
        for i in range(N):
            r = rng.random()
            if r < 0.5:
                beta = cyclone_beta(rng.random(), t, T)
                # r doubles as the exploration threshold
                ref = random_point(D, self.lb, self.ub, rng) if t / T < r else self._Xb
                anchor = ref if i == 0 else X[i-1]
                X[i] = self._clip(cyclone_foraging(X[i], anchor, ref, beta, rng))
            else:
                anchor = self._Xb if i == 0 else X[i-1]
                X[i] = self._clip(chain_foraging(X[i], anchor, self._Xb, rng))
            self._evaluate(i)

            X[i] = self._clip(somersault_foraging(X[i], self._Xb, S, rng))
            self._evaluate(i)
