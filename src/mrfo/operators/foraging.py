"""
Movement rules of the manta ray foraging model.

Each rule maps one individual ``x`` to its new position, coordinate-wise,
without touching the population. ``anchor`` is what the individual is pulled
towards by the ``r`` term: the reference point for the head of the chain
(index 0), the already-moved predecessor for everyone else.
"""
import numpy as np


def _unit_open_low(rng: np.random.Generator, D: int) -> np.ndarray:
    # (0, 1]: keeps log(r) finite
    return 1.0 - rng.random(D)


def chain_foraging(x: np.ndarray, anchor: np.ndarray, best: np.ndarray,
                   rng: np.random.Generator) -> np.ndarray:
    r = _unit_open_low(rng, x.size)
    alpha = 2*r*np.sqrt(np.abs(np.log(r)))
    return x + r*(anchor - x) + alpha*(best - x)


def cyclone_foraging(x: np.ndarray, anchor: np.ndarray, ref: np.ndarray, beta: float,
                     rng: np.random.Generator) -> np.ndarray:
    r = rng.random(x.size)
    return x + r*(anchor - x) + beta*(ref - x)


def somersault_foraging(x: np.ndarray, best: np.ndarray, factor: float,
                        rng: np.random.Generator) -> np.ndarray:
    u1 = rng.random(x.size)
    u2 = rng.random(x.size)
    return x + factor*(u1*best - u2*x)


def random_point(D: int, lb: float, ub: float, rng: np.random.Generator) -> np.ndarray:
    return lb + (ub - lb) * rng.random(D)
