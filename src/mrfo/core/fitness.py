from __future__ import annotations
import math
from typing import Callable, Dict, Protocol
import numpy as np

class ObjectiveFunction(Protocol):
    """Maps a point to a scalar fitness; lower is better. Must be pure."""
    def __call__(self, x: np.ndarray) -> float: ...

def ackley_factory(a: float = 20.0, b: float = 0.2, c: float = 2*math.pi) -> ObjectiveFunction:
    def f(x: np.ndarray) -> float:
        x = np.asarray(x, dtype=float)
        d = x.size
        term1 = -a * np.exp(-b * np.sqrt((x**2).sum() / d))
        term2 = -np.exp(np.cos(c*x).sum() / d)
        return float(term1 + term2 + a + math.e)
    return f

ackley = ackley_factory()

def sphere(x: np.ndarray) -> float:
    x = np.asarray(x, dtype=float)
    return float((x**2).sum())

def rastrigin(x: np.ndarray, A: float = 10.0) -> float:
    x = np.asarray(x, dtype=float)
    return float(A*x.size + (x**2 - A*np.cos(2*np.pi*x)).sum())

FUNCTIONS: Dict[str, Callable[[np.ndarray], float]] = {
    "ackley": ackley,
    "sphere": sphere,
    "rastrigin": rastrigin,
}

def get_function(name: str) -> Callable[[np.ndarray], float]:
    try:
        return FUNCTIONS[name.lower()]
    except KeyError:
        raise KeyError(f"unknown objective function {name!r}; choose from {sorted(FUNCTIONS)}") from None
