import math

def somersault_factor(t: int, T_iter: int) -> float:
    return 2.0 * (1.0 - t / T_iter)

def cyclone_beta(r1: float, t: int, T_iter: int) -> float:
    return 2.0 * math.exp(r1 * (T_iter - t + 1) / T_iter) * math.sin(2*math.pi*r1)
