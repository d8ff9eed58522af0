import logging

import numpy as np

from nelder_mead import nelder_mead

def shifted_bowl(center):
    center = np.asarray(center, dtype=float)
    def f(x):
        delta = x - center
        return float(np.dot(delta, delta))
    return f

def rosenbrock(x):
    return float(np.sum(100.0*(x[1:] - x[:-1]**2)**2 + (1.0 - x[:-1])**2))

def himmelblau(x):
    x, y = x
    return (x*x + y - 11)**2 + (x + y*y - 7)**2

problems = [
    ("bowl (d=1)", shifted_bowl([3.0]), 1, {}),
    ("bowl (d=2)", shifted_bowl([1.0, -2.0]), 2, {}),
    ("rosenbrock (d=4)", rosenbrock, 4, dict(adaptive=True)),
    ("himmelblau", himmelblau, 2, dict(x0=(-3.0, 3.0), scale=0.5)),
    ("rosenbrock, x[2] fixed", rosenbrock, 3, dict(x0=(0, 0, 1), mask=[0, 1])),
]

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

for name, f, d, options in problems:
    report = nelder_mead(f, d, rng=0, **options)
    print(f"{name}: x={np.round(report.x, 6)} f={report.fun:.3g} "
          f"converged={report.converged} iterations={report.iterations} nfev={report.nfev}")
