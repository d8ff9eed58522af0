# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

from typing import NamedTuple

import numpy as np

from .utils import *

INSIDE = "inside"
OUTSIDE = "outside"

DEFAULT_SCALE = 0.1

class Coefficients(NamedTuple):
    alpha: float = 1.0 # reflection
    gamma: float = 2.0 # expansion
    rho: float = 0.5 # contraction
    sigma: float = 0.5 # shrink

    @classmethod
    def adaptive(cls, n):
        # Gao & Han (DOI: 10.1007/s10589-010-9329-3): in low dimensions
        # these are exactly the standard coefficients
        n = max(as_count(n, "n"), 2)
        return cls(1.0, 1.0 + 2.0/n, 0.75 - 0.5/n, 1.0 - 1.0/n)

    def validate(self):
        alpha, gamma, rho, sigma = self
        if not (alpha > 0):
            raise ValueError(f"reflection coefficient must be > 0, got {alpha}")
        if not ((gamma > 1) and (gamma > alpha)):
            raise ValueError(f"expansion coefficient must be > max(1, alpha), got {gamma}")
        if not (0 < rho < 1):
            raise ValueError(f"contraction coefficient must be in (0, 1), got {rho}")
        if not (0 < sigma < 1):
            raise ValueError(f"shrink coefficient must be in (0, 1), got {sigma}")
        return self

class Simplex:
    """
    d+1 vertices in d-dimensional space, with a cached objective value per vertex.

    The simplex never evaluates the objective itself: vertices with an unknown
    value are reported by stale(), and whoever owns the simplex fills them in
    with set_value() before calling order().

    order() sorts the vertices best-first and computes the centroid x0 of
    all vertices except the worst; reflection(), expansion() and contraction()
    are only valid until the next replace_worst() or shrink().
    """

    def __init__(self, points, values=None, coefficients=None):
        points = np.array(points, dtype=float)
        if (points.ndim != 2) or (points.shape[1] < 1) or (points.shape[0] != points.shape[1] + 1):
            raise ValueError(f"simplex points must have shape (d+1, d) with d >= 1, got {points.shape}")

        if values is None:
            values = np.full(len(points), nan)
        else:
            values = np.array(values, dtype=float)
            if values.shape != (len(points),):
                raise ValueError(f"simplex values must have shape ({len(points)},), got {values.shape}")

        if coefficients is None: coefficients = Coefficients()
        coefficients = Coefficients(*coefficients).validate()

        self.points = points
        self.values = values
        self.coefficients = coefficients
        self.alpha, self.gamma, self.rho, self.sigma = coefficients
        self.x0 = None

    @classmethod
    def seed(cls, d, center=None, scale=DEFAULT_SCALE, rng=None, coefficients=None):
        d = as_count(d, "d")
        center = (np.zeros(d) if center is None else as_vector(center, d, "center"))
        if not (scale > 0): raise ValueError(f"scale must be > 0, got {scale}")
        offsets = make_rng(rng).uniform(-1.0, 1.0, size=(d+1, d))
        return cls(center + scale * offsets, coefficients=coefficients)

    @property
    def d(self):
        return self.points.shape[1]

    @property
    def best(self):
        return self.points[0]

    @property
    def worst(self):
        return self.points[-1]

    def stale(self):
        return np.flatnonzero(np.isnan(self.values))

    def order(self):
        if np.any(np.isnan(self.values)):
            raise RuntimeError("cannot order a simplex with unevaluated vertices")

        indices = np.argsort(self.values, kind="stable")
        self.points = self.points[indices]
        self.values = self.values[indices]
        self.x0 = np.mean(self.points[:-1], axis=0)

    def _centroid(self):
        if self.x0 is None:
            raise RuntimeError("simplex must be ordered before computing trial points")
        return self.x0

    def reflection(self):
        x0 = self._centroid()
        return x0 + self.alpha * (x0 - self.points[-1])

    def expansion(self, xr):
        x0 = self._centroid()
        return x0 + self.gamma * (xr - x0)

    def contraction(self, xr, mode=INSIDE):
        x0 = self._centroid()
        if mode == INSIDE: return x0 + self.rho * (xr - x0)
        if mode == OUTSIDE: return x0 + self.rho * (self.points[-1] - x0)
        raise ValueError(f"unknown contraction mode {mode!r}")

    def set_value(self, i, fx):
        self.values[i] = fx
        self.x0 = None

    def replace_worst(self, x, fx):
        self.points[-1] = x
        self.values[-1] = fx
        self.x0 = None

    def shrink(self):
        best = self.points[0]
        self.points[1:] = best + self.sigma * (self.points[1:] - best)
        self.values[1:] = nan
        self.x0 = None

    def spread(self):
        return float(norm(self.points[-1] - self.points[0]))
