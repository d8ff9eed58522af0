# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

import logging
from typing import NamedTuple

import numpy as np

from .utils import *
from .simplex import Simplex, Coefficients, INSIDE, OUTSIDE, DEFAULT_SCALE

logger = logging.getLogger(__name__)

DEFAULT_MAXITER = 1000000
DEFAULT_TOL = 1e-8

REFLECTED = "reflected"
EXPANDED = "expanded"
CONTRACTED_INSIDE = "contracted inside"
CONTRACTED_OUTSIDE = "contracted outside"
SHRUNK = "shrunk"

class SearchReport(NamedTuple):
    x: np.ndarray
    fun: float
    converged: bool
    iterations: int
    nfev: int

def nelder_mead(f, d, x0=None, scale=DEFAULT_SCALE, mask=None, maxiter=DEFAULT_MAXITER,
                tol=DEFAULT_TOL, coefficients=None, adaptive=False, rng=None):
    """
    f: function f(x) to minimize, x being a float array of length d
    d: dimension of the search space
    x0: center of the initial simplex (the origin by default)
    scale: size of the random offsets of the initial vertices around x0
    mask: an optional index array specifying which axes to optimize
    maxiter: max iteration count
    tol: the search stops once the first and last vertex are closer than this
    coefficients: (reflection, expansion, contraction, shrink)
    adaptive: whether to adjust coefficients for high-dimensional cases
    rng: seed or numpy Generator for the initial simplex

    Returns a SearchReport. Not converging within maxiter is not an error:
    the best point found so far is reported with converged=False.

    NaN objective values are ranked as +inf, so f(x) can return NaN
    (or infinity) in forbidden regions.
    """

    if not callable(f):
        raise TypeError(f"objective must be callable, got {type(f).__name__}")
    d = as_count(d, "d")
    maxiter = as_count(maxiter, "maxiter")
    if not (tol >= 0): raise ValueError(f"tol must be >= 0, got {tol}")

    x_full = (np.zeros(d) if x0 is None else as_vector(x0, d, "x0"))

    if (mask is not None) and (len(mask) > 0):
        mask = as_indices(mask, d)
    else:
        mask = None

    n = (d if mask is None else len(mask))

    if adaptive:
        if coefficients is not None:
            raise ValueError("adaptive and explicit coefficients are mutually exclusive")
        coefficients = Coefficients.adaptive(n)

    nfev = 0

    def objective(x):
        nonlocal nfev
        nfev += 1
        if mask is None: return as_value(f(x.copy()))
        x_masked = x_full.copy()
        x_masked[mask] = x
        return as_value(f(x_masked))

    center = (x_full if mask is None else x_full[mask])
    simplex = Simplex.seed(n, center, scale, rng, coefficients)

    logger.debug("Nelder-Mead: d=%d, optimized axes=%d, coefficients=%s", d, n, simplex.coefficients)

    def evaluate_stale():
        for i in simplex.stale():
            simplex.set_value(i, objective(simplex.points[i]))

    converged = False
    iteration = 0

    while iteration < maxiter:
        iteration += 1

        evaluate_stale()
        step(simplex, objective)

        if simplex.spread() < tol:
            converged = True
            break

    if converged:
        logger.info("Terminal condition met at iteration %d: l2 norm < %g", iteration, tol)
    else:
        logger.warning("Nelder-Mead failed to converge in %d iterations", maxiter)

    evaluate_stale()
    simplex.order()

    x_best = simplex.best.copy()
    f_best = float(simplex.values[0])

    if mask is not None:
        x_masked = x_best
        x_best = x_full.copy()
        x_best[mask] = x_masked

    return SearchReport(x_best, f_best, converged, iteration, nfev)

def minimize(f, d, **kwargs):
    """Same as nelder_mead(f, d, **kwargs), but returns only the best point (report.x)"""
    return nelder_mead(f, d, **kwargs).x

def step(simplex, objective):
    """
    One Nelder-Mead iteration on an evaluated simplex.

    Orders the simplex, then replaces its worst vertex or shrinks it.
    Returns the move that was applied (REFLECTED, EXPANDED, CONTRACTED_INSIDE,
    CONTRACTED_OUTSIDE or SHRUNK). After a shrink, the moved vertices are
    left stale for the caller to evaluate.
    """

    simplex.order()

    f_best = simplex.values[0]
    f_n = simplex.values[-2]
    f_last = simplex.values[-1]

    x_r = simplex.reflection()
    f_r = objective(x_r)

    if f_best <= f_r < f_n:
        simplex.replace_worst(x_r, f_r)
        return REFLECTED

    if f_r < f_best:
        x_e = simplex.expansion(x_r)
        f_e = objective(x_e)
        if f_e < f_r:
            simplex.replace_worst(x_e, f_e)
            return EXPANDED
        simplex.replace_worst(x_r, f_r)
        return REFLECTED

    if f_r < f_last:
        x_c = simplex.contraction(x_r, INSIDE)
        f_c = objective(x_c)
        if f_c < f_r:
            simplex.replace_worst(x_c, f_c)
            return CONTRACTED_INSIDE
    else:
        x_c = simplex.contraction(x_r, OUTSIDE)
        f_c = objective(x_c)
        if f_c < f_last:
            simplex.replace_worst(x_c, f_c)
            return CONTRACTED_OUTSIDE

    simplex.shrink()
    return SHRUNK
