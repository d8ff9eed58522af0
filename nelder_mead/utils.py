# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

import math
import numbers

import numpy as np

inf = math.inf
nan = math.nan
isnan = math.isnan
norm = np.linalg.norm

def as_value(y):
    # NaN ranks as the worst possible value
    y = float(y)
    return (inf if isnan(y) else y)

def as_count(x, name):
    # bools are Integral too
    if isinstance(x, bool) or not isinstance(x, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(x).__name__}")
    x = int(x)
    if x <= 0: raise ValueError(f"{name} must be positive, got {x}")
    return x

def as_vector(x, size, name):
    x = np.array(x, dtype=float)
    if x.shape != (size,):
        raise ValueError(f"{name} must have shape ({size},), got {x.shape}")
    return x

def as_indices(mask, size):
    # accepts either a boolean mask of length size or a sequence of axis indices
    mask = np.asarray(mask)
    if mask.ndim != 1:
        raise ValueError(f"mask must be a flat sequence, got shape {mask.shape}")

    if mask.dtype == bool:
        if len(mask) != size:
            raise ValueError(f"boolean mask must have length {size}, got {len(mask)}")
        mask = np.flatnonzero(mask)
        if len(mask) == 0: raise ValueError("boolean mask selects no axes")
        return mask

    if mask.dtype.kind == "f":
        if not np.all(mask == np.trunc(mask)):
            raise TypeError("mask indices must be integers")
    elif mask.dtype.kind not in "iu":
        raise TypeError(f"mask must contain integers or booleans, got {mask.dtype}")
    mask = mask.astype(int)

    if np.any((mask < -size) | (mask >= size)):
        raise ValueError(f"mask indices must be in range for dimension {size}")
    mask = np.where(mask < 0, mask + size, mask)
    if len(np.unique(mask)) != len(mask):
        raise ValueError("mask indices must be unique")
    return mask

def make_rng(rng):
    if isinstance(rng, np.random.Generator): return rng
    return np.random.default_rng(rng)
