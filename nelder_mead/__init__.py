# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

from .simplex import Simplex, Coefficients, INSIDE, OUTSIDE
from .optimization import nelder_mead, minimize, SearchReport

__all__ = [
    "Simplex",
    "Coefficients",
    "INSIDE",
    "OUTSIDE",
    "nelder_mead",
    "minimize",
    "SearchReport",
]
