"""
Strategies from LP solution vectors
===================================

x* solves  max 1^T x  s.t. A x <= 1,  y* solves its dual. With
s = sum(x*) = sum(y*):

    row strategy     x* / s     (length n)
    column strategy  y* / s     (length m)
    value            1/s - shift
"""

import logging
from dataclasses import dataclass

import numpy as np

from .errors import DegenerateSolutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    row: np.ndarray
    column: np.ndarray
    value: float
    scale: float
    shift: float


def extract_strategies(x, y, shift: float) -> Solution:
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    scale = float(np.sum(x))
    if not np.isfinite(scale) or scale == 0.0:
        raise DegenerateSolutionError(f"cannot normalize strategies, sum(x) = {scale}")

    row = x / scale
    column = y / scale
    value = 1.0 / scale - shift
    logger.debug("scale=%.12g shift=%g value=%.12g", scale, shift, value)
    return Solution(row=row, column=column, value=value, scale=scale, shift=shift)
