"""
Payoff -> standard-form LP
==========================

Shift a payoff matrix so every entry is strictly positive, then build

    maximize   1^T x
    s.t.       A x <= 1,  x >= 0,      A = payoff + shift

With A > 0 the LP is feasible (x = 0) and bounded, and its optimum 1^T x*
inverts to the game value: v = 1 / sum(x*) - shift.
"""

import logging
from dataclasses import dataclass

import numpy as np

from .errors import MalformedMatrixError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StandardFormLP:
    A: np.ndarray       # m x n, strictly positive
    b: np.ndarray       # length m, all ones
    c: np.ndarray       # length n, all ones
    shift: float


def as_payoff_matrix(payoff) -> np.ndarray:
    """
    Validate `payoff` and return it as a read-only float64 m x n array.
    Raises MalformedMatrixError for empty, ragged, non-numeric or
    non-finite input.
    """
    if not isinstance(payoff, np.ndarray):
        try:
            rows = [list(row) for row in payoff]
        except TypeError:
            raise MalformedMatrixError("payoff must be a sequence of rows") from None
        if len(rows) == 0:
            raise MalformedMatrixError("payoff matrix has no rows")
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise MalformedMatrixError(
                f"payoff rows have inconsistent lengths: {sorted(widths)}")
        payoff = rows

    try:
        M = np.array(payoff, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise MalformedMatrixError(f"payoff entries must be real numbers: {exc}") from exc

    if M.ndim != 2:
        raise MalformedMatrixError(f"payoff must be two-dimensional, got shape {M.shape}")
    m, n = M.shape
    if m == 0 or n == 0:
        raise MalformedMatrixError(f"payoff matrix is empty, shape {M.shape}")
    if not np.all(np.isfinite(M)):
        raise MalformedMatrixError("payoff matrix has non-finite entries")

    M.setflags(write=False)
    return M


def shift_constant(payoff: np.ndarray) -> float:
    """0 if every entry is already > 0, else 1 - min(entry)."""
    lowest = float(np.min(payoff))
    if lowest > 0:
        return 0.0
    return 1.0 - lowest


def to_standard_form(payoff) -> StandardFormLP:
    M = as_payoff_matrix(payoff)
    m, n = M.shape
    shift = shift_constant(M)
    with np.errstate(over="ignore"):
        A = M + shift
    if not np.all(np.isfinite(A)):
        raise MalformedMatrixError(
            f"payoff out of range: shifting by {shift:g} overflows float64")
    logger.debug("standard form: %dx%d payoff, shift=%g", m, n, shift)
    return StandardFormLP(A=A, b=np.ones(m), c=np.ones(n), shift=shift)
