"""
LP engine adapters
==================

Both adapters solve

    maximize   c^T x   s.t.   A x <= b,  x >= 0

and expose an optimal primal x (length n) and an optimal dual y (length m)
of the dual program  minimize b^T y  s.t.  A^T y >= c,  y >= 0.

HighsLinearProgram  scipy.optimize.linprog, HiGHS dual simplex. The dual is
                    read from the inequality marginals.
PulpLinearProgram   PuLP + CBC. Primal and dual are solved as two separate
                    programs, which keeps it independent of CBC's sign
                    conventions for shadow prices.

Both solve with A / max|A| for conditioning and map the vectors back
(x = x'/s, y = y'/s). The vertex the solver returns is only accurate to its
feasibility tolerance, so it is polished: the equations that complementary
slackness makes tight are re-solved with numpy and the polished pair is kept
when it violates the LP less.
"""

import logging
from typing import Protocol

import numpy as np
import pulp
from scipy.optimize import linprog

from .errors import InfeasibleError, LinearProgramError, UnboundedError

logger = logging.getLogger(__name__)

# relative threshold for "x_j > 0" and "row i is tight" when polishing
SUPPORT_TOL = 1e-6

HIGHS_OPTIONS = {
    "primal_feasibility_tolerance": 1e-9,
    "dual_feasibility_tolerance": 1e-9,
}


class LinearProgram(Protocol):
    def primal(self) -> np.ndarray: ...

    def dual(self) -> np.ndarray: ...


def _as_problem(A, b, c):
    A = np.asarray(A, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    c = np.asarray(c, dtype=np.float64)
    if A.ndim != 2 or A.shape != (b.size, c.size):
        raise ValueError(f"inconsistent LP dimensions: A{A.shape}, b({b.size}), c({c.size})")
    return A, b, c


def _conditioning_scale(A: np.ndarray) -> float:
    s = float(np.max(np.abs(A))) if A.size else 0.0
    return s if s > 0 and np.isfinite(s) else 1.0


def violation(A, b, c, x, y) -> float:
    """Largest primal/dual infeasibility or duality gap of the pair (x, y)."""
    return max(
        0.0,
        float(np.max(-x, initial=0.0)),
        float(np.max(-y, initial=0.0)),
        float(np.max(A @ x - b, initial=0.0)),
        float(np.max(c - A.T @ y, initial=0.0)),
        abs(float(c @ x - b @ y)),
    )


def polish_vertex(A, b, c, x, y):
    """
    Re-solve an approximate optimal pair on its active set:
        A[tight, supp(x)] x = b[tight]         rows with A x ~ b
        A[supp(y), tight]^T y = c[tight]       columns with A^T y ~ c
    Returns the polished (x, y) if it is no worse than the input, else the
    input pair. Negative round-off is clipped to zero either way.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    cols = np.flatnonzero(x > SUPPORT_TOL * max(float(np.max(x, initial=0.0)), 1e-300))
    rows = np.flatnonzero(y > SUPPORT_TOL * max(float(np.max(y, initial=0.0)), 1e-300))
    tight_rows = np.flatnonzero(A @ x >= b - SUPPORT_TOL * np.maximum(np.abs(b), 1.0))
    tight_cols = np.flatnonzero(A.T @ y <= c + SUPPORT_TOL * np.maximum(np.abs(c), 1.0))

    best = (np.clip(x, 0, None), np.clip(y, 0, None))
    if min(cols.size, rows.size, tight_rows.size, tight_cols.size) == 0:
        return best

    px = np.zeros_like(x)
    px[cols] = np.linalg.lstsq(A[np.ix_(tight_rows, cols)], b[tight_rows], rcond=None)[0]
    py = np.zeros_like(y)
    py[rows] = np.linalg.lstsq(A[np.ix_(rows, tight_cols)].T, c[tight_cols], rcond=None)[0]
    polished = (np.clip(px, 0, None), np.clip(py, 0, None))

    before = violation(A, b, c, *best)
    after = violation(A, b, c, *polished)
    if np.all(px >= -SUPPORT_TOL) and np.all(py >= -SUPPORT_TOL) and after <= before:
        logger.debug("polished vertex: violation %.3g -> %.3g", before, after)
        return polished
    logger.debug("kept solver vertex: violation %.3g, polished %.3g", before, after)
    return best


class HighsLinearProgram:
    """LP solved once at construction with scipy's HiGHS dual simplex."""

    def __init__(self, A, b, c):
        A, b, c = _as_problem(A, b, c)
        m, n = A.shape
        s = _conditioning_scale(A)
        As = A / s

        # linprog minimizes, so maximize c^T x as minimize -c^T x
        res = linprog(-c, A_ub=As, b_ub=b, bounds=[(0, None)] * n,
                      method="highs-ds", options=HIGHS_OPTIONS)

        if res.status == 2:
            raise InfeasibleError(f"LP is infeasible: {res.message}")
        if res.status == 3:
            raise UnboundedError(f"LP is unbounded: {res.message}")
        if res.status != 0:
            raise LinearProgramError(f"LP failed: {res.message}")

        xs = np.asarray(res.x, dtype=np.float64)
        # marginals are d(-c^T x)/d(b) <= 0; the dual of the max problem is their negation
        ys = -np.asarray(res.ineqlin.marginals, dtype=np.float64)
        xs, ys = polish_vertex(As, b, c, xs, ys)

        self._x = xs / s
        self._y = ys / s
        self._objective = float(c @ self._x)
        logger.debug("highs: %dx%d LP solved in %d iterations, objective=%.12g",
                     m, n, res.nit, self._objective)

    def primal(self) -> np.ndarray:
        return self._x.copy()

    def dual(self) -> np.ndarray:
        return self._y.copy()

    def objective(self) -> float:
        return self._objective


class PulpLinearProgram:
    """LP solved with PuLP's bundled CBC; the dual program is solved explicitly."""

    def __init__(self, A, b, c, solver=None):
        A, b, c = _as_problem(A, b, c)
        m, n = A.shape
        s = _conditioning_scale(A)
        As = A / s
        self._solver = solver if solver is not None else pulp.PULP_CBC_CMD(msg=0)

        primal = pulp.LpProblem("primal", pulp.LpMaximize)
        x = [pulp.LpVariable(f"x{j}", lowBound=0) for j in range(n)]
        primal += pulp.lpSum(float(c[j]) * x[j] for j in range(n))
        for i in range(m):
            primal += pulp.lpSum(float(As[i, j]) * x[j] for j in range(n)) <= float(b[i]), f"row{i}"
        self._solve(primal)

        # minimize b^T y  s.t.  A^T y >= c,  y >= 0
        dual = pulp.LpProblem("dual", pulp.LpMinimize)
        y = [pulp.LpVariable(f"y{i}", lowBound=0) for i in range(m)]
        dual += pulp.lpSum(float(b[i]) * y[i] for i in range(m))
        for j in range(n):
            dual += pulp.lpSum(float(As[i, j]) * y[i] for i in range(m)) >= float(c[j]), f"col{j}"
        self._solve(dual)

        xs = np.array([pulp.value(v) or 0.0 for v in x], dtype=np.float64)
        ys = np.array([pulp.value(v) or 0.0 for v in y], dtype=np.float64)
        # CBC reports rounded values
        xs, ys = polish_vertex(As, b, c, xs, ys)

        self._x = xs / s
        self._y = ys / s
        self._objective = float(c @ self._x)
        logger.debug("pulp: %dx%d LP solved, objective=%.12g", m, n, self._objective)

    def _solve(self, problem):
        status = problem.solve(self._solver)
        if status == pulp.LpStatusOptimal:
            return
        name = pulp.LpStatus.get(status, str(status))
        if status == pulp.LpStatusInfeasible:
            raise InfeasibleError(f"{problem.name} LP is infeasible")
        if status == pulp.LpStatusUnbounded:
            raise UnboundedError(f"{problem.name} LP is unbounded")
        raise LinearProgramError(f"{problem.name} LP failed: {name}")

    def primal(self) -> np.ndarray:
        return self._x.copy()

    def dual(self) -> np.ndarray:
        return self._y.copy()

    def objective(self) -> float:
        return self._objective


ENGINES = {
    "highs": HighsLinearProgram,
    "pulp": PulpLinearProgram,
}


def make_engine(backend: str):
    """Return the LP adapter class registered under `backend`."""
    try:
        return ENGINES[backend]
    except KeyError:
        raise ValueError(f"unknown LP backend {backend!r}, expected one of {sorted(ENGINES)}") from None
