"""
Equilibrium certification
=========================

Independent check that (row, column, value) is a saddle point of the
original payoff matrix M (m x n):

    1. row is a probability vector (length n)
    2. column is a probability vector (length m)
    3. max_i (M row)_i       == value      best pure response to `row`
    4. min_j (M^T column)_j  == value      best pure response to `column`

By the minimax theorem every finite zero-sum game has a saddle point, so a
failed check always means a defect upstream (transform, extraction or the
LP engine), never a property of the game.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from .config import DEFAULT_TOLERANCE


@dataclass(frozen=True)
class CheckResult:
    name: str
    passed: bool
    observed: float
    expected: float
    detail: str = ""

    def describe(self) -> str:
        status = "ok" if self.passed else "FAILED"
        text = f"{self.name}: {status} (observed={self.observed:.12g}, expected={self.expected:.12g})"
        if self.detail:
            text += f" - {self.detail}"
        return text


@dataclass(frozen=True)
class Certificate:
    checks: List[CheckResult]

    @property
    def ok(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def failures(self) -> List[CheckResult]:
        return [check for check in self.checks if not check.passed]

    def __bool__(self):
        return self.ok

    def summary(self) -> str:
        if self.ok:
            return "all equilibrium checks passed"
        return "\n".join(check.describe() for check in self.failures)


def _length_mismatch(name, label, p, size):
    return CheckResult(name, False, float(p.size), float(size),
                       f"{label} has length {p.size}, expected {size}")


def _check_distribution(name, label, p, tol, size=None):
    p = np.asarray(p, dtype=np.float64)
    if size is not None and p.shape != (size,):
        return _length_mismatch(name, label, p, size)
    total = float(np.sum(p))
    if p.size:
        k = int(np.argmin(p))
        if p[k] < -tol:
            return CheckResult(name, False, float(p[k]), 0.0,
                               f"{label}[{k}] is negative, not a probability distribution")
    if not np.isfinite(total) or abs(total - 1.0) > tol:
        return CheckResult(name, False, total, 1.0,
                           f"{label} does not sum to 1, not a probability distribution")
    return CheckResult(name, True, total, 1.0)


def check_primal_feasibility(row, tol: float = DEFAULT_TOLERANCE, size=None) -> CheckResult:
    return _check_distribution("primal feasibility", "row", row, tol, size)


def check_dual_feasibility(column, tol: float = DEFAULT_TOLERANCE, size=None) -> CheckResult:
    return _check_distribution("dual feasibility", "column", column, tol, size)


def check_row_optimality(payoff, row, value: float, tol: float = DEFAULT_TOLERANCE) -> CheckResult:
    """Column player's best pure response to `row`: max_i sum_j M[i, j] row[j]."""
    M = np.asarray(payoff, dtype=np.float64)
    row = np.asarray(row, dtype=np.float64)
    if row.shape != (M.shape[1],):
        return _length_mismatch("row optimality", "row", row, M.shape[1])
    responses = M @ row
    i = int(np.argmax(responses))
    best = float(responses[i])
    passed = abs(best - value) <= tol
    detail = "" if passed else f"best response row {i} differs from the game value"
    return CheckResult("row optimality", passed, best, float(value), detail)


def check_column_optimality(payoff, column, value: float, tol: float = DEFAULT_TOLERANCE) -> CheckResult:
    """Row player's best pure response to `column`: min_j sum_i M[i, j] column[i]."""
    M = np.asarray(payoff, dtype=np.float64)
    column = np.asarray(column, dtype=np.float64)
    if column.shape != (M.shape[0],):
        return _length_mismatch("column optimality", "column", column, M.shape[0])
    responses = M.T @ column
    j = int(np.argmin(responses))
    best = float(responses[j])
    passed = abs(best - value) <= tol
    detail = "" if passed else f"best response column {j} differs from the game value"
    return CheckResult("column optimality", passed, best, float(value), detail)


def certify(payoff, row, column, value: float, tol: float = DEFAULT_TOLERANCE) -> Certificate:
    """Run all four checks; failures are collected, not short-circuited."""
    m, n = np.shape(payoff)
    return Certificate(checks=[
        check_primal_feasibility(row, tol, size=n),
        check_dual_feasibility(column, tol, size=m),
        check_row_optimality(payoff, row, value, tol),
        check_column_optimality(payoff, column, value, tol),
    ])
