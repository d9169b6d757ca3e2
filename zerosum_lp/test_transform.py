import numpy as np
import pytest

from zerosum_lp.errors import MalformedMatrixError
from zerosum_lp.transform import as_payoff_matrix, shift_constant, to_standard_form


def test_shift_is_zero_for_strictly_positive_matrix():
    assert shift_constant(np.array([[0.5, 2.0], [3.0, 1.0]])) == 0.0


def test_shift_makes_minimum_equal_one():
    M = np.array([[-1.0, 1.0, 3.0, -3.0],
                  [1.0, -1.0, -2.0, 2.0]])
    shift = shift_constant(M)
    assert shift == 4.0
    assert (M + shift).min() == 1.0


def test_zero_entry_is_shifted():
    # minimum of exactly 0 is not strictly positive
    assert shift_constant(np.array([[0.0, 1.0]])) == 1.0


def test_standard_form_shapes_and_values():
    lp = to_standard_form([[1, -1], [-1, 1], [0, 2]])
    assert lp.shift == 2.0
    np.testing.assert_array_equal(lp.A, [[3, 1], [1, 3], [2, 4]])
    np.testing.assert_array_equal(lp.b, np.ones(3))
    np.testing.assert_array_equal(lp.c, np.ones(2))
    assert np.all(lp.A > 0)


def test_standard_form_does_not_touch_input():
    M = np.array([[-2.0, 1.0], [0.0, 3.0]])
    before = M.copy()
    to_standard_form(M)
    np.testing.assert_array_equal(M, before)


def test_payoff_matrix_is_read_only():
    M = as_payoff_matrix([[1, 2], [3, 4]])
    assert M.dtype == np.float64
    with pytest.raises(ValueError):
        M[0, 0] = 10.0


@pytest.mark.parametrize("payoff", [
    [[1, 2], [3]],
    [[1], [2, 3], [4]],
    [],
    [[]],
    [1, 2, 3],
    np.zeros((0, 3)),
    np.ones(4),
    np.ones((2, 2, 2)),
    [[1.0, float("nan")]],
    [[1.0, float("inf")], [0.0, 1.0]],
    [["a", "b"]],
])
def test_malformed_payoff_is_rejected(payoff):
    with pytest.raises(MalformedMatrixError):
        as_payoff_matrix(payoff)


def test_shift_overflow_is_rejected():
    with pytest.raises(MalformedMatrixError, match="out of range"):
        to_standard_form([[-1e308, 1e308], [1e308, -1e308]])


def test_largest_finite_payoff_without_shift_is_accepted():
    lp = to_standard_form([[1e308, 2.0]])
    assert lp.shift == 0.0
    assert np.all(np.isfinite(lp.A))
