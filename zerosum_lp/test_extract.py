import numpy as np
import pytest

from zerosum_lp.errors import DegenerateSolutionError
from zerosum_lp.extract import extract_strategies


def test_matching_pennies_vectors():
    # shifted matching pennies [[3, 1], [1, 3]]: x* = y* = (1/4, 1/4)
    sol = extract_strategies([0.25, 0.25], [0.25, 0.25], shift=2.0)
    np.testing.assert_allclose(sol.row, [0.5, 0.5])
    np.testing.assert_allclose(sol.column, [0.5, 0.5])
    assert sol.scale == pytest.approx(0.5)
    assert sol.value == pytest.approx(0.0)


def test_value_uses_shift():
    sol = extract_strategies([0.2], [0.2], shift=0.0)
    assert sol.value == pytest.approx(5.0)
    sol = extract_strategies([0.2], [0.2], shift=3.0)
    assert sol.value == pytest.approx(2.0)


def test_rectangular_lengths_are_kept():
    sol = extract_strategies([0.1, 0.3, 0.0], [0.4, 0.0], shift=1.0)
    assert sol.row.shape == (3,)
    assert sol.column.shape == (2,)
    np.testing.assert_allclose(sol.row, [0.25, 0.75, 0.0])
    np.testing.assert_allclose(sol.column, [1.0, 0.0])
    assert sol.value == pytest.approx(1.0 / 0.4 - 1.0)


def test_inputs_are_not_modified():
    x = np.array([0.25, 0.25])
    y = np.array([0.5, 0.0])
    extract_strategies(x, y, shift=0.0)
    np.testing.assert_array_equal(x, [0.25, 0.25])
    np.testing.assert_array_equal(y, [0.5, 0.0])


@pytest.mark.parametrize("x", [
    [0.0, 0.0],
    [np.inf, 0.1],
    [np.nan, 0.1],
])
def test_degenerate_scale(x):
    with pytest.raises(DegenerateSolutionError):
        extract_strategies(x, [0.5, 0.5], shift=0.0)
