import numpy as np
import pytest

from zerosum_lp.game import ZeroSumGame
from zerosum_lp.plotting import MatplotlibRenderer, StrategySegment, strategy_segments


def test_two_row_segments():
    segments = strategy_segments([[-1, 1, 3], [1, -1, -2]])
    assert [s.name for s in segments] == ["Strategy 0", "Strategy 1", "Strategy 2"]
    assert all(s.dim == 2 for s in segments)
    x, y = segments[2].coords
    np.testing.assert_array_equal(x, [0.0, 3.0])
    np.testing.assert_array_equal(y, [1.0, -2.0])


def test_three_row_segments():
    segments = strategy_segments([[1, 2], [3, 4], [5, 6]])
    assert len(segments) == 2
    x, y, z = segments[1].coords
    np.testing.assert_array_equal(x, [0.0, 2.0])
    np.testing.assert_array_equal(y, [1.0, 4.0])
    np.testing.assert_array_equal(z, [1.0, 6.0])


@pytest.mark.parametrize("shape", [(1, 3), (4, 2), (5, 5)])
def test_no_segments_outside_two_or_three_rows(shape):
    assert strategy_segments(np.ones(shape)) == []


@pytest.mark.parametrize("payoff", [
    [[1, -1], [-1, 1]],
    [[0, -1, 1], [1, 0, -1], [-1, 1, 0]],
])
def test_matplotlib_renderer_saves_figure(tmp_path, payoff):
    path = tmp_path / "plots" / "strategies.png"
    ZeroSumGame(payoff, renderer=MatplotlibRenderer(save_path=str(path)))
    assert path.exists()
    assert path.stat().st_size > 0


def test_renderer_without_path_draws_headless():
    MatplotlibRenderer().draw(strategy_segments([[1, 2], [3, 4]]))


def test_mixed_dimensions_are_rejected():
    segments = [
        StrategySegment("a", (np.zeros(2), np.ones(2))),
        StrategySegment("b", (np.zeros(2), np.ones(2), np.ones(2))),
    ]
    with pytest.raises(ValueError):
        MatplotlibRenderer().draw(segments)


def test_pyplot_is_loaded_with_the_module():
    import matplotlib.pyplot
    from zerosum_lp import plotting

    assert plotting.plt is matplotlib.pyplot
