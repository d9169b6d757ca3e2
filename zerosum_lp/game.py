"""
Two-person zero-sum game
========================

Solves a zero-sum game given by an m x n payoff matrix M, where M[i, j] is
what the column player pays the row player, through the LP reduction:

    payoff -> shifted standard-form LP -> primal/dual -> strategies -> certificate

Everything is computed once in the constructor; the object is a read-only
view over the solution.
"""

import logging
from typing import Callable, List, Optional, Tuple

import numpy as np

from .certify import Certificate, certify
from .config import GameConfig
from .errors import CertificationError
from .extract import extract_strategies
from .lp_engine import LinearProgram, make_engine
from .plotting import Renderer, StrategySegment, strategy_segments
from .transform import as_payoff_matrix, to_standard_form

logger = logging.getLogger(__name__)

EngineFactory = Callable[[np.ndarray, np.ndarray, np.ndarray], LinearProgram]


class ZeroSumGame:
    """
    Optimal mixed strategies and value of a two-person zero-sum game.

    value()   game value
    row()     optimal strategy x, length n, from the LP primal
    column()  optimal strategy y, length m, from the LP dual

    `engine` overrides the configured LP backend; it is called as
    engine(A, b, c) and must return an object with primal() and dual().
    `renderer`, when given, receives the strategy segments after solving.
    """

    def __init__(self, payoff, config: Optional[GameConfig] = None,
                 engine: Optional[EngineFactory] = None,
                 renderer: Optional[Renderer] = None):
        self.config = config if config is not None else GameConfig.from_env()

        self._payoff = as_payoff_matrix(payoff)
        lp = to_standard_form(self._payoff)
        self._shift = lp.shift
        m, n = lp.A.shape

        factory = engine if engine is not None else make_engine(self.config.backend)
        solver = factory(lp.A, lp.b, lp.c)
        x = np.asarray(solver.primal(), dtype=np.float64)
        y = np.asarray(solver.dual(), dtype=np.float64)
        if x.shape != (n,) or y.shape != (m,):
            raise ValueError(f"LP engine returned primal {x.shape} / dual {y.shape}, "
                             f"expected ({n},) / ({m},)")

        solution = extract_strategies(x, y, lp.shift)
        self._row = solution.row
        self._column = solution.column
        self._value = solution.value
        self._scale = solution.scale

        self.certificate: Optional[Certificate] = None
        if self.config.certify:
            self.certificate = self.certify()
            if not self.certificate.ok:
                logger.warning("equilibrium certification failed for %dx%d game:\n%s",
                               m, n, self.certificate.summary())
                if self.config.strict:
                    raise CertificationError(self.certificate)
        else:
            logger.debug("equilibrium certification skipped by configuration")

        if renderer is not None:
            self.render(renderer)

    # -- read accessors ---------------------------------------------------

    def value(self) -> float:
        return self._value

    def row(self) -> np.ndarray:
        return self._row.copy()

    def column(self) -> np.ndarray:
        return self._column.copy()

    def row_strategy(self) -> np.ndarray:
        return self.row()

    def column_strategy(self) -> np.ndarray:
        return self.column()

    @property
    def payoff(self) -> np.ndarray:
        return self._payoff.copy()

    @property
    def shape(self) -> Tuple[int, int]:
        return self._payoff.shape

    @property
    def shift(self) -> float:
        return self._shift

    @property
    def scale(self) -> float:
        return self._scale

    # -- verification and visualization -----------------------------------

    def certify(self, tol: Optional[float] = None) -> Certificate:
        """Re-check the solution against the original payoff matrix."""
        tol = self.config.tolerance if tol is None else tol
        return certify(self._payoff, self._row, self._column, self._value, tol)

    def segments(self) -> List[StrategySegment]:
        return strategy_segments(self._payoff)

    def render(self, renderer: Renderer) -> None:
        segments = self.segments()
        if not segments:
            logger.debug("no strategy plot for a game with %d rows", self.shape[0])
            return
        renderer.draw(segments)

    def __repr__(self):
        m, n = self.shape
        return f"ZeroSumGame({m}x{n}, value={self._value:.6g})"
