"""
zerosum_lp
==========

Value and optimal mixed strategies of two-person zero-sum games via linear
programming.

    game = ZeroSumGame([[1, -1], [-1, 1]])
    game.value(), game.row(), game.column()    # 0.0, [0.5, 0.5], [0.5, 0.5]
"""

import logging

from .certify import Certificate, CheckResult, certify
from .config import GameConfig
from .errors import (
    CertificationError,
    DegenerateSolutionError,
    InfeasibleError,
    LinearProgramError,
    MalformedMatrixError,
    UnboundedError,
    ZeroSumError,
)
from .extract import Solution, extract_strategies
from .game import ZeroSumGame
from .lp_engine import HighsLinearProgram, PulpLinearProgram, make_engine
from .plotting import MatplotlibRenderer, StrategySegment, strategy_segments
from .transform import StandardFormLP, as_payoff_matrix, shift_constant, to_standard_form

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Certificate",
    "CertificationError",
    "CheckResult",
    "DegenerateSolutionError",
    "GameConfig",
    "HighsLinearProgram",
    "InfeasibleError",
    "LinearProgramError",
    "MalformedMatrixError",
    "MatplotlibRenderer",
    "PulpLinearProgram",
    "Solution",
    "StandardFormLP",
    "StrategySegment",
    "UnboundedError",
    "ZeroSumError",
    "ZeroSumGame",
    "as_payoff_matrix",
    "certify",
    "extract_strategies",
    "make_engine",
    "shift_constant",
    "strategy_segments",
    "to_standard_form",
]
