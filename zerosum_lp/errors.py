"""
Error types
===========

Every failure the game pipeline can raise derives from ZeroSumError.
"""


class ZeroSumError(Exception):
    """Base class for all zerosum_lp errors."""


class MalformedMatrixError(ZeroSumError, ValueError):
    """Payoff matrix is empty, ragged, non-numeric or has non-finite entries."""


class DegenerateSolutionError(ZeroSumError):
    """Normalization scale sum(x) is zero or not finite."""


class LinearProgramError(ZeroSumError, RuntimeError):
    """LP engine failed to produce an optimal solution."""


class InfeasibleError(LinearProgramError):
    pass


class UnboundedError(LinearProgramError):
    pass


class CertificationError(ZeroSumError, AssertionError):
    """Raised in strict mode when the computed equilibrium fails a check."""

    def __init__(self, certificate):
        self.certificate = certificate
        super().__init__("equilibrium certification failed:\n" + certificate.summary())
