"""
Game configuration
==================

Settings for the solve pipeline. Defaults can be overridden through
environment variables:

    ZEROSUM_TOLERANCE   numerical tolerance used by the certifier (1e-8)
    ZEROSUM_CERTIFY     run the equilibrium self-check at construction (on)
    ZEROSUM_STRICT      raise CertificationError on a failed check (off)
    ZEROSUM_LP_BACKEND  "highs" (scipy) or "pulp" (CBC)
"""

import os
from dataclasses import dataclass

DEFAULT_TOLERANCE = 1e-8
DEFAULT_BACKEND = "highs"
BACKENDS = ("highs", "pulp")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True)
class GameConfig:
    tolerance: float = DEFAULT_TOLERANCE
    certify: bool = True
    strict: bool = False
    backend: str = DEFAULT_BACKEND

    def __post_init__(self):
        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.backend not in BACKENDS:
            raise ValueError(f"backend must be one of {BACKENDS}, got {self.backend!r}")

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Build a config from ZEROSUM_* environment variables."""
        tolerance = os.environ.get("ZEROSUM_TOLERANCE")
        return cls(
            tolerance=float(tolerance) if tolerance else DEFAULT_TOLERANCE,
            certify=_env_flag("ZEROSUM_CERTIFY", True),
            strict=_env_flag("ZEROSUM_STRICT", False),
            backend=os.environ.get("ZEROSUM_LP_BACKEND", DEFAULT_BACKEND).strip().lower(),
        )
