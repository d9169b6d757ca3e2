import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def strict_certification(monkeypatch):
    """Every game built in tests is certified and fails loudly."""
    monkeypatch.setenv("ZEROSUM_CERTIFY", "1")
    monkeypatch.setenv("ZEROSUM_STRICT", "1")
    monkeypatch.delenv("ZEROSUM_TOLERANCE", raising=False)
    monkeypatch.delenv("ZEROSUM_LP_BACKEND", raising=False)


@pytest.fixture
def rng():
    return np.random.default_rng(123)
