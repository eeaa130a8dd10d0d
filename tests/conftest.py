# tests/conftest.py
from __future__ import annotations

import pytest

from tvmcalc.core.debug import reset_debug_logger
from tvmcalc.core.finance import annuity


# -------- Environment isolation --------
@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for k in ("TVM_OUTPUT", "TVM_DEBUG", "TVM_LOG_PATH"):
        monkeypatch.delenv(k, raising=False)
    yield
    reset_debug_logger()


# -------- Solver fixtures --------
@pytest.fixture
def cap_iterations(monkeypatch):
    """
    Callable that lowers the secant iteration cap for the current test.

    Usage:
        cap_iterations(1)
    """

    def _set(n: int) -> None:
        monkeypatch.setattr(annuity, "FINANCIAL_MAX_ITERATIONS", n)

    return _set


@pytest.fixture
def inputs_file(tmp_path):
    """Callable factory writing a JSON payload into tmp_path and returning its path."""
    import json

    def _factory(payload, name: str = "tvm.json"):
        p = tmp_path / name
        p.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
        return p

    return _factory
