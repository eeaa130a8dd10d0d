# tests/unit/test_calculator.py
from __future__ import annotations

import math

import pytest

from tvmcalc.core.errors import InputsError, TvmError, UnknownFunctionError
from tvmcalc.schemas.models import FUNCTION_NAMES, Calculation, IpmtArgs
from tvmcalc.tools import FUNCTIONS, evaluate, evaluate_all, validate_args
from tests.utils import SCENARIOS, make_app_inputs, make_calculation


def test_registry_covers_every_function():
    assert tuple(FUNCTIONS) == FUNCTION_NAMES


@pytest.mark.parametrize("name,kwargs,expected", SCENARIOS)
def test_evaluate_reference_scenarios(name, kwargs, expected):
    res = evaluate(Calculation(function=name, args=kwargs))
    assert res.function == name
    assert res.value == expected
    assert res.finite is True


def test_rate_result_carries_solver_diagnostics():
    res = evaluate(make_calculation("rate", nper=24, pmt=4000, pv=-90000))
    assert res.converged is True
    assert res.iterations is not None and res.iterations > 0
    # defaults are filled into the echoed args
    assert res.args["fv"] == 0.0 and res.args["type"] == 0


def test_closed_form_results_have_no_diagnostics():
    res = evaluate(make_calculation())
    assert res.iterations is None and res.converged is None


def test_zero_rate_payment_is_reported_not_raised():
    res = evaluate(make_calculation("pmt", rate=0, nper=24, pv=-1000))
    assert res.finite is False
    assert math.isnan(res.value)


def test_unknown_function():
    with pytest.raises(UnknownFunctionError) as ei:
        evaluate(Calculation(function="npv", args={}))
    assert ei.value.name == "npv"
    assert "rate" in str(ei.value)
    assert isinstance(ei.value, TvmError) and isinstance(ei.value, ValueError)


def test_bad_arguments_raise_inputs_error():
    with pytest.raises(InputsError, match="Invalid arguments for ipmt"):
        evaluate(make_calculation("ipmt", rate=0.05, period=30, nper=24, pv=-5000))
    with pytest.raises(InputsError):
        evaluate(make_calculation("pv", rate=0.05, nper=24))  # pmt missing


def test_validate_args_returns_model():
    parsed = validate_args("ipmt", {"rate": 0.05, "period": 2, "nper": 24, "pv": -5000})
    assert isinstance(parsed, IpmtArgs)


def test_evaluate_all_preserves_order():
    cfg = make_app_inputs(
        make_calculation("pv", rate=0, nper=24, pmt=-1000),
        make_calculation("ipmt", rate=0.05, period=1, nper=24, pv=-5000),
    )
    out = evaluate_all(cfg)
    assert [r.function for r in out] == ["pv", "ipmt"]
    assert out[0].value == 24000.0
    assert out[1].value == 250.0
