# tests/utils.py
"""
Single source of truth for reference values and canonical payloads.
Reference values were checked against spreadsheet results.
"""

from __future__ import annotations

from typing import Any

from tvmcalc.schemas.models import AppInputs, Calculation, RunOptions

# (function, kwargs, expected)
SCENARIOS: list[tuple[str, dict[str, Any], float]] = [
    ("rate", {"nper": 24, "pmt": 4000, "pv": -90000, "fv": 0, "type": 0}, 0.005228827926420765),
    ("pv", {"rate": 0.05, "nper": 24, "pmt": -1000}, 13798.641794347),
    ("pv", {"rate": 0, "nper": 24, "pmt": -1000}, 24000.0),
    ("pmt", {"rate": 0.0520 / 12, "nper": 24, "pv": -88931.38, "fv": 0, "type": 0}, 3909.5136186629875),
    ("fv", {"rate": 0.05, "nper": 24, "pmt": -1000, "pv": 5000, "type": 0}, 28376.49915570554),
    ("ipmt", {"rate": 0.05, "period": 1, "nper": 24, "pv": -5000, "fv": 0, "type": 0}, 250.0),
    ("ipmt", {"rate": 0.05, "period": 2, "nper": 24, "pv": -5000, "fv": 0, "type": 0}, 244.38227481182827),
    ("ppmt", {"rate": 0.05, "period": 1, "nper": 24, "pv": -5000, "fv": 0, "type": 0}, 112.35450376343493),
]

LOAN_RATE = 0.05
LOAN_NPER = 24
LOAN_PV = -5000.0


def make_calculation(function: str = "pmt", **args: Any) -> Calculation:
    if not args:
        args = {"rate": LOAN_RATE, "nper": LOAN_NPER, "pv": LOAN_PV}
    return Calculation(function=function, args=args)


def make_app_inputs(*calcs: Calculation, output: str = "text", debug: bool = False) -> AppInputs:
    calculations = list(calcs) or [make_calculation()]
    return AppInputs(calculations=calculations, run=RunOptions(output=output, debug=debug))
