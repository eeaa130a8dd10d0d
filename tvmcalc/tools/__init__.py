# tvmcalc/tools/__init__.py
"""
tvmcalc — tools package

Exports only modules that live under `tvmcalc/tools`:
  - evaluate / evaluate_all / validate_args   (from .calculator)
  - FUNCTIONS                                 (name -> (args model, formula))

The formulas themselves should be imported from `tvmcalc.core.finance`.
"""

from __future__ import annotations

from .calculator import FUNCTIONS, evaluate, evaluate_all, validate_args

__all__ = ["FUNCTIONS", "evaluate", "evaluate_all", "validate_args"]
