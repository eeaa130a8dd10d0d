# tvmcalc/tools/calculator.py
"""
Dispatch validated requests to the annuity formulas.

Validation lives here (via the argument models), never in the formulas:
a request either fails up front with a typed error or runs the math as-is,
non-finite results included.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ValidationError

from tvmcalc.core.errors import InputsError, UnknownFunctionError
from tvmcalc.core.finance import annuity
from tvmcalc.schemas.models import (
    AppInputs,
    Calculation,
    CalculationResult,
    FvArgs,
    IpmtArgs,
    PmtArgs,
    PpmtArgs,
    PvArgs,
    RateArgs,
)

logger = logging.getLogger(__name__)

FUNCTIONS: dict[str, tuple[type[BaseModel], Callable[..., float]]] = {
    "rate": (RateArgs, annuity.rate),
    "pv": (PvArgs, annuity.pv),
    "pmt": (PmtArgs, annuity.pmt),
    "fv": (FvArgs, annuity.fv),
    "ipmt": (IpmtArgs, annuity.ipmt),
    "ppmt": (PpmtArgs, annuity.ppmt),
}


def validate_args(function: str, args: dict[str, Any]) -> BaseModel:
    """Return the validated argument model for `function`."""
    try:
        model, _ = FUNCTIONS[function]
    except KeyError:
        raise UnknownFunctionError(function, tuple(FUNCTIONS)) from None
    try:
        return model.model_validate(args)
    except ValidationError as e:
        raise InputsError(f"Invalid arguments for {function}:\n{e}") from e


def evaluate(calc: Calculation) -> CalculationResult:
    """Run one calculation and wrap the value."""
    parsed = validate_args(calc.function, calc.args)
    kwargs = parsed.model_dump()

    iterations: int | None = None
    converged: bool | None = None
    if calc.function == "rate":
        solution = annuity.solve_rate(**kwargs)
        value = solution.rate
        iterations, converged = solution.iterations, solution.converged
    else:
        _, fn = FUNCTIONS[calc.function]
        value = fn(**kwargs)

    finite = math.isfinite(value)
    if not finite:
        logger.debug("%s(%s) returned non-finite %r", calc.function, kwargs, value)

    return CalculationResult(
        function=calc.function,
        args=kwargs,
        value=value,
        finite=finite,
        iterations=iterations,
        converged=converged,
    )


def evaluate_all(inputs: AppInputs) -> list[CalculationResult]:
    """Evaluate every calculation in order; the first bad request stops the batch."""
    return [evaluate(c) for c in inputs.calculations]


__all__ = ["FUNCTIONS", "validate_args", "evaluate", "evaluate_all"]
