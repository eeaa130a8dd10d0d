# tvmcalc/core/finance/__init__.py

from .annuity import (
    FINANCIAL_MAX_ITERATIONS,
    FINANCIAL_PRECISION,
    RATE_INITIAL_GUESS,
    RateSolution,
    fv,
    ipmt,
    pmt,
    ppmt,
    pv,
    rate,
    solve_rate,
)

__all__ = [
    "FINANCIAL_PRECISION",
    "FINANCIAL_MAX_ITERATIONS",
    "RATE_INITIAL_GUESS",
    "RateSolution",
    "pv",
    "pmt",
    "fv",
    "ipmt",
    "ppmt",
    "rate",
    "solve_rate",
]
