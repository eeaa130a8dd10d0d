# tvmcalc/core/errors.py
"""
Typed errors for the request-facing layers (inputs loader, calculator, CLI).

The annuity formulas themselves never raise these: degenerate math comes back
as inf/NaN. These errors only describe requests that cannot be evaluated at all.

Exports
-------
- TvmError, InputsError, UnknownFunctionError
- TVM_ERRORS
"""

from __future__ import annotations


class TvmError(ValueError):
    """Base class for calculator request failures."""


class InputsError(TvmError):
    """A payload could not be read or did not validate."""


class UnknownFunctionError(TvmError):
    """The requested function name is not one of the registered formulas."""

    def __init__(self, name: str, known: tuple[str, ...] = ()) -> None:
        self.name = name
        self.known = known
        hint = f" (expected one of: {', '.join(known)})" if known else ""
        super().__init__(f"Unknown function {name!r}{hint}")


# Selector tuple for grouped exception handling
TVM_ERRORS = (InputsError, UnknownFunctionError)


__all__ = [
    "TvmError",
    "InputsError",
    "UnknownFunctionError",
    "TVM_ERRORS",
]
