# tvmcalc/schemas/models.py

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# 0 = payment at end of period (ordinary annuity), 1 = beginning (annuity-due)
PaymentTiming = Annotated[int, Field(ge=0, le=1)]

FUNCTION_NAMES: tuple[str, ...] = ("rate", "pv", "pmt", "fv", "ipmt", "ppmt")

# =========================
# Per-function arguments
# =========================


class _Args(BaseModel):
    """Common config: reject typos instead of silently ignoring them."""

    model_config = ConfigDict(extra="forbid")


class RateArgs(_Args):
    """Inputs for solving the periodic rate of an annuity."""

    nper: float = Field(..., description="Number of periods (may be fractional).")
    pmt: float = Field(..., description="Level payment per period (received > 0, paid < 0).")
    pv: float = Field(..., description="Present value / principal.")
    fv: float = Field(0.0, description="Future value left after the last payment.")
    type: PaymentTiming = Field(0, description="0 = end of period, 1 = beginning of period.")


class PvArgs(_Args):
    """Inputs for the present value of an ordinary annuity."""

    rate: float = Field(..., description="Periodic rate as a fraction (0.05 = 5%).")
    nper: float = Field(..., description="Number of periods.")
    pmt: float = Field(..., description="Level payment per period.")


class PmtArgs(_Args):
    """Inputs for the level payment."""

    rate: float = Field(..., description="Periodic rate as a fraction (0.05 = 5%).")
    nper: float = Field(..., description="Number of periods.")
    pv: float = Field(..., description="Present value / principal.")
    fv: float = Field(0.0, description="Future value left after the last payment.")
    type: PaymentTiming = Field(0, description="0 = end of period, 1 = beginning of period.")


class FvArgs(_Args):
    """Inputs for the future value."""

    rate: float = Field(..., description="Periodic rate as a fraction (0.05 = 5%).")
    nper: float = Field(..., description="Number of periods.")
    pmt: float = Field(..., description="Level payment per period.")
    pv: float = Field(0.0, description="Present value / principal.")
    type: PaymentTiming = Field(0, description="Accepted for signature parity; not applied.")


class IpmtArgs(_Args):
    """
    Inputs for splitting the payment of one period.
    `period` is 1-based and must fall inside the schedule.
    """

    rate: float = Field(..., description="Periodic rate as a fraction (0.05 = 5%).")
    period: int = Field(..., ge=1, description="1-based period whose payment is split.")
    nper: float = Field(..., description="Number of periods.")
    pv: float = Field(..., description="Present value / principal.")
    fv: float = Field(0.0, description="Future value left after the last payment.")
    type: PaymentTiming = Field(0, description="0 = end of period, 1 = beginning of period.")

    @model_validator(mode="after")
    def _period_within_schedule(self) -> IpmtArgs:
        if self.period > self.nper:
            raise ValueError(f"period ({self.period}) must be <= nper ({self.nper})")
        return self


class PpmtArgs(IpmtArgs):
    """Same inputs as IpmtArgs; evaluates the principal part."""


# =========================
# Requests / results
# =========================


class Calculation(BaseModel):
    """One formula evaluation request."""

    function: str = Field(..., description=f"One of: {', '.join(FUNCTION_NAMES)}.")
    args: dict[str, float | int] = Field(default_factory=dict, description="Keyword arguments for the function.")

    @field_validator("function")
    @classmethod
    def _normalize_name(cls, v: str) -> str:
        return v.strip().lower()


class CalculationResult(BaseModel):
    """
    Value of one evaluation. Non-finite values (inf/NaN) are returned untouched
    and flagged via `finite`; JSON output writes them as Infinity/NaN.
    """

    model_config = ConfigDict(ser_json_inf_nan="constants")

    function: str
    args: dict[str, float | int]
    value: float
    finite: bool
    iterations: int | None = Field(None, description="Secant iterations run (rate only).")
    converged: bool | None = Field(None, description="Whether the secant loop met the precision test (rate only).")


# =========================
# Run configuration
# =========================


class RunOptions(BaseModel):
    """Runtime (non-financial) options for a CLI / batch run."""

    output: Literal["text", "json"] = Field("text", description='Result format: "text" or "json".')
    debug: bool = Field(False, description="Write solver diagnostics to the debug log.")


class AppInputs(BaseModel):
    """
    Full batch payload.

    Attributes:
        calculations: Formula evaluations to run, in order.
        run:          Non-financial, runtime options for the current execution.
    """

    calculations: list[Calculation] = Field(..., min_length=1)
    run: RunOptions = RunOptions()
