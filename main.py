# main.py
"""
Entry Point — tvmcalc

Purpose
-------
Evaluate time-value-of-money formulas from the command line:
  1) One formula via a sub-command, flags taken from its argument model.
  2) A batch of formulas from a JSON file (see tvmcalc/inputs/inputs.py).

Results are printed unrounded (repr of the float). Non-finite values such as
pmt at a zero rate are printed as inf/nan rather than treated as errors.

Usage
-----
    python main.py rate --nper 24 --pmt 4000 --pv -90000
    python main.py --json pmt --rate 0.004333 --nper 24 --pv -88931.38
    python main.py --config tvm.json
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from tvmcalc.core.debug import enable_debug_logging, print_debug_exc
from tvmcalc.core.errors import TVM_ERRORS
from tvmcalc.inputs.inputs import InputsLoader
from tvmcalc.schemas.models import Calculation, CalculationResult
from tvmcalc.tools.calculator import FUNCTIONS, evaluate_all


def build_parser() -> argparse.ArgumentParser:
    """CLI with one sub-command per formula; flags mirror the argument models."""
    p = argparse.ArgumentParser(description="Time-value-of-money calculator")
    p.add_argument("--config", type=str, default=None, help="Path to JSON inputs (single calculation or batch).")
    p.add_argument("--json", action="store_true", help="Print one JSON object per result.")
    p.add_argument("--debug", action="store_true", help="Write solver diagnostics to the debug log.")

    sub = p.add_subparsers(dest="function")
    for name, (model, fn) in FUNCTIONS.items():
        sp = sub.add_parser(name, help=next(iter((fn.__doc__ or "").strip().splitlines()), None))
        for field_name, field in model.model_fields.items():
            sp.add_argument(
                f"--{field_name}",
                type=int if field.annotation is int else float,
                required=field.is_required(),
                default=None,
                help=field.description,
            )
    return p


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _from_args(args: argparse.Namespace) -> Calculation:
    model, _ = FUNCTIONS[args.function]
    values = {k: getattr(args, k) for k in model.model_fields if getattr(args, k, None) is not None}
    return Calculation(function=args.function, args=values)


def render(results: list[CalculationResult], output: str) -> str:
    if output == "json":
        return "\n".join(r.model_dump_json() for r in results)

    lines = []
    for r in results:
        line = f"{r.function} = {r.value!r}"
        if r.iterations is not None:
            line += f"  (iterations={r.iterations}, converged={r.converged})"
        lines.append(line)
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    loader = InputsLoader()

    try:
        if args.function:
            cfg = loader.from_calculations([_from_args(args)])
        else:
            # No sub-command: batch from --config (or the default search path)
            cfg = loader.load(args.config)
        cfg = loader.with_overrides(
            cfg,
            output="json" if args.json else None,
            debug=True if args.debug else None,
        )

        if cfg.run.debug:
            enable_debug_logging(force=True)

        results = evaluate_all(cfg)
    except (*TVM_ERRORS, FileNotFoundError) as e:
        print_debug_exc("tvmcalc", e)
        return 2

    print(render(results, cfg.run.output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
