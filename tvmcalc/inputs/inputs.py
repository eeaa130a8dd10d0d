# tvmcalc/inputs/inputs.py
"""
Inputs loader for tvmcalc batch runs.

Goals
-----
- Deterministic, file-first inputs with validation via Pydantic.
- Accept a single calculation at the JSON root for quick one-offs.
- Structured shape that carries run options (output format, debug).
- Minimal environment-variable overrides for CI/CLI convenience.

Supported JSON shapes
---------------------
1) Single (root = Calculation)
   {"function": "pmt", "args": {"rate": 0.004333, "nper": 24, "pv": -88931.38}}

2) Structured (root = AppInputs)
   {
     "calculations": [
       {"function": "rate", "args": {"nper": 24, "pmt": 4000, "pv": -90000}},
       {"function": "pv", "args": {"rate": 0.05, "nper": 24, "pmt": -1000}}
     ],
     "run": {"output": "json", "debug": false}
   }

Environment overrides (optional)
--------------------------------
- TVM_OUTPUT -> AppInputs.run.output ("text" | "json"; anything else ignored)
- TVM_DEBUG  -> AppInputs.run.debug  (1/true/yes/on)

Public API
----------
- class InputsLoader:
    - load(path: str | Path | None) -> AppInputs
    - load_json(text: str) -> AppInputs
    - from_calculations(calculations) -> AppInputs
    - with_overrides(cfg, output=..., debug=...) -> AppInputs (non-destructive copies)
- function load_inputs(path: str | Path | None) -> AppInputs  (convenience)
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tvmcalc.core.errors import InputsError
from tvmcalc.schemas.models import AppInputs, Calculation

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class InputsLoader:
    """
    File-first inputs loader with light env overrides.

    Default search (when path=None):
        1) ./tvm.json
        2) ./config.json
    """

    env_prefix: str = "TVM_"

    # ---------- Public API ----------

    def load(self, path: str | Path | None = None) -> AppInputs:
        """Load inputs from a JSON file (path). If path is None, try defaults."""
        p = self._resolve_path(path)
        raw = self._read_json_file(p)
        return self._build(raw)

    def load_json(self, text: str) -> AppInputs:
        """Load inputs from a JSON string (single or structured shape)."""
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise InputsError(f"Invalid JSON payload: {e}") from e
        return self._build(raw)

    def from_calculations(self, calculations: list[Calculation]) -> AppInputs:
        """Wrap already-built calculations (e.g. from CLI flags) with default run options + env overrides."""
        try:
            cfg = AppInputs(calculations=calculations)
        except ValidationError as e:
            raise InputsError(f"Inputs validation failed:\n{e}") from e
        return self._apply_env_overrides(cfg)

    def with_overrides(
        self,
        cfg: AppInputs,
        *,
        output: str | None = None,
        debug: bool | None = None,
    ) -> AppInputs:
        """
        Return a *new* AppInputs with provided non-null overrides applied to RunOptions.
        Does not mutate the original instance.
        """
        updates: dict[str, Any] = {}
        if output is not None:
            if output not in ("text", "json"):
                raise InputsError(f"Unsupported output format: {output!r}")
            updates["output"] = output
        if debug is not None:
            updates["debug"] = debug

        if not updates:
            return cfg

        run_new = cfg.run.model_copy(update=updates)
        return cfg.model_copy(update={"run": run_new})

    # ---------- Internals ----------

    def _build(self, raw: Any) -> AppInputs:
        data = self._maybe_wrap_single(raw)
        cfg = self._parse_root(data)
        return self._apply_env_overrides(cfg)

    def _resolve_path(self, path: str | Path | None) -> Path:
        if path is not None:
            p = Path(path)
            if not p.exists():
                raise FileNotFoundError(f"Inputs file not found: {p}")
            return p

        for candidate in (Path("tvm.json"), Path("config.json")):
            if candidate.exists():
                return candidate
        raise FileNotFoundError("No inputs path provided and no default inputs found. Looked for ./tvm.json and ./config.json.")

    def _read_json_file(self, p: Path) -> Any:
        if p.suffix.lower() != ".json":
            raise InputsError(f"Unsupported inputs format for {p.name}; only .json is supported.")
        try:
            return json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise InputsError(f"Invalid JSON in {p}: {e}") from e

    def _maybe_wrap_single(self, raw: Any) -> Any:
        """A bare calculation at the root becomes a one-item batch."""
        if isinstance(raw, dict) and "function" in raw and "calculations" not in raw:
            return {"calculations": [raw]}
        return raw

    def _parse_root(self, data: Any) -> AppInputs:
        try:
            return AppInputs.model_validate(data)
        except ValidationError as e:
            raise InputsError(f"Inputs validation failed:\n{e}") from e

    def _apply_env_overrides(self, cfg: AppInputs) -> AppInputs:
        """Apply light, optional overrides from environment variables to run options."""
        prefix = self.env_prefix
        updates: dict[str, Any] = {}

        output = os.getenv(f"{prefix}OUTPUT")
        if output:
            normalized = output.strip().lower()
            # Ignore bad value; keep validated cfg.run.output
            if normalized in ("text", "json"):
                updates["output"] = normalized

        debug = os.getenv(f"{prefix}DEBUG")
        if debug:
            updates["debug"] = debug.strip().lower() in _TRUTHY

        if not updates:
            return cfg

        run_new = cfg.run.model_copy(update=updates)
        return cfg.model_copy(update={"run": run_new})


# ----------------------------
# Convenience function
# ----------------------------


def load_inputs(path: str | Path | None = None) -> AppInputs:
    """Convenience wrapper for one-shot callers."""
    return InputsLoader().load(path)
