"""Step Validation — turns untyped tool arguments into a ReasoningStep or an InvalidStepError.

Invariants:
    - Returns a fully typed ReasoningStep or raises InvalidStepError, never anything else
    - The error names the FIRST offending field by its wire name
    - Validation has no side effects: a rejected step never reaches the session

Design Decisions:
    - Pydantic strict model does the checking; this module only maps its first error
      to a short reason (ADR: one validator abstraction for every tool)
"""

from typing import Any

from pydantic import ValidationError

from emergency_planner.core.errors import InvalidStepError
from emergency_planner.core.thinking_session import ReasoningStep
from emergency_planner.schemas.thinking import ReasoningStepInput


# pydantic error type -> reason shown to the caller
_REASONS = {
    "missing": "is required",
    "string_type": "must be a string",
    "string_too_short": "must be a non-empty string",
    "int_type": "must be a number",
    "int_from_float": "must be a whole number",
    "greater_than_equal": "must be at least 1",
    "bool_type": "must be a boolean",
}


def _first_error(exc: ValidationError) -> tuple[str, str]:
    """(wire field name, reason) for the first reported error."""
    err = exc.errors()[0]
    loc = err.get("loc") or ()
    field = str(loc[0]) if loc else "arguments"
    reason = _REASONS.get(err["type"], err["msg"])
    return field, reason


def parse_reasoning_step(raw: Any) -> ReasoningStep:
    """Validate raw tool arguments. Raises InvalidStepError on the first violation."""
    if not isinstance(raw, dict):
        raise InvalidStepError("arguments", "must be an object")
    try:
        parsed = ReasoningStepInput.model_validate(raw)
    except ValidationError as exc:
        field, reason = _first_error(exc)
        raise InvalidStepError(field, reason) from exc
    return ReasoningStep(**parsed.model_dump())
