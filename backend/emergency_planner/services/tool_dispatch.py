"""Tool Dispatch — explicit routing from tool_name to handler function.

Invariants:
    - Every tool->handler mapping is visible — no getattr magic, no auto-discovery
    - Unknown tools return an UNKNOWN_TOOL error envelope; no handler runs
    - Care tool arguments are validated against their Pydantic model before the handler runs
    - execute() never raises: every failure becomes {"content": [...], "isError": True}
    - Every tool call logged with its outcome

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
      (ADR: no convention-over-config)
    - sequentialthinking validates its own raw input: its error text must keep the JSON
      shape of its results (ADR: uniform tool response shape)
    - Catch-all at the boundary logs the traceback and returns a generic message
      (never leaks internal details)
"""

import logging
import time
from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ValidationError

from emergency_planner.core.domain_types import ToolName
from emergency_planner.core.errors import (
    ErrorCategory, ErrorContext, ErrorSeverity, PlannerError,
    ToolValidationError, UnknownToolError,
)
from emergency_planner.core.thinking_session import ThinkingSession
from emergency_planner.services.define_care_tools import ARGUMENT_MODELS
from emergency_planner.services.handle_care import CareHandlers
from emergency_planner.services.handle_thinking import ThinkingHandlers

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Awaitable[dict]]


def _validation_error(tool_name: str, exc: ValidationError) -> ToolValidationError:
    """Map a Pydantic ValidationError to a field-level ToolValidationError."""
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]) or "arguments",
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    summary = "; ".join(f"{d['field']}: {d['message']}" for d in details)
    return ToolValidationError(
        f"Invalid arguments for {tool_name}: {summary}",
        field=details[0]["field"] if details else None,
        details=details,
        context=ErrorContext(tool_name=tool_name),
    )


class ToolDispatch:
    """Routes tool_name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, session: ThinkingSession, maps_api_key: str | None = None):
        care = CareHandlers(maps_api_key)
        thinking = ThinkingHandlers(session)

        self._session = session

        # ADR: every mapping explicit — adding a tool requires editing this dict
        self._handlers: dict[str, Handler] = {
            # Care tools (4) — arguments validated here
            ToolName.FIND_FACILITIES.value: care.find_nearby_medical_facilities,
            ToolName.CHECK_COVERAGE.value: care.check_medicare_coverage,
            ToolName.EMERGENCY_CONTACTS.value: care.get_emergency_contacts,
            ToolName.SCHEDULE_TRANSPORT.value: care.schedule_emergency_transport,

            # Thinking (1) — validates its own raw arguments
            ToolName.SEQUENTIAL_THINKING.value: thinking.sequentialthinking,
        }
        self._argument_models: dict[str, type[BaseModel]] = dict(ARGUMENT_MODELS)

    @property
    def session(self) -> ThinkingSession:
        return self._session

    async def execute(self, tool_name: str, arguments: dict | None) -> dict:
        """Route tool_name to handler. Returns the result envelope. Logs every call."""
        arguments = {} if arguments is None else arguments
        t0 = time.monotonic()
        try:
            result = await self._run(tool_name, arguments)
        except PlannerError as e:
            logger.warning(f"Tool {tool_name} rejected: {e.message}", extra=e.to_log_extra())
            return e.to_envelope()
        except Exception as e:
            logger.error(
                f"Tool {tool_name} failed: {e}",
                exc_info=True,
                extra={
                    "tool_name": tool_name,
                    "error_code": "INTERNAL_ERROR",
                    "error_category": ErrorCategory.INTERNAL.value,
                    "error_severity": ErrorSeverity.ERROR.value,
                },
            )
            return {
                "content": [{"type": "text", "text": f"Error: {e}"}],
                "isError": True,
            }
        elapsed_ms = (time.monotonic() - t0) * 1000
        logger.info(f"Tool {tool_name}: ok in {elapsed_ms:.1f}ms", extra={"tool_name": tool_name})
        return result

    async def _run(self, tool_name: str, arguments: Any) -> dict:
        handler = self._handlers.get(tool_name)
        if not handler:
            raise UnknownToolError(tool_name)
        model = self._argument_models.get(tool_name)
        if model is None:
            return await handler(arguments)
        try:
            validated = model.model_validate(arguments)
        except ValidationError as exc:
            raise _validation_error(tool_name, exc) from exc
        return await handler(validated)
