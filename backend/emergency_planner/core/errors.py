"""Error Hierarchy — typed, categorized exceptions for every planner failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors are recoverable; they never corrupt session state
    - to_envelope() produces the uniform tool result shape (text block + isError)
    - No tracebacks or internal details leaked in envelope text

Design Decisions:
    - Single hierarchy with PlannerError base: ToolDispatch catches one type (ADR: uniform error shape)
    - ErrorContext as dataclass: observability fields without coupling to logging framework
"""

import json
from dataclasses import dataclass
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context surfaced in logs alongside the error."""
    tool_name: str | None = None


class PlannerError(Exception):
    """Base exception for all planner errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_envelope(self) -> dict:
        """Convert to the uniform tool result envelope."""
        return {
            "content": [{"type": "text", "text": f"Error: {self.message}"}],
            "isError": True,
        }

    def to_log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "error_category": self.category.value,
            "error_severity": self.severity.value,
            "tool_name": self.context.tool_name,
        }


# ─── Request Errors ─────────────────────────────────────────────

class UnknownToolError(PlannerError):
    """Requested tool name is not in the catalog."""
    def __init__(self, tool_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.tool_name = tool_name
        super().__init__(
            f"Unknown tool: {tool_name}",
            "UNKNOWN_TOOL", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )
        self.tool_name = tool_name


class ToolValidationError(PlannerError):
    """Tool arguments failed schema validation."""
    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_ARGUMENTS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.field = field
        self.details = details or []


class InvalidStepError(PlannerError):
    """A reasoning step failed structural validation."""
    def __init__(self, field: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid {field}: {reason}",
            "INVALID_STEP", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.field = field

    def to_envelope(self) -> dict:
        """Step errors keep the JSON result shape of successful steps."""
        payload = {"error": self.message, "status": "failed"}
        return {
            "content": [{"type": "text", "text": json.dumps(payload, indent=2)}],
            "isError": True,
        }
