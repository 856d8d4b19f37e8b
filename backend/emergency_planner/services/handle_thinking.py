"""Thinking Handlers — the stateful sequentialthinking tool (1 method).

Invariants:
    - A rejected step leaves the session untouched (validate before record)
    - The rendered step goes to the log (stderr), never into the tool result
    - The result is the JSON summary: thoughtNumber, totalThoughts, nextThoughtNeeded,
      branches, thoughtHistoryLength

Design Decisions:
    - Handler owns no state: the ThinkingSession is injected (ADR: no hidden global state)
    - Validation errors raised as InvalidStepError and rendered by ToolDispatch,
      keeping one error path for every tool
"""

import json
import logging
from typing import Any

from emergency_planner.core.format_step import format_step
from emergency_planner.core.thinking_session import ThinkingSession
from emergency_planner.core.thinking_stats import compute_thinking_stats
from emergency_planner.core.validate_step import parse_reasoning_step

logger = logging.getLogger(__name__)
render_logger = logging.getLogger("emergency_planner.thinking")


class ThinkingHandlers:
    """Sequential thinking — records steps into the injected session."""

    def __init__(self, session: ThinkingSession):
        self.session = session

    async def sequentialthinking(self, arguments: Any) -> dict:
        """Validate, record and summarize one reasoning step."""
        step = self.session.record(parse_reasoning_step(arguments))

        if (step.branch_from_thought is not None) != bool(step.branch_id):
            logger.warning(
                "Branch fields supplied without their pair; step kept in history only",
                extra={"thought_number": step.thought_number, "branch_id": step.branch_id},
            )

        render_logger.info(
            "\n" + format_step(step),
            extra={"thought_number": step.thought_number, "branch_id": step.branch_id},
        )
        logger.debug(f"Session stats: {compute_thinking_stats(self.session)}")

        summary = {
            "thoughtNumber": step.thought_number,
            "totalThoughts": step.total_thoughts,
            "nextThoughtNeeded": step.next_thought_needed,
            "branches": self.session.branch_ids,
            "thoughtHistoryLength": self.session.history_length,
        }
        return {"content": [{"type": "text", "text": json.dumps(summary, indent=2)}]}
