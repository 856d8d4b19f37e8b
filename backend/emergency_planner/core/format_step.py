"""Step Formatting — bordered, human-readable rendering of one reasoning step.

Invariants:
    - Pure function: same step, same text
    - Header shows position as "n/total" using the STORED (normalized) estimate
    - Revision context wins over branch context when a step claims both

Design Decisions:
    - Rendered for the stderr log only; the tool result stays machine-readable JSON
"""

from emergency_planner.core.thinking_session import ReasoningStep


def _header(step: ReasoningStep) -> str:
    if step.is_revision:
        prefix = "🔄 Revision"
        context = f" (revising thought {step.revises_thought})"
    elif step.branch_from_thought is not None:
        prefix = "🌿 Branch"
        context = f" (from thought {step.branch_from_thought}, ID: {step.branch_id})"
    else:
        prefix = "💭 Thought"
        context = ""
    return f"{prefix} {step.thought_number}/{step.total_thoughts}{context}"


def format_step(step: ReasoningStep) -> str:
    """Render a step as a box: header row, divider, body row."""
    header = _header(step)
    width = max(len(header), len(step.thought)) + 2
    border = "─" * (width + 2)
    return "\n".join([
        f"┌{border}┐",
        f"│ {header.ljust(width)} │",
        f"├{border}┤",
        f"│ {step.thought.ljust(width)} │",
        f"└{border}┘",
    ])
