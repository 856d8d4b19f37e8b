"""Thinking Session — in-memory tracker for a chain of reasoning steps.

Invariants:
    - history only grows: steps are appended in arrival order, never reordered or removed
    - Stored steps are immutable (frozen dataclass); a revision annotates the new step
      and never rewrites the step it revises
    - A stored step never carries total_thoughts < thought_number (estimate raised upward)
    - A step joins branches[branch_id] only when branch_from_thought AND branch_id are set
    - Out-of-order and duplicate thought numbers are accepted as-is

Design Decisions:
    - In-memory, not persisted: state lives for the server process (ADR: stdio single client)
    - Explicitly owned object handed to ThinkingHandlers, not a module global
      (ADR: no hidden global state)
    - Dataclass with computed properties: pure, deterministic, testable without mocks
"""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class ReasoningStep:
    """One step in the chain. Field names mirror the wire names in snake_case."""
    thought: str
    thought_number: int
    total_thoughts: int
    next_thought_needed: bool
    is_revision: bool | None = None
    revises_thought: int | None = None
    branch_from_thought: int | None = None
    branch_id: str | None = None
    needs_more_thoughts: bool | None = None

    @property
    def starts_branch(self) -> bool:
        """Whether this step is filed under a named branch."""
        return self.branch_from_thought is not None and bool(self.branch_id)


@dataclass
class ThinkingSession:
    """Per-process reasoning history — pure dataclass, no IO."""

    history: list[ReasoningStep] = field(default_factory=list)

    # branch_id -> steps filed under it; dict order is first-seen order
    branches: dict[str, list[ReasoningStep]] = field(default_factory=dict)

    # --- Computed properties ---------------------------------------------------

    @property
    def history_length(self) -> int:
        return len(self.history)

    @property
    def branch_ids(self) -> list[str]:
        """Known branch labels in insertion order."""
        return list(self.branches)

    # --- Mutation methods --------------------------------------------------------

    def record(self, step: ReasoningStep) -> ReasoningStep:
        """Normalize and append a validated step. Returns the stored step."""
        if step.thought_number > step.total_thoughts:
            step = replace(step, total_thoughts=step.thought_number)
        self.history.append(step)
        if step.starts_branch:
            self.branches.setdefault(step.branch_id, []).append(step)
        return step

    def branch(self, branch_id: str) -> list[ReasoningStep]:
        """Steps filed under branch_id (a copy; empty if unknown)."""
        return list(self.branches.get(branch_id, []))
