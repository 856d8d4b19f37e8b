"""Thinking Stats — pure computation of session summary statistics from ThinkingSession.

Invariants:
    - All inputs come from ThinkingSession fields (no IO)
    - Returns a flat, JSON-serializable dict
    - Never raises — an empty session yields zero counts

Design Decisions:
    - Pure function, not a method on ThinkingSession (ADR: session is bookkeeping, stats are presentation)
"""

from emergency_planner.core.thinking_session import ThinkingSession


def compute_thinking_stats(session: ThinkingSession) -> dict:
    """Compute summary statistics from a ThinkingSession. Pure, no IO."""
    history = session.history
    return {
        "total_steps": len(history),
        "revisions": sum(1 for s in history if s.is_revision),
        "branch_count": len(session.branches),
        "branch_lengths": {
            branch_id: len(steps) for branch_id, steps in session.branches.items()
        },
        "latest_estimate": history[-1].total_thoughts if history else 0,
        "more_steps_requested": any(s.needs_more_thoughts for s in history),
    }
