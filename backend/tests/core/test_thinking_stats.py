"""Thinking Stats — tests for pure session summary statistics.

Tests cover:
    - Empty session yields zero counts
    - Revisions, branches and per-branch lengths counted
    - Latest estimate follows the last stored step
"""

from emergency_planner.core.thinking_stats import compute_thinking_stats


def test_empty_session_stats(session):
    assert compute_thinking_stats(session) == {
        "total_steps": 0,
        "revisions": 0,
        "branch_count": 0,
        "branch_lengths": {},
        "latest_estimate": 0,
        "more_steps_requested": False,
    }


def test_stats_count_revisions_and_branches(session, make_step):
    session.record(make_step(number=1))
    session.record(make_step(number=2, is_revision=True, revises_thought=1))
    session.record(make_step(number=3, branch_from_thought=2, branch_id="alt-1"))
    session.record(make_step(number=4, branch_from_thought=2, branch_id="alt-1"))
    session.record(make_step(number=3, branch_from_thought=1, branch_id="alt-2"))

    stats = compute_thinking_stats(session)
    assert stats["total_steps"] == 5
    assert stats["revisions"] == 1
    assert stats["branch_count"] == 2
    assert stats["branch_lengths"] == {"alt-1": 2, "alt-2": 1}


def test_latest_estimate_uses_normalized_step(session, make_step):
    session.record(make_step(number=1, total=3))
    session.record(make_step(number=6, total=3, needs_more_thoughts=True))
    stats = compute_thinking_stats(session)
    assert stats["latest_estimate"] == 6
    assert stats["more_steps_requested"] is True
