"""ThinkingSession tests — pure tests for the reasoning-step tracker.

Tests cover:
    - Initial state defaults
    - Upward-only correction of the total estimate
    - Append-only history (ordering, duplicates, out-of-order numbers)
    - Revisions never rewrite earlier steps
    - Branch filing rules (both fields required, one list per id)
"""

import dataclasses

import pytest


# --- Initial state -----------------------------------------------------------

def test_new_session_is_empty(session):
    assert session.history == []
    assert session.branches == {}
    assert session.history_length == 0
    assert session.branch_ids == []


# --- Estimate normalization --------------------------------------------------

def test_estimate_raised_to_step_number(session, make_step):
    stored = session.record(make_step(number=5, total=3))
    assert stored.total_thoughts == 5
    assert session.history[-1].total_thoughts == 5


def test_estimate_kept_when_not_exceeded(session, make_step):
    stored = session.record(make_step(number=2, total=6))
    assert stored.total_thoughts == 6


def test_estimate_equal_to_step_number_unchanged(session, make_step):
    stored = session.record(make_step(number=4, total=4))
    assert stored.total_thoughts == 4


# --- Append-only history -----------------------------------------------------

def test_history_grows_by_one_per_step(session, make_step):
    for n in range(1, 6):
        session.record(make_step(number=n, total=5))
        assert session.history_length == n


def test_history_keeps_arrival_order(session, make_step):
    session.record(make_step(number=3, thought="third"))
    session.record(make_step(number=1, thought="first"))
    assert [s.thought for s in session.history] == ["third", "first"]


def test_duplicate_step_numbers_accepted(session, make_step):
    session.record(make_step(number=2))
    session.record(make_step(number=2))
    assert session.history_length == 2


def test_stored_step_is_immutable(session, make_step):
    stored = session.record(make_step())
    with pytest.raises(dataclasses.FrozenInstanceError):
        stored.thought = "rewritten"


def test_revision_does_not_rewrite_revised_step(session, make_step):
    original = session.record(make_step(number=1, thought="Likely sprain"))
    session.record(make_step(
        number=2, thought="Fracture more likely", is_revision=True, revises_thought=1,
    ))
    assert session.history[0] is original
    assert session.history[0].thought == "Likely sprain"
    assert session.history_length == 2


def test_revision_of_unknown_step_accepted(session, make_step):
    session.record(make_step(number=1, is_revision=True, revises_thought=9))
    assert session.history_length == 1


# --- Branches ----------------------------------------------------------------

def test_branch_created_on_first_branch_step(session, make_step):
    session.record(make_step(number=3, branch_from_thought=2, branch_id="alt-1"))
    assert session.branch_ids == ["alt-1"]
    assert len(session.branch("alt-1")) == 1


def test_same_branch_id_listed_once(session, make_step):
    session.record(make_step(number=3, branch_from_thought=2, branch_id="alt-1"))
    session.record(make_step(number=4, branch_from_thought=2, branch_id="alt-1"))
    assert session.branch_ids == ["alt-1"]
    assert len(session.branch("alt-1")) == 2
    assert session.history_length == 2


def test_branch_ids_in_insertion_order(session, make_step):
    session.record(make_step(number=3, branch_from_thought=2, branch_id="zeta"))
    session.record(make_step(number=3, branch_from_thought=2, branch_id="alpha"))
    assert session.branch_ids == ["zeta", "alpha"]


def test_branch_from_without_id_not_filed(session, make_step):
    session.record(make_step(number=3, branch_from_thought=2))
    assert session.branches == {}
    assert session.history_length == 1


def test_branch_id_without_branch_from_not_filed(session, make_step):
    session.record(make_step(number=3, branch_id="alt-1"))
    assert session.branches == {}


def test_branch_stores_normalized_step(session, make_step):
    session.record(make_step(number=7, total=3, branch_from_thought=2, branch_id="alt-1"))
    assert session.branch("alt-1")[0].total_thoughts == 7


def test_branch_returns_copy(session, make_step):
    session.record(make_step(number=3, branch_from_thought=2, branch_id="alt-1"))
    session.branch("alt-1").clear()
    assert len(session.branch("alt-1")) == 1


def test_unknown_branch_is_empty(session):
    assert session.branch("missing") == []
