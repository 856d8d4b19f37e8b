"""Core test fixtures — step builder and a fresh session per test."""

import pytest

from emergency_planner.core.thinking_session import ReasoningStep, ThinkingSession


def _make_step(
    number: int = 1, total: int = 3, thought: str = "Assess airway", **kwargs,
) -> ReasoningStep:
    kwargs.setdefault("next_thought_needed", True)
    return ReasoningStep(
        thought=thought, thought_number=number, total_thoughts=total, **kwargs,
    )


@pytest.fixture
def make_step():
    return _make_step


@pytest.fixture
def session() -> ThinkingSession:
    return ThinkingSession()
