"""Thinking Schemas — strict Pydantic model for one raw reasoning step.

Invariants:
    - Wire names (camelCase aliases) are the only accepted input keys
    - Required fields are validated before optional ones (declaration order)
    - Strict mode: no coercion — "3" is not a number, 1 is not a boolean

Design Decisions:
    - Pydantic model as the validator, dataclass as the stored record: the session never
      depends on Pydantic (ADR: DDD boundary)
    - Unknown keys ignored: clients may send extra hints without failing the step
"""

from pydantic import BaseModel, ConfigDict, Field


class ReasoningStepInput(BaseModel):
    """Raw arguments of the sequentialthinking tool."""

    model_config = ConfigDict(strict=True, extra="ignore")

    thought: str = Field(min_length=1)
    thought_number: int = Field(alias="thoughtNumber", ge=1)
    total_thoughts: int = Field(alias="totalThoughts", ge=1)
    next_thought_needed: bool = Field(alias="nextThoughtNeeded")
    is_revision: bool | None = Field(None, alias="isRevision")
    revises_thought: int | None = Field(None, alias="revisesThought", ge=1)
    branch_from_thought: int | None = Field(None, alias="branchFromThought", ge=1)
    branch_id: str | None = Field(None, alias="branchId")
    needs_more_thoughts: bool | None = Field(None, alias="needsMoreThoughts")
