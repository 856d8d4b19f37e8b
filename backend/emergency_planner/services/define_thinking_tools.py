"""Define Thinking Tools — MCP tool schema for the sequential thinking session.

Invariants:
    - Schema field names match ReasoningStepInput aliases exactly
    - Required: thought, nextThoughtNeeded, thoughtNumber, totalThoughts
    - Integer fields declare minimum 1

Design Decisions:
    - Hand-written schema (not generated): the long description is the tool's usage guide
      and is tuned for the assistant, not derived from the model
"""

from emergency_planner.core.domain_types import ToolName


TOOLS_THINKING = [
    {
        "name": ToolName.SEQUENTIAL_THINKING.value,
        "description": """A detailed tool for dynamic and reflective medical problem-solving through thoughts.
This tool helps analyze medical problems through a flexible thinking process that can adapt and evolve.
Each thought can build on, question, or revise previous insights as understanding of the medical situation deepens.

When to use this tool:
- Breaking down complex medical problems into steps
- Planning and designing treatment approaches with room for revision
- Clinical analysis that might need course correction
- Medical problems where the full scope might not be clear initially
- Healthcare decisions that require a multi-step solution
- Medical evaluations that need to maintain context over multiple steps
- Situations where irrelevant medical information needs to be filtered out

Key features:
- You can adjust totalThoughts up or down as the diagnosis progresses
- You can question or revise previous medical assessments
- You can add more diagnostic thoughts as new information emerges
- You can express clinical uncertainty and explore alternative approaches
- Not every medical assessment needs to build linearly - you can branch or backtrack
- Generates a clinical hypothesis
- Verifies the hypothesis based on the Chain of Thought steps
- Repeats the process until a satisfactory diagnosis or treatment plan is reached
- Provides a correct medical assessment or recommendation

Branching: set both branchFromThought and branchId to file a thought under a named branch.
Revisions: set isRevision and revisesThought; the earlier thought is kept unchanged.""",
        "input_schema": {
            "type": "object",
            "properties": {
                "thought": {
                    "type": "string",
                    "description": "Your current clinical thinking step"
                },
                "nextThoughtNeeded": {
                    "type": "boolean",
                    "description": "Whether another medical assessment step is needed"
                },
                "thoughtNumber": {
                    "type": "integer",
                    "description": "Current thought number",
                    "minimum": 1
                },
                "totalThoughts": {
                    "type": "integer",
                    "description": "Estimated total thoughts needed for complete evaluation",
                    "minimum": 1
                },
                "isRevision": {
                    "type": "boolean",
                    "description": "Whether this revises previous medical thinking"
                },
                "revisesThought": {
                    "type": "integer",
                    "description": "Which medical assessment is being reconsidered",
                    "minimum": 1
                },
                "branchFromThought": {
                    "type": "integer",
                    "description": "Branching point thought number for alternative diagnosis",
                    "minimum": 1
                },
                "branchId": {
                    "type": "string",
                    "description": "Branch identifier for the diagnostic path"
                },
                "needsMoreThoughts": {
                    "type": "boolean",
                    "description": "If more clinical evaluation is needed"
                }
            },
            "required": ["thought", "nextThoughtNeeded", "thoughtNumber", "totalThoughts"]
        }
    },
]
