"""Tools Registry — flat catalog of every tool exposed over MCP.

Invariants:
    - ALL_TOOLS lists each tool exactly once, care tools first
    - Every entry has name, description and an object input_schema
    - Names in ALL_TOOLS are exactly the keys ToolDispatch routes

Design Decisions:
    - Explicit imports from each define_*_tools.py: no auto-discovery (ADR: ExMA)
"""

from emergency_planner.services.define_care_tools import TOOLS_CARE
from emergency_planner.services.define_thinking_tools import TOOLS_THINKING


ALL_TOOLS: list[dict] = [
    *TOOLS_CARE,        # 4 tools
    *TOOLS_THINKING,    # 1 tool
]


def tool_names() -> list[str]:
    """Tool names in catalog order."""
    return [t["name"] for t in ALL_TOOLS]
