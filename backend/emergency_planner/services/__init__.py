"""Services Layer — tool definitions, tool handlers, and tool dispatch.

Invariants:
    - Handlers split by concern (care tools, thinking)
    - Tool dispatch uses explicit dict mapping (no auto-discovery)

Design Decisions:
    - One handler file per concern for locality (ADR: ExMA no god objects)
"""
