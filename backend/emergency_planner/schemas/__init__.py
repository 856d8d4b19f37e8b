"""Pydantic Schemas — argument validation for MCP tools.

Invariants:
    - Schemas validate at system boundary (tool arguments from the client)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core dataclasses: schemas are wire contracts, dataclasses are state (ADR: DDD boundary)
"""
