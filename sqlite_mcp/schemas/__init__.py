"""Pydantic Schemas — argument models for every tool.

Invariants:
    - Schemas validate at the system boundary (agent-supplied arguments)
    - Each schema doubles as the published JSON Schema for discovery

Design Decisions:
    - Separate from core: schemas are wire contracts, core is domain logic
"""
