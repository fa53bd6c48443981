"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, or server
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the imperative shell (gateway + MCP wiring)
"""
