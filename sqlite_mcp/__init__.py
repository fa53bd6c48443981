"""SQLite MCP Server Package — tool dispatch and query gating over one SQLite file.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
