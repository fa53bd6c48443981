"""Services Layer — tool definitions, handlers, registry, and dispatch.

Invariants:
    - Handlers split by concern (query vs schema introspection)
    - Tool dispatch uses explicit dict mapping (no auto-discovery)

Design Decisions:
    - One handler file per concern for locality
"""
