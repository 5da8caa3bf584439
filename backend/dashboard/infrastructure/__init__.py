"""Infrastructure Layer — database pool, view cache, identity, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Process-wide resources are created at startup and injected via dependencies

Design Decisions:
    - One module per collaborator: database, view_cache, identity, observability
"""
