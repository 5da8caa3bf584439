"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes translate HTTP <-> action outcomes; no business logic here

Design Decisions:
    - Thin routes delegate to services (impureim sandwich)
"""
