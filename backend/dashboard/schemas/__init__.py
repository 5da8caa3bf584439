"""Pydantic Schemas — form validation and coercion at the system boundary.

Invariants:
    - Schemas validate user input (form posts) before any IO happens
    - Domain enums and amount helpers come from core/

Design Decisions:
    - Separate from models: schemas are form contracts, models are persistence
"""
