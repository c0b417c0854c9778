"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Request schemas type-check values; presence is checked by core.validation
    - Response schemas never expose password hashes

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
