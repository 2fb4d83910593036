"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Wire names follow the public contract (camelCase where the API uses it)

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, core types are domain state
"""
