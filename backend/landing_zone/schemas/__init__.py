"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas validate at system boundary
    - JSON field names are camelCase (isValid, elapsedTime) via aliases
"""
