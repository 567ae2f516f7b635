"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary, before any database access
    - Field names are database column names so records round-trip unchanged
"""
