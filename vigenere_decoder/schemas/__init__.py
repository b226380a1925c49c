"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate shape and size at the system boundary
    - Domain rules (ASCII lines, key range) stay in core/ and surface as DecoderError
"""
