"""Decode Schemas: Pydantic models with field-level bounds for the decode endpoints.

Invariants:
    - DecodeRequest: up to MAX_LINES lines, up to MAX_KEY_LENGTH int shifts
    - TextDecodeRequest: text up to MAX_TEXT_LENGTH chars, key as free-form text
    - DecodeResponse.text equals "\\n".join(lines)
"""

from pydantic import BaseModel, Field, StrictInt

MAX_LINES = 10_000
MAX_KEY_LENGTH = 10_000
MAX_TEXT_LENGTH = 1_000_000


class DecodeRequest(BaseModel):
    """Encoded lines plus the numeric key, as JSON arrays."""
    lines: list[str] = Field(max_length=MAX_LINES)
    key: list[StrictInt] = Field(max_length=MAX_KEY_LENGTH)


class TextDecodeRequest(BaseModel):
    """Encoded text block plus the key as text ("3,1,4" or "3 1 4")."""
    text: str = Field(max_length=MAX_TEXT_LENGTH)
    key: str = Field("", max_length=MAX_TEXT_LENGTH)


class DecodeResponse(BaseModel):
    """Decoded message as lines and as rendered text."""
    lines: list[str]
    text: str
    line_count: int
    key_length: int
