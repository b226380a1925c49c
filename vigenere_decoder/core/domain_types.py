"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - Character codes live in the 7-bit ASCII space [0, ASCII_SIZE)
    - A shift is valid in [0, MAX_SHIFT]; one wrap of +ASCII_SIZE absorbs any such shift
    - Decoder lifecycle encoded as an Enum, no None sentinels

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from collections.abc import Sequence
from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

CharCode = NewType("CharCode", int)     # 0–127
Shift = NewType("Shift", int)           # 0–MAX_SHIFT

Key = Sequence[int]


# ─── Constants ───────────────────────────────────────────────────

ASCII_SIZE: int = 128
MAX_SHIFT: int = 128


# ─── Enums ───────────────────────────────────────────────────────

class DecoderState(str, Enum):
    """Decoder lifecycle. PENDING -> DECODED is the only transition."""
    PENDING = "pending"
    DECODED = "decoded"
