"""Key Parsing & Validation: turns external key input into a checked shift sequence.

Invariants:
    - check_key accepts only int values (bool excluded) in [0, MAX_SHIFT]
    - parse_key separators are commas and/or whitespace; blank text is the empty key
    - Errors name the offending position or token
"""

import re

from vigenere_decoder.core.domain_types import MAX_SHIFT, Key
from vigenere_decoder.core.errors import ErrorContext, InvalidArgumentError

_SEPARATOR = re.compile(r"[\s,]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def check_key(key: Key) -> None:
    """Raise InvalidArgumentError unless every shift is an int in [0, MAX_SHIFT]."""
    if key is None:
        raise InvalidArgumentError("Key must not be None", argument="key")
    for position, shift in enumerate(key):
        if isinstance(shift, bool) or not isinstance(shift, int):
            raise InvalidArgumentError(
                f"Key value at position {position} must be an int, "
                f"got {type(shift).__name__}",
                argument="key",
                context=ErrorContext(key_length=len(key)),
            )
        if not 0 <= shift <= MAX_SHIFT:
            raise InvalidArgumentError(
                f"Key value {shift} at position {position} outside [0, {MAX_SHIFT}]",
                argument="key",
                context=ErrorContext(key_length=len(key)),
            )


def parse_key(text: str) -> tuple[int, ...]:
    """Parse "3,1,4" / "3 1 4" style key text into a validated tuple."""
    if text is None:
        raise InvalidArgumentError("Key text must not be None", argument="key")
    tokens = [t for t in _SEPARATOR.split(text.strip()) if t]
    for token in tokens:
        if not _INTEGER.fullmatch(token):
            raise InvalidArgumentError(
                f"Key token {token!r} is not an integer", argument="key",
            )
    key = tuple(int(token) for token in tokens)
    check_key(key)
    return key
