"""Shift Cipher: pure decoding of the repeating-key additive ASCII shift.

Invariants:
    - decode_line is PURE: same line + key always yields the same output
    - Public functions validate the key with check_key before any arithmetic
    - Key index restarts at 0 on every line and advances once per character
    - A negative difference is wrapped by a single +ASCII_SIZE, never by modulo
    - decode_message builds every line before creating the result Message,
      so a failure yields no partial output

Design Decisions:
    - Functions, not a class: MessageDecoder owns the one-shot lifecycle and
      delegates the arithmetic here
"""

import logging

from vigenere_decoder.core.domain_types import ASCII_SIZE, CharCode, Key, Shift
from vigenere_decoder.core.errors import ErrorContext, InvalidArgumentError
from vigenere_decoder.core.key_parsing import check_key
from vigenere_decoder.core.message import Message

logger = logging.getLogger(__name__)


def unshift_code(code: CharCode, shift: Shift) -> CharCode:
    """Reverse one shift. Wraps once into the ASCII space when negative."""
    decoded = code - shift
    if decoded < 0:
        decoded += ASCII_SIZE
    return CharCode(decoded)


def decode_line(line: str, key: Key) -> str:
    """Decode one line, cycling through the key from its first value."""
    if line is None:
        raise InvalidArgumentError("Line must not be None", argument="line")
    check_key(key)
    return _decode_checked_line(line, key)


def decode_message(message: Message, key: Key) -> Message:
    """Decode every line of message with key into a new Message."""
    if message is None:
        raise InvalidArgumentError("Message must not be None", argument="message")
    check_key(key)

    decoded_lines = []
    for index, line in enumerate(message):
        try:
            decoded_lines.append(_decode_checked_line(line, key))
        except InvalidArgumentError as exc:
            exc.context.line_index = index
            raise
    logger.debug(
        "Decoded message",
        extra={"line_count": len(decoded_lines), "key_length": len(key)},
    )
    return Message(decoded_lines)


def _decode_checked_line(line: str, key: Key) -> str:
    # key already passed check_key
    if line and len(key) == 0:
        raise InvalidArgumentError(
            "Key must not be empty when decoding a non-empty line",
            argument="key",
            context=ErrorContext(key_length=0),
        )

    decoded = []
    key_index = 0
    for ch in line:
        decoded.append(chr(unshift_code(ord(ch), key[key_index])))
        key_index = (key_index + 1) % len(key)
    return "".join(decoded)
