"""Message Decoder: one-shot decoder holding an encoded Message and its key.

Invariants:
    - State is PENDING until decode() succeeds, then DECODED for good
    - decode() on a DECODED decoder raises InvalidStateError; the first result stays
    - Decoded results are only readable in DECODED state, and the same Message
      object is returned on every call
    - A zero-line source decodes to an empty Message and resets the key to ()
    - A failed decode() leaves the decoder PENDING with no result stored
    - Source Message and key are held by reference, never copied

Design Decisions:
    - Explicit DecoderState tag instead of a None "not yet decoded" sentinel
    - Arithmetic delegated to shift_cipher.decode_message (pure)
"""

import logging

from vigenere_decoder.core.domain_types import DecoderState, Key
from vigenere_decoder.core.errors import InvalidArgumentError, InvalidStateError
from vigenere_decoder.core.key_parsing import check_key
from vigenere_decoder.core.message import Message
from vigenere_decoder.core.shift_cipher import decode_message

logger = logging.getLogger(__name__)


class MessageDecoder:
    """Decodes one Message with one numeric key, exactly once."""

    def __init__(self, message: Message, key: Key):
        if message is None:
            raise InvalidArgumentError("Message must not be None", argument="message")
        if key is None:
            raise InvalidArgumentError("Key must not be None", argument="key")
        check_key(key)
        self._message = message
        self._key = key
        self._state = DecoderState.PENDING
        self._decoded: Message | None = None

    @property
    def state(self) -> DecoderState:
        return self._state

    @property
    def is_decoded(self) -> bool:
        return self._state is DecoderState.DECODED

    @property
    def message(self) -> Message:
        return self._message

    @property
    def key(self) -> Key:
        return self._key

    def decode(self) -> Message:
        """Decode the source message. Allowed once per instance."""
        if self._state is DecoderState.DECODED:
            raise InvalidStateError(
                "Message is already decoded", state=self._state.value,
            )

        if self._message.line_count() == 0:
            decoded = Message()
            self._key = ()
        else:
            decoded = decode_message(self._message, self._key)

        self._decoded = decoded
        self._state = DecoderState.DECODED
        logger.debug(
            "Decoder state changed",
            extra={"state": self._state.value, "line_count": decoded.line_count()},
        )
        return decoded

    def get_decoded_message(self) -> Message:
        self._require_decoded()
        return self._decoded

    def get_decoded_message_as_text(self) -> str:
        self._require_decoded()
        return str(self._decoded)

    def _require_decoded(self) -> None:
        if self._state is not DecoderState.DECODED:
            raise InvalidStateError(
                "Message is not decoded yet", state=self._state.value,
            )
