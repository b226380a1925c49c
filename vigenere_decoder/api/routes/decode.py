"""Decode Routes: HTTP entry points that build a Message and key and run the decoder.

Invariants:
    - A fresh Message and MessageDecoder per request, nothing shared between requests
    - Domain failures raise DecoderError subclasses; the global handler renders them
    - Response carries the key length after decoding (0 for an empty message)
"""

import logging

from fastapi import APIRouter, status

from vigenere_decoder.core.decoder import MessageDecoder
from vigenere_decoder.core.key_parsing import parse_key
from vigenere_decoder.core.message import Message
from vigenere_decoder.schemas.decode import (
    DecodeRequest, DecodeResponse, TextDecodeRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/decode", tags=["decode"])


@router.post("", response_model=DecodeResponse, status_code=status.HTTP_200_OK)
async def decode_lines(body: DecodeRequest):
    """Decode a message given as a list of lines and a list of shifts."""
    return _run_decoder(Message(body.lines), body.key)


@router.post("/text", response_model=DecodeResponse, status_code=status.HTTP_200_OK)
async def decode_text(body: TextDecodeRequest):
    """Decode a text block with a key written as text."""
    return _run_decoder(Message.from_text(body.text), parse_key(body.key))


def _run_decoder(message: Message, key: list[int] | tuple[int, ...]) -> DecodeResponse:
    decoder = MessageDecoder(message, key)
    decoded = decoder.decode()
    logger.info(
        "Message decoded",
        extra={"line_count": decoded.line_count(), "key_length": len(decoder.key)},
    )
    return DecodeResponse(
        lines=list(decoded.lines),
        text=decoder.get_decoded_message_as_text(),
        line_count=decoded.line_count(),
        key_length=len(decoder.key),
    )
