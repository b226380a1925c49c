"""Domain Types: verifies constants and the decoder lifecycle enum.

Tests:
    - ASCII space and shift bound are consistent with the single-wrap rule
    - DecoderState has exactly two members and serializes to string values
"""

from vigenere_decoder.core.domain_types import (
    ASCII_SIZE, MAX_SHIFT, CharCode, Shift, DecoderState,
)


def test_ascii_space_is_seven_bit():
    assert ASCII_SIZE == 128


def test_max_shift_is_absorbed_by_one_wrap():
    # worst case: code 0 with the largest shift lands back in range
    assert 0 - MAX_SHIFT + ASCII_SIZE >= 0


def test_value_types_wrap_int():
    assert CharCode(65) == 65
    assert Shift(3) == 3


def test_decoder_state_has_two_states():
    assert set(DecoderState) == {DecoderState.PENDING, DecoderState.DECODED}


def test_decoder_state_values():
    assert DecoderState.PENDING.value == "pending"
    assert DecoderState.DECODED.value == "decoded"
    assert DecoderState("decoded") is DecoderState.DECODED
