"""Key Parsing & Validation: text keys and range checks."""

import pytest

from vigenere_decoder.core.domain_types import MAX_SHIFT
from vigenere_decoder.core.errors import InvalidArgumentError
from vigenere_decoder.core.key_parsing import check_key, parse_key


@pytest.mark.parametrize("text", ["3,1,4", "3 1 4", "3, 1, 4", " 3\t1\n4 ", "3,,1,4"])
def test_parse_key_separators(text):
    assert parse_key(text) == (3, 1, 4)


def test_parse_key_blank_is_empty():
    assert parse_key("") == ()
    assert parse_key("   ") == ()


def test_parse_key_single_value():
    assert parse_key("13") == (13,)


def test_parse_key_accepts_bounds():
    assert parse_key(f"0 {MAX_SHIFT}") == (0, MAX_SHIFT)


@pytest.mark.parametrize("text", ["3,a,4", "1.5", "0x10", "--1"])
def test_parse_key_rejects_non_integers(text):
    with pytest.raises(InvalidArgumentError) as exc_info:
        parse_key(text)
    assert exc_info.value.argument == "key"


@pytest.mark.parametrize("text", ["-1", f"{MAX_SHIFT + 1}", "1 2 500"])
def test_parse_key_rejects_out_of_range(text):
    with pytest.raises(InvalidArgumentError):
        parse_key(text)


def test_parse_key_none_rejected():
    with pytest.raises(InvalidArgumentError):
        parse_key(None)


def test_check_key_accepts_empty():
    check_key([])
    check_key(())


def test_check_key_accepts_valid_values():
    check_key([0, 1, 64, 127, MAX_SHIFT])


@pytest.mark.parametrize("key", [[True], [1, "2"], [1.0], [None]])
def test_check_key_rejects_non_int(key):
    with pytest.raises(InvalidArgumentError):
        check_key(key)


def test_check_key_reports_position():
    with pytest.raises(InvalidArgumentError) as exc_info:
        check_key([1, 2, 300])
    assert "position 2" in exc_info.value.message
    assert exc_info.value.context.key_length == 3


def test_check_key_none_rejected():
    with pytest.raises(InvalidArgumentError):
        check_key(None)
