"""Error Handlers: each error kind renders through DecoderError.to_response()."""

import json
import logging

from fastapi.exceptions import RequestValidationError
from starlette.requests import Request

from vigenere_decoder.api.error_handlers import (
    decoder_error_handler, generic_error_handler, validation_error_handler,
)
from vigenere_decoder.core.errors import (
    ErrorContext, InvalidArgumentError, InvalidStateError, OutOfRangeError,
)


def _request(path: str = "/api/v1/decode") -> Request:
    return Request({
        "type": "http", "method": "POST", "path": path,
        "query_string": b"", "headers": [],
    })


async def test_invalid_state_maps_to_409():
    res = await decoder_error_handler(
        _request(), InvalidStateError("Message is already decoded", state="decoded"),
    )
    assert res.status_code == 409
    error = json.loads(res.body)["error"]
    assert error["code"] == "INVALID_STATE"
    assert error["category"] == "state"


async def test_out_of_range_maps_to_400():
    res = await decoder_error_handler(_request(), OutOfRangeError(4, 2))
    assert res.status_code == 400
    error = json.loads(res.body)["error"]
    assert error["code"] == "OUT_OF_RANGE"
    assert error["category"] == "range"


async def test_decoder_error_logs_context(caplog):
    err = InvalidArgumentError(
        "Key must not be empty", argument="key",
        context=ErrorContext(line_index=2, key_length=0),
    )
    with caplog.at_level(logging.INFO, logger="vigenere_decoder.api.error_handlers"):
        res = await decoder_error_handler(_request(), err)
    assert json.loads(res.body)["error"]["context"] == {"line_index": 2, "key_length": 0}
    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert record.error_code == "INVALID_ARGUMENT"
    assert record.line_index == 2
    assert record.key_length == 0
    assert record.path == "/api/v1/decode"


async def test_invalid_state_logs_as_warning(caplog):
    with caplog.at_level(logging.INFO, logger="vigenere_decoder.api.error_handlers"):
        await decoder_error_handler(
            _request(), InvalidStateError("Message is not decoded yet", state="pending"),
        )
    assert caplog.records[-1].levelno == logging.WARNING


async def test_validation_error_envelope():
    exc = RequestValidationError([
        {"loc": ("body", "key", 0), "msg": "Input should be a valid integer", "type": "int_type"},
    ])
    res = await validation_error_handler(_request(), exc)
    assert res.status_code == 400
    error = json.loads(res.body)["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["category"] == "validation"
    assert error["details"] == [
        {"field": "body.key.0", "message": "Input should be a valid integer", "type": "int_type"},
    ]


async def test_generic_error_hides_internals():
    res = await generic_error_handler(_request(), KeyError("secret detail"))
    assert res.status_code == 500
    error = json.loads(res.body)["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["severity"] == "critical"
    assert "secret" not in res.body.decode()
