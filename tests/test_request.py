import pytest

from qr_action.domain.exceptions import (
    InputValidationException,
    InvalidMarginException,
    InvalidTypeException,
    InvalidWidthException,
)
from qr_action.domain.request import EncodeOptions, QRRequest, parse_int_prefix


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("256", 256),
        ("  42", 42),
        ("+7", 7),
        ("-100", -100),
        ("12px", 12),
        ("1.5", 1),
        ("007", 7),
        ("not-a-number", None),
        ("", None),
        ("px12", None),
        ("-", None),
        ("١٢", None),
        ("１２", None),
    ],
)
def test_parse_int_prefix(raw, expected):
    assert parse_int_prefix(raw) == expected


def test_from_inputs_builds_request():
    request = QRRequest.from_inputs("hello", "out/qr.svg", "300", "0", "svg")

    assert request == QRRequest("hello", "out/qr.svg", 300, 0, "svg")
    assert request.options == EncodeOptions(type="svg", width=300, margin=0)


def test_invalid_width_keeps_raw_value():
    with pytest.raises(InvalidWidthException) as exc_info:
        QRRequest.from_inputs("t", "p", "wide", "1", "png")

    assert exc_info.value.raw_value == "wide"
    assert str(exc_info.value) == "Invalid width: wide. Must be a positive integer."
    assert isinstance(exc_info.value, InputValidationException)


def test_invalid_margin_message():
    with pytest.raises(InvalidMarginException, match=r"^Invalid margin: -5\. Must be a non-negative integer\.$"):
        QRRequest.from_inputs("t", "p", "256", "-5", "png")


def test_invalid_type_message_has_no_trailing_period():
    with pytest.raises(InvalidTypeException) as exc_info:
        QRRequest.from_inputs("t", "p", "256", "1", "jpeg")

    assert str(exc_info.value) == "Invalid type: jpeg. Must be 'png' or 'svg'"


def test_width_is_checked_before_margin_and_type():
    with pytest.raises(InvalidWidthException):
        QRRequest.from_inputs("t", "p", "-1", "-1", "gif")
