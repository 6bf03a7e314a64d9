"""
Defines the value objects that describe one QR code generation request.

A `QRRequest` is built fresh from the raw string inputs of a single invocation
and discarded when the invocation ends. Construction through `from_inputs`
validates the numeric and enum fields in a fixed order (width, margin, type),
so a request with several bad fields always reports the first one.
"""

import re
from dataclasses import dataclass
from typing import Optional

from ..config.common import ALLOWED_TYPES
from .exceptions import (
    InvalidMarginException,
    InvalidTypeException,
    InvalidWidthException,
)

_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int_prefix(raw_value: str) -> Optional[int]:
    """
    Parses the leading base-10 integer of a string.

    Leading whitespace and an optional sign are accepted, then the longest run
    of ASCII digits 0-9 is taken and anything after it is ignored. For example
    "42" and " 42px" both give 42, and "1.5" gives 1.

    Args:
        raw_value: The raw input string.

    Returns:
        The parsed integer, or None when the string does not start with a number.
    """
    match = _LEADING_INT_RE.match(raw_value)
    if not match:
        return None
    return int(match.group(1))


@dataclass(frozen=True)
class EncodeOptions:
    """The rendering options handed to the encoder."""

    type: str
    width: int
    margin: int


@dataclass(frozen=True)
class QRRequest:
    text: str
    output_path: str
    width: int
    margin: int
    type: str

    @classmethod
    def from_inputs(
        cls,
        text: str,
        output_path: str,
        width_input: str,
        margin_input: str,
        type_input: str,
    ) -> "QRRequest":
        """
        Validates the raw inputs and builds a request.

        Raises:
            InvalidWidthException: width is not a number or is <= 0.
            InvalidMarginException: margin is not a number or is < 0.
            InvalidTypeException: type is not exactly 'png' or 'svg'.
        """
        width = parse_int_prefix(width_input)
        if width is None or width <= 0:
            raise InvalidWidthException(width_input)

        margin = parse_int_prefix(margin_input)
        if margin is None or margin < 0:
            raise InvalidMarginException(margin_input)

        if type_input not in ALLOWED_TYPES:
            raise InvalidTypeException(type_input)

        return cls(
            text=text,
            output_path=output_path,
            width=width,
            margin=margin,
            type=type_input,
        )

    @property
    def options(self) -> EncodeOptions:
        return EncodeOptions(type=self.type, width=self.width, margin=self.margin)
