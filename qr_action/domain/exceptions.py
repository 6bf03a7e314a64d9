"""
Defines custom exception types for the QR code action.

Every failure the step can meet is expressed as one of these types, so the
orchestrator can catch them in one place and report a single message to the
host. The message of each exception is exactly the text that ends up after
`Failed to generate QR code: ` in the failure report.

All custom exceptions inherit from the base `QRActionException`.
"""


class QRActionException(Exception):
    """Base class for all custom exceptions in the QR code action."""

    pass


# --- Host Input Exceptions ---
class InputRequiredException(QRActionException):
    """Raised by the host when a required input was not supplied."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Input required and not supplied: {name}")


# --- Validation Exceptions ---
class InputValidationException(QRActionException):
    """
    Base class for exceptions raised while validating the step inputs.

    Each subclass keeps the raw, unparsed input string so the report can echo
    it back verbatim.
    """

    def __init__(self, raw_value: str, message: str):
        self.raw_value = raw_value
        super().__init__(message)


class InvalidWidthException(InputValidationException):
    """Raised when the width is not a number or is not positive."""

    def __init__(self, raw_value: str):
        super().__init__(
            raw_value, f"Invalid width: {raw_value}. Must be a positive integer."
        )


class InvalidMarginException(InputValidationException):
    """Raised when the margin is not a number or is negative."""

    def __init__(self, raw_value: str):
        super().__init__(
            raw_value, f"Invalid margin: {raw_value}. Must be a non-negative integer."
        )


class InvalidTypeException(InputValidationException):
    """Raised when the image type is anything other than 'png' or 'svg'."""

    def __init__(self, raw_value: str):
        super().__init__(raw_value, f"Invalid type: {raw_value}. Must be 'png' or 'svg'")


# --- Encoding Exceptions ---
class EncodingException(QRActionException):
    """
    Raised when the encoder fails to render or write the image.

    Wraps whatever the underlying library or the filesystem raised. The
    original exception is chained as `__cause__`.
    """

    pass
