"""
This package contains the core domain models of the QR code action.

The domain layer holds the concepts the step works with, independent of the
host platform and of the encoding library.

Modules:
    exceptions.py: Defines the exception types for every failure the step can
                   report, from missing inputs to encoder errors.
    request.py: Contains `QRRequest`, the validated description of one
                generation request, and `EncodeOptions`, the option bag passed
                to the encoder.
"""
