"""
This package contains the generation pipeline of the QR code action.

The pipeline orchestrates one invocation of the step: it reads and validates
the inputs, prepares the output directory, calls the encoder, and reports the
outcome to the host.
"""
