"""
Configuration Package for the QR code action.

This package centralizes the static configuration of the step: input names and
their defaults, the allowed image types, the messages reported to the host, and
the logging format. It also reads the action metadata (`action.yml`) so local
runs share the published input declarations.
"""
