"""
Utilities Package for the QR code action.

Modules:
    - format_utils.py: Formats values such as file sizes for log messages.
"""
