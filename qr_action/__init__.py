"""
QR code generation step for GitHub Actions workflows.

The step reads its inputs from the runner, writes a PNG or SVG QR code to the
requested path, and reports success or a failure message back to the workflow.
The usual entry point is `qr_action.pipeline.generate_pipeline.run`.
"""

__version__ = "1.0.0"
