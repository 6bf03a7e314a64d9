"""
Services Package for the QR code action.

A service here is a replaceable collaborator of the orchestrator:

- **Host Service (`Host`, `ActionsHost`):**
  Reads the step inputs and reports debug traces, info messages and failures
  to the automation platform.

- **Encoder Service (`QREncoder`, `QRCodeFileEncoder`):**
  Renders the QR code image and writes it to disk.

Both are passed into the pipeline rather than looked up globally, so tests can
swap in in-memory fakes.
"""
