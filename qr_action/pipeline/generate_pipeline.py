"""
The generation pipeline: one invocation of the step from inputs to outcome.

`QRCodePipeline` reads the inputs from a `Host`, validates them into a
`QRRequest`, prepares the output directory, calls the `QREncoder`, and reports
success or the first failure back to the host.
"""

import os
from pathlib import Path
from typing import Optional

from loguru import logger

from ..config.common import (
    DEFAULT_MARGIN,
    DEFAULT_TYPE,
    DEFAULT_WIDTH,
    FAILURE_MESSAGE,
    INPUT_MARGIN,
    INPUT_OUTPUT_PATH,
    INPUT_TEXT,
    INPUT_TYPE,
    INPUT_WIDTH,
    SUCCESS_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
)
from ..domain.request import QRRequest
from ..services.encoder_service import QRCodeFileEncoder, QREncoder
from ..services.host_service import ActionsHost, Host


class QRCodePipeline:
    """
    Runs one QR code generation from host inputs to a reported outcome.

    The pipeline reads the inputs, validates them, makes sure the destination
    directory exists, hands the request to the encoder, and reports either
    success or a single failure message through the host. It never raises for
    any of these steps; every failure ends up in `host.set_failed()`.
    """

    def __init__(self, host: Host, encoder: QREncoder):
        self.host = host
        self.encoder = encoder

    def read_request(self) -> QRRequest:
        """Fetches the inputs, applying defaults, and validates them."""
        text = self.host.get_input(INPUT_TEXT, required=True)
        output_path = self.host.get_input(INPUT_OUTPUT_PATH, required=True)
        return QRRequest.from_inputs(
            text=text,
            output_path=output_path,
            width_input=self.host.get_input(INPUT_WIDTH) or DEFAULT_WIDTH,
            margin_input=self.host.get_input(INPUT_MARGIN) or DEFAULT_MARGIN,
            type_input=self.host.get_input(INPUT_TYPE) or DEFAULT_TYPE,
        )

    @staticmethod
    def ensure_output_dir(output_path: str):
        """Creates the parent directory of `output_path` and any missing ancestors."""
        output_dir = os.path.dirname(output_path)
        if output_dir and output_dir != ".":
            Path(output_dir).mkdir(parents=True, exist_ok=True)

    def run(self):
        """Generates the QR code once and reports the outcome to the host."""
        try:
            request = self.read_request()

            self.host.debug(f"Generating QR code for text: {request.text}")
            self.host.debug(f"Output path: {request.output_path}")
            self.host.debug(
                f"Width: {request.width}, Margin: {request.margin}, Type: {request.type}"
            )

            self.ensure_output_dir(request.output_path)
            self.encoder.encode(request.output_path, request.text, request.options)

            self.host.info(SUCCESS_MESSAGE.format(output_path=request.output_path))
        except Exception as e:
            logger.debug(f"QR code generation stopped by {type(e).__name__}")
            self.host.set_failed(FAILURE_MESSAGE.format(message=str(e) or UNKNOWN_ERROR_MESSAGE))


def run(host: Optional[Host] = None, encoder: Optional[QREncoder] = None) -> Host:
    """
    Runs the step once and returns the host it reported to.

    Args:
        host: Where inputs come from and outcomes go. Defaults to an
              `ActionsHost` reading the process environment.
        encoder: The image encoder. Defaults to `QRCodeFileEncoder`.
    """
    host = host if host is not None else ActionsHost()
    encoder = encoder if encoder is not None else QRCodeFileEncoder()
    QRCodePipeline(host, encoder).run()
    return host
