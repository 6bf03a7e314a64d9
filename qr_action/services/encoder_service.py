"""
This module provides the encoder services that render a QR code image to disk.

The orchestrator only knows the narrow `QREncoder` interface: write `text` as a
QR code to `output_path` using the given `EncodeOptions`. `QRCodeFileEncoder`
implements it with the `qrcode` library, using Pillow for PNG output and the
library's SVG path factory for SVG output.
"""

from pathlib import Path

import qrcode
from loguru import logger
from PIL import Image
from qrcode.image.pil import PilImage
from qrcode.image.svg import SvgPathImage

from ..config.common import FALLBACK_SCALE
from ..domain.exceptions import EncodingException, QRActionException
from ..domain.request import EncodeOptions
from ..utils.format_utils import formatted_size


class QREncoder:
    """
    The encoder interface consumed by the orchestrator.

    Implementations must either write the complete image file or raise.
    """

    def encode(self, output_path: str, text: str, options: EncodeOptions):
        raise NotImplementedError("Subclasses must implement the encode() method.")


class QRCodeFileEncoder(QREncoder):
    """
    Renders QR codes with the `qrcode` library.

    Sizing follows the usual rule for QR image widths: when the requested width
    can hold the whole symbol including its quiet zone, the image is exactly
    that many pixels wide. Otherwise the width is ignored and each module is
    drawn `fallback_scale` pixels wide.
    """

    def __init__(
        self,
        error_correction: int = qrcode.constants.ERROR_CORRECT_M,
        fallback_scale: int = FALLBACK_SCALE,
    ):
        self.error_correction = error_correction
        self.fallback_scale = fallback_scale

    def encode(self, output_path: str, text: str, options: EncodeOptions):
        """
        Writes `text` as a QR code image to `output_path`.

        Raises:
            EncodingException: The library failed to build the symbol, or the
                               image could not be written.
        """
        try:
            if options.type == "svg":
                self._write_svg(output_path, text, options)
            else:
                self._write_png(output_path, text, options)
        except QRActionException:
            raise
        except Exception as e:
            raise EncodingException(str(e)) from e

        written = Path(output_path)
        if written.is_file():
            logger.debug(f"Wrote {formatted_size(written.stat().st_size)} to {written}")

    def _build(self, text: str, margin: int) -> qrcode.QRCode:
        qr = qrcode.QRCode(
            version=None,
            error_correction=self.error_correction,
            border=margin,
        )
        qr.add_data(text)
        qr.make(fit=True)
        return qr

    def pixel_width(self, modules_count: int, options: EncodeOptions) -> int:
        """
        Returns the final image width in pixels for a symbol of `modules_count`.
        """
        total_modules = modules_count + 2 * options.margin
        if options.width >= total_modules:
            return options.width
        logger.debug(
            f"Width {options.width} cannot hold {total_modules} modules. "
            f"Using {self.fallback_scale} pixels per module."
        )
        return total_modules * self.fallback_scale

    def _write_png(self, output_path: str, text: str, options: EncodeOptions):
        qr = self._build(text, options.margin)
        total_modules = qr.modules_count + 2 * options.margin
        width = self.pixel_width(qr.modules_count, options)

        # Render at the largest whole box size that fits, then scale to the exact width.
        qr.box_size = max(1, width // total_modules)
        image = qr.make_image(image_factory=PilImage).get_image()
        if image.size != (width, width):
            image = image.resize((width, width), Image.Resampling.NEAREST)
        image.save(output_path, format="PNG")

    def _write_svg(self, output_path: str, text: str, options: EncodeOptions):
        qr = self._build(text, options.margin)
        width = self.pixel_width(qr.modules_count, options)

        image = qr.make_image(image_factory=SvgPathImage)
        # viewBox stays in the library's units; only the rendered size changes.
        root = image.get_image()
        root.set("width", str(width))
        root.set("height", str(width))
        image.save(output_path)
