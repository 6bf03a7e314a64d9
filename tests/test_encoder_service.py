"""Tests for the qrcode-backed encoder. These write real image files."""

import xml.etree.ElementTree as ET

import pytest
import qrcode
from PIL import Image

from qr_action.domain.exceptions import EncodingException
from qr_action.domain.request import EncodeOptions
from qr_action.services.encoder_service import QRCodeFileEncoder, QREncoder

TEXT = "https://example.com"


def _modules_count(text, margin):
    qr = qrcode.QRCode(error_correction=qrcode.constants.ERROR_CORRECT_M, border=margin)
    qr.add_data(text)
    qr.make(fit=True)
    return qr.modules_count


@pytest.mark.parametrize("width, margin", [(256, 1), (300, 0), (100, 4)])
def test_png_has_exact_requested_width(tmp_path, width, margin):
    output_path = tmp_path / "qr.png"

    QRCodeFileEncoder().encode(str(output_path), TEXT, EncodeOptions("png", width, margin))

    with Image.open(output_path) as image:
        assert image.format == "PNG"
        assert image.size == (width, width)


def test_png_falls_back_to_fixed_scale_when_width_is_too_small(tmp_path):
    output_path = tmp_path / "qr.png"
    total_modules = _modules_count(TEXT, 1) + 2

    QRCodeFileEncoder().encode(str(output_path), TEXT, EncodeOptions("png", 10, 1))

    with Image.open(output_path) as image:
        assert image.size == (total_modules * 4, total_modules * 4)


def test_pixel_width_rule():
    encoder = QRCodeFileEncoder(fallback_scale=3)

    assert encoder.pixel_width(21, EncodeOptions("png", 23, 1)) == 23
    assert encoder.pixel_width(21, EncodeOptions("png", 22, 1)) == 69


def test_svg_is_markup_with_requested_width(tmp_path):
    output_path = tmp_path / "qr.svg"

    QRCodeFileEncoder().encode(str(output_path), TEXT, EncodeOptions("svg", 256, 1))

    root = ET.parse(output_path).getroot()
    assert root.tag.endswith("svg")
    assert root.get("width") == "256"
    assert root.get("height") == "256"
    assert root.get("viewBox")


def test_missing_directory_is_an_encoding_error(tmp_path):
    output_path = tmp_path / "missing" / "qr.png"

    with pytest.raises(EncodingException) as exc_info:
        QRCodeFileEncoder().encode(str(output_path), TEXT, EncodeOptions("png", 256, 1))

    assert isinstance(exc_info.value.__cause__, OSError)
    assert str(exc_info.value)


def test_oversized_text_is_an_encoding_error(tmp_path):
    output_path = tmp_path / "qr.png"

    with pytest.raises(EncodingException):
        QRCodeFileEncoder().encode(str(output_path), "x" * 5000, EncodeOptions("png", 256, 1))

    assert not output_path.exists()


def test_base_encoder_is_abstract():
    with pytest.raises(NotImplementedError):
        QREncoder().encode("qr.png", TEXT, EncodeOptions("png", 256, 1))
