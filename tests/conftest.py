"""Shared fixtures: in-memory host and encoder fakes, and a clean environment."""

import os
import sys

import pytest
from loguru import logger

from qr_action.domain.exceptions import InputRequiredException
from qr_action.services.encoder_service import QREncoder
from qr_action.services.host_service import Host


class FakeHost(Host):
    """Host backed by a dict of inputs that records every report."""

    def __init__(self, inputs=None):
        self.inputs = dict(inputs or {})
        self.input_calls = []
        self.debug_messages = []
        self.info_messages = []
        self.failures = []

    def get_input(self, name, required=False):
        self.input_calls.append((name, required))
        value = self.inputs.get(name, "")
        if required and not value:
            raise InputRequiredException(name)
        return value

    def debug(self, message):
        self.debug_messages.append(message)

    def info(self, message):
        self.info_messages.append(message)

    def set_failed(self, message):
        self.failures.append(message)


class RecordingEncoder(QREncoder):
    """Encoder that records its calls and optionally raises instead of writing."""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def encode(self, output_path, text, options):
        self.calls.append((output_path, text, options))
        if self.error is not None:
            raise self.error


@pytest.fixture
def valid_inputs():
    return {
        "text": "https://example.com",
        "output-path": "qrcode.png",
        "width": "256",
        "margin": "1",
        "type": "png",
    }


@pytest.fixture
def fake_host(valid_inputs):
    return FakeHost(valid_inputs)


@pytest.fixture
def encoder():
    return RecordingEncoder()


@pytest.fixture(autouse=True)
def clean_input_env(monkeypatch):
    """Removes any INPUT_* variables the surrounding runner may have set."""
    for key in list(os.environ):
        if key.startswith("INPUT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def restore_logger():
    """Puts back a stderr handler after a test that reconfigures loguru."""
    yield
    logger.remove()
    # Resolve sys.stderr per message so later captures still see the output.
    logger.add(lambda message: sys.stderr.write(message), level="DEBUG")
