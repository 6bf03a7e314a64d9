"""
This module provides the host platform capabilities the step depends on.

The orchestrator never touches the environment or stdout directly. Instead it
is handed a `Host`, a small interface with four operations: reading a named
input, and reporting a debug trace, an info message, or a failure. The
`ActionsHost` implementation talks to a GitHub Actions runner: inputs come from
`INPUT_<NAME>` environment variables and messages travel through loguru, whose
`workflow_command_sink` renders them as workflow commands on stdout.
"""

import os
import sys
from typing import Mapping, Optional

from loguru import logger

from ..config.common import INPUT_ENV_PREFIX
from ..domain.exceptions import InputRequiredException


class Host:
    """
    The capability interface the orchestrator consumes.

    Subclasses decide where inputs come from and where messages go. Tests
    substitute an in-memory implementation.
    """

    def get_input(self, name: str, required: bool = False) -> str:
        raise NotImplementedError("Subclasses must implement get_input().")

    def debug(self, message: str):
        raise NotImplementedError("Subclasses must implement debug().")

    def info(self, message: str):
        raise NotImplementedError("Subclasses must implement info().")

    def set_failed(self, message: str):
        raise NotImplementedError("Subclasses must implement set_failed().")


class ActionsHost(Host):
    """
    Host implementation for a GitHub Actions runner.

    Attributes:
        environ: The mapping inputs are read from. Defaults to `os.environ`.
        failed: True once `set_failed()` has been called. The entry point turns
                this into exit code 1.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ
        self.failed = False

    @staticmethod
    def input_env_name(name: str) -> str:
        """
        Returns the environment variable name the runner uses for an input.

        Spaces become underscores and the name is upper-cased. Hyphens are kept,
        so `output-path` is read from `INPUT_OUTPUT-PATH`.
        """
        return f"{INPUT_ENV_PREFIX}{name.replace(' ', '_').upper()}"

    def get_input(self, name: str, required: bool = False) -> str:
        """
        Reads an input value, stripped of surrounding whitespace.

        Raises:
            InputRequiredException: `required` is set and the value is empty.
        """
        value = self.environ.get(self.input_env_name(name), "")
        if required and not value:
            raise InputRequiredException(name)
        return value.strip()

    def debug(self, message: str):
        logger.debug(message)

    def info(self, message: str):
        logger.info(message)

    def set_failed(self, message: str):
        self.failed = True
        logger.error(message)


def escape_command_data(data: str) -> str:
    """Escapes a message so it survives as workflow command data."""
    return data.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def workflow_command_sink(message):
    """
    A loguru sink that writes records as GitHub Actions workflow commands.

    DEBUG and TRACE records become `::debug::` commands, which the runner only
    shows when step debugging is enabled. INFO and SUCCESS records are written
    as plain lines. WARNING and ERROR records become `::warning::` and
    `::error::` annotations.
    """
    record = message.record
    text = record["message"]
    level_no = record["level"].no

    if level_no < logger.level("INFO").no:
        line = f"::debug::{escape_command_data(text)}"
    elif level_no < logger.level("WARNING").no:
        line = text
    elif level_no < logger.level("ERROR").no:
        line = f"::warning::{escape_command_data(text)}"
    else:
        line = f"::error::{escape_command_data(text)}"

    sys.stdout.write(line + "\n")
    sys.stdout.flush()
