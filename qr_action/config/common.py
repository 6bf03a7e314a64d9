"""
Common configuration settings used throughout the QR code action.

This module centralizes the input names, their defaults, the message templates
reported to the host, and the logging format. It also loads the action metadata
file (`action.yml`) so that local command-line runs expose exactly the same
inputs, descriptions and defaults as the published action.
"""
from pathlib import Path
from typing import Dict, Optional

import yaml
from loguru import logger

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
ACTION_METADATA_PATH = PROJECT_ROOT / "action.yml"


# --- Input Names and Defaults ---
# Names are the keys the host platform uses to pass values into the step.

INPUT_TEXT = "text"
INPUT_OUTPUT_PATH = "output-path"
INPUT_WIDTH = "width"
INPUT_MARGIN = "margin"
INPUT_TYPE = "type"

DEFAULT_WIDTH = "256"
DEFAULT_MARGIN = "1"
DEFAULT_TYPE = "png"

# Case-sensitive; anything else is rejected.
ALLOWED_TYPES = ("png", "svg")

# The input table used when `action.yml` cannot be read.
BUILTIN_INPUTS: Dict[str, dict] = {
    INPUT_TEXT: {
        "description": "Text to encode in the QR code.",
        "required": True,
    },
    INPUT_OUTPUT_PATH: {
        "description": "Path of the image file to write.",
        "required": True,
    },
    INPUT_WIDTH: {
        "description": "Width of the image in pixels.",
        "required": False,
        "default": DEFAULT_WIDTH,
    },
    INPUT_MARGIN: {
        "description": "Quiet zone around the symbol, in modules.",
        "required": False,
        "default": DEFAULT_MARGIN,
    },
    INPUT_TYPE: {
        "description": "Image format, 'png' or 'svg'.",
        "required": False,
        "default": DEFAULT_TYPE,
    },
}


# --- Host Platform ---

# Environment variable prefix under which the runner passes inputs.
INPUT_ENV_PREFIX = "INPUT_"


# --- Report Messages ---

SUCCESS_MESSAGE = "QR code generated successfully at: {output_path}"
FAILURE_MESSAGE = "Failed to generate QR code: {message}"
UNKNOWN_ERROR_MESSAGE = "Unknown error"


# --- Encoder Settings ---

# Pixels per module used when the requested width cannot hold the symbol
# including its quiet zone.
FALLBACK_SCALE = 4


# --- Logging Configuration ---

# The format used for the human-readable stderr sink in local runs. Workflow
# runs use the workflow command sink instead.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def load_action_metadata(path: Optional[Path] = None) -> Dict[str, dict]:
    """
    Loads the `inputs` table from the action metadata file.

    Args:
        path: Location of the metadata file. Defaults to `action.yml` at the
              project root.

    Returns:
        A mapping of input name to its declaration (description, required,
        default). Falls back to `BUILTIN_INPUTS` when the file is missing,
        unreadable, or declares no inputs.
    """
    metadata_path = path or ACTION_METADATA_PATH
    if not metadata_path.is_file():
        logger.debug(f"Action metadata '{metadata_path}' not found. Using built-in inputs.")
        return dict(BUILTIN_INPUTS)

    try:
        with metadata_path.open("r", encoding="utf-8") as f:
            metadata = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{metadata_path}': {e}")
        return dict(BUILTIN_INPUTS)

    inputs = metadata.get("inputs") if isinstance(metadata, dict) else None
    if not isinstance(inputs, dict) or not inputs:
        logger.warning(f"'{metadata_path}' declares no inputs. Using built-in inputs.")
        return dict(BUILTIN_INPUTS)

    return {name: (decl or {}) for name, decl in inputs.items()}
