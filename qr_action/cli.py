"""
Command-Line Interface (CLI) setup for the QR code action.

Inside a workflow the step takes no arguments and reads its inputs from the
runner's environment. For local runs every input declared in `action.yml` is
also available as an option (`--text`, `--output-path`, ...). Options that are
given are layered over the environment as `INPUT_<NAME>` variables, so both
paths go through the same host code.
"""
import argparse
import os
from typing import Dict, List, Mapping, Optional

from .config.common import load_action_metadata
from .services.host_service import ActionsHost


def _dest(input_name: str) -> str:
    return input_name.replace("-", "_").replace(" ", "_")


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for the QR code action.

    Args:
        argv: Arguments to parse. Defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: The parsed options. `input_names` lists the inputs
                            the parser knows about.
    """
    parser = argparse.ArgumentParser(description="Generate a QR code image file.")

    inputs = load_action_metadata()
    for name, declaration in inputs.items():
        help_text = declaration.get("description", "")
        if "default" in declaration:
            help_text = f"{help_text} (default: {declaration['default']})"
        parser.add_argument(f"--{name}", dest=_dest(name), default=None, help=help_text)

    parser.add_argument(
        "--log-level", type=str, default="DEBUG", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Lowest level written to the log."
    )
    parser.add_argument(
        "--plain-log", action="store_true",
        help="Write human-readable logs to stderr instead of workflow commands."
    )

    args = parser.parse_args(argv)
    args.input_names = list(inputs)
    return args


def build_environ(args: argparse.Namespace, base: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Returns `base` (the process environment by default) with every input given
    on the command line set as its `INPUT_<NAME>` variable.
    """
    environ = dict(os.environ if base is None else base)
    for name in args.input_names:
        value = getattr(args, _dest(name), None)
        if value is not None:
            environ[ActionsHost.input_env_name(name)] = value
    return environ
