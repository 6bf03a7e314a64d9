"""
Main entry point for the QR code action.

`action.yml` runs this script on the runner. It parses the optional local
arguments, configures the logger, runs the generation pipeline once, and exits
with status 1 when the run was marked failed.
"""

import sys

from loguru import logger

from qr_action.cli import build_environ, get_args
from qr_action.config.common import LOGGER_FORMAT
from qr_action.pipeline.generate_pipeline import run
from qr_action.services.host_service import ActionsHost, workflow_command_sink


def configure_logger(level: str = "DEBUG", plain: bool = False):
    """
    Replaces loguru's default handler with the sink for this run.

    Workflow runs get the workflow command sink on stdout. `plain` switches to
    a formatted stderr sink for reading logs in a terminal.
    """
    logger.remove()
    if plain:
        logger.add(sys.stderr, level=level, format=LOGGER_FORMAT)
    else:
        logger.add(workflow_command_sink, level=level, format="{message}")


def main(argv=None) -> int:
    # Loading action.yml may warn, so the workflow sink must already be in place.
    configure_logger()
    args = get_args(argv)
    configure_logger(args.log_level, args.plain_log)

    host = ActionsHost(environ=build_environ(args))
    run(host=host)
    return 1 if host.failed else 0


if __name__ == "__main__":
    sys.exit(main())
