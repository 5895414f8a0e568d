"""Entry point for the ``todo`` command."""

import logging
import sys

from todo_app.cli import run_cli
from todo_app.config import load_config
from todo_app.logging_setup import setup_logging


def main() -> None:
    """Load config, set up logging and run the requested command."""
    config = load_config()
    console_level = getattr(logging, config.log_level.upper(), logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(log_file=config.log_file, console_level=console_level)
    sys.exit(run_cli(sys.argv[1:], config=config))


if __name__ == "__main__":
    main()
