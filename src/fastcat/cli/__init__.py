"""Command-line interface for fastcat.

fastcat prints files to the terminal with syntax highlighting, aligned CSV
tables, rainbow CSV columns and re-aligned markdown tables.

Environment Variable Support
----------------------------
All rendering options support environment variable defaults using the pattern
FASTCAT_<OPTION_NAME> where option names are converted to uppercase with
hyphens replaced by underscores. CLI arguments always override environment
variables, and environment variables override the configuration file.

Examples
--------
Highlight a source file::

    $ fastcat main.cpp

Show line numbers and the vim theme::

    $ fastcat -n --theme script.py

Align a CSV file as a boxed table::

    $ fastcat --align-csv data.csv

Rainbow columns for the first 100 rows::

    $ fastcat --rainbowcsv --max-table-rows 100 data.csv

Read markdown from stdin; a markdown profile aligns its tables::

    $ cat README.md | fastcat -s md

Use environment variables for defaults::

    $ export FASTCAT_THEME=true
    $ export FASTCAT_LINENUMBER=1
    $ fastcat *.py

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys

from fastcat.cli.builder import (
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    build_render_options,
    create_parser,
    get_exit_code_for_exception,
)
from fastcat.cli.config import load_config_file
from fastcat.cli.processors import process_inputs
from fastcat.constants import ENV_PREFIX
from fastcat.exceptions import FastcatError
from fastcat.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    configure_logging(
        parsed_args.log_level,
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
        verbose=parsed_args.verbose,
    )


def _silence_stdout() -> None:
    # Python flushes stdout at exit; point it at devnull so a closed pipe
    # does not produce a second BrokenPipeError.
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        # stdout is not backed by a file descriptor (e.g. captured in tests)
        pass
    finally:
        os.close(devnull)


def main(args: list[str] | None = None) -> int:
    """Execute the fastcat command line and return the exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    config_path = parsed_args.config or os.environ.get(f"{ENV_PREFIX}CONFIG")
    config = {}
    try:
        if config_path:
            logger.debug(f"Loading configuration from {config_path}")
            config = load_config_file(config_path)
        options = build_render_options(parsed_args, config)
    except (argparse.ArgumentTypeError, FastcatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        return process_inputs(parsed_args, options)
    except BrokenPipeError:
        _silence_stdout()
        return EXIT_SUCCESS
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.debug("Unexpected error", exc_info=True)
        return get_exit_code_for_exception(e)


if __name__ == "__main__":
    sys.exit(main())
