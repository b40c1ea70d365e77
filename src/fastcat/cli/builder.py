#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Argument parser construction and option assembly for the fastcat CLI.

Render options are generated from the :class:`~fastcat.options.RenderOptions`
dataclass: each field's ``cli_name`` metadata becomes the long flag, with
``cli_aliases`` adding short or alternate spellings. Option arguments default
to ``None`` so that only values actually supplied on the command line (or
through ``FASTCAT_<DEST>`` environment variables) override the config file.
"""

import argparse
import logging
from dataclasses import fields
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict, Type, get_type_hints

from fastcat.cli.actions import DynamicVersionAction, create_env_aware_argument, non_negative_int
from fastcat.exceptions import FileError, RenderingError, ValidationError
from fastcat.options import RenderOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7


def get_version() -> str:
    """Get the installed version of fastcat."""
    try:
        return version("fastcat")
    except PackageNotFoundError:
        from fastcat import __version__

        return __version__


def option_dest(field) -> str:
    """Return the argparse destination for an options dataclass field."""
    return field.metadata.get("cli_name", field.name).replace("-", "_")


def add_options_class_arguments(parser: argparse.ArgumentParser, options_class: Type = RenderOptions) -> None:
    """Add one argument per field of an options dataclass.

    Parameters
    ----------
    parser : ArgumentParser
        Parser (or argument group) to add arguments to
    options_class : type, default RenderOptions
        Options dataclass whose fields carry ``help`` and ``cli_name`` metadata

    """
    hints = get_type_hints(options_class)
    for field in fields(options_class):
        metadata = field.metadata
        flags = [f"--{metadata.get('cli_name', field.name.replace('_', '-'))}", *metadata.get("cli_aliases", ())]
        kwargs: Dict[str, Any] = {"dest": option_dest(field), "default": None, "help": metadata.get("help")}

        field_type = hints[field.name]
        if field_type is bool:
            kwargs["action"] = "store_true"
        elif field_type is int:
            kwargs["type"] = non_negative_int
            kwargs["help"] = f"{kwargs['help']} (default: {field.default})"
        if "metavar" in metadata:
            kwargs["metavar"] = metadata["metavar"]

        create_env_aware_argument(parser, *flags, **kwargs)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fastcat",
        description="Print files with syntax highlighting, aligned CSV tables and markdown table formatting",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Supported syntaxes:
  C/C++ (.c .h .cpp .hpp .cxx .hxx .cc .hh), Python (.py .pyw),
  Markdown (.md .markdown), JSON (.json)

Examples:
  fastcat main.c
  fastcat -n script.py
  fastcat --align-csv data.csv
  fastcat --rainbowcsv --max-table-rows 50 data.csv
  fastcat --md-table README.md
  cat notes.txt | fastcat -s md
  fastcat --config .fastcat.toml data.json

Environment variables:
  FASTCAT_<OPTION> sets a default for any option, for example
  FASTCAT_THEME=1 or FASTCAT_MAX_TABLE_ROWS=100. FASTCAT_CONFIG names a
  configuration file. Command-line flags take precedence.
""",
    )

    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to display ('-' or none reads stdin)")
    parser.add_argument("--echo", "-e", action="store_true", help="Read from stdin even when files are given")

    render_group = parser.add_argument_group("Rendering options")
    add_options_class_arguments(render_group, RenderOptions)

    output_group = parser.add_argument_group("Output options")
    create_env_aware_argument(
        output_group,
        "--pager",
        "-p",
        action="store_true",
        default=None,
        help="Page output with the system pager (automatic for large files on a terminal)",
    )
    output_group.add_argument("--no-pager", dest="pager", action="store_false", default=None, help="Never page output")

    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to a configuration file (.toml, .yaml, .json, or pyproject.toml with [tool.fastcat])",
    )

    # Logging and verbosity options
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING). Overrides --verbose if both are specified.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps and logger names in log output",
    )
    parser.add_argument(
        "--version", "-V", action=DynamicVersionAction, version_callback=lambda: f"fastcat {get_version()}"
    )

    return parser


def build_render_options(parsed_args: argparse.Namespace, config: Dict[str, Any] | None = None) -> RenderOptions:
    """Assemble render options from config values and parsed arguments.

    Precedence is command line (including environment defaults), then config
    file, then dataclass defaults.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    config : dict, optional
        Values loaded from a configuration file, keyed by field name

    Returns
    -------
    RenderOptions
        Final options record

    Raises
    ------
    ValidationError
        If the config holds unknown keys or a value fails validation

    """
    try:
        options = RenderOptions.from_mapping(config or {})
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid configuration: {e}", original_error=e) from e

    overrides = {}
    for field in fields(RenderOptions):
        value = getattr(parsed_args, option_dest(field), None)
        if value is not None:
            overrides[field.name] = value

    if overrides:
        logger.debug(f"Command-line option overrides: {overrides}")
        options = options.create_updated(**overrides)
    return options


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
