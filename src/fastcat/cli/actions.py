"""Custom argparse Action classes for the fastcat CLI.

Every option backed by a :class:`~fastcat.options.RenderOptions` field can be
defaulted from the environment with ``FASTCAT_<DEST>``, where ``DEST`` is the
argparse destination in upper case. Explicit command-line flags always win.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys

from fastcat.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

TRUTHY_VALUES = ("true", "1", "yes", "on")


def env_key_for(dest: str) -> str:
    """Return the environment variable name for an argparse destination."""
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_')}"


def _dest_from_options(option_strings, dest=None):
    if dest is not None:
        return dest
    for option in option_strings:
        if option.startswith("--"):
            return option[2:].replace("-", "_")
    for option in option_strings:
        if option.startswith("-"):
            return option[1:]
    return None


def non_negative_int(value: str) -> int:
    """Argparse type converter accepting integers >= 0."""
    try:
        ivalue = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a valid integer") from None
    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"{value} is not a non-negative integer")
    return ivalue


class DynamicVersionAction(argparse._VersionAction):
    """Action that displays version information computed at call time."""

    def __init__(self, option_strings, version_callback=None, **kwargs):
        """Initialize with a callback to get version dynamically.

        Parameters
        ----------
        version_callback : callable, optional
            Function that returns the version string when called

        """
        self.version_callback = version_callback
        kwargs.setdefault("version", "placeholder")
        kwargs.setdefault("dest", argparse.SUPPRESS)
        kwargs.setdefault("default", argparse.SUPPRESS)
        super().__init__(option_strings, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        """Display version and exit."""
        version = self.version_callback() if self.version_callback else self.version
        parser._print_message(f"{version}\n", sys.stdout)
        parser.exit()


class EnvironmentAwareAction(argparse.Action):
    """Store action that takes its default from ``FASTCAT_<DEST>``.

    The environment value goes through the argument's ``type`` converter. An
    invalid value is logged and ignored.
    """

    def __init__(self, option_strings, dest=None, **kwargs):
        resolved_dest = _dest_from_options(option_strings, dest)
        if resolved_dest:
            env_key = env_key_for(resolved_dest)
            env_value = os.environ.get(env_key)
            if env_value is not None:
                converter = kwargs.get("type")
                try:
                    kwargs["default"] = converter(env_value) if converter is not None else env_value
                except (ValueError, TypeError, argparse.ArgumentTypeError) as e:
                    logger.warning(f"Invalid environment variable {env_key}={env_value}: {e}")
        super().__init__(option_strings, resolved_dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        """Standard action processing."""
        setattr(namespace, self.dest, values)


class EnvironmentAwareBooleanAction(argparse._StoreTrueAction):
    """Boolean flag whose default may come from ``FASTCAT_<DEST>``.

    ``true``, ``1``, ``yes`` and ``on`` (any case) enable the flag; any other
    value disables it.
    """

    def __init__(self, option_strings, dest=None, **kwargs):
        resolved_dest = _dest_from_options(option_strings, dest)
        if resolved_dest:
            env_value = os.environ.get(env_key_for(resolved_dest))
            if env_value is not None:
                kwargs["default"] = env_value.lower() in TRUTHY_VALUES
        super().__init__(option_strings, resolved_dest, **kwargs)


def create_env_aware_argument(parser, *args, **kwargs):
    """Add an argument, swapping in the environment-aware action for its kind.

    ``store_true`` flags get :class:`EnvironmentAwareBooleanAction` and plain
    store arguments get :class:`EnvironmentAwareAction`. Any other action is
    passed through unchanged.
    """
    action = kwargs.get("action", "store")

    if action == "store_true":
        kwargs["action"] = EnvironmentAwareBooleanAction
    elif action in ("store", None):
        kwargs["action"] = EnvironmentAwareAction

    return parser.add_argument(*args, **kwargs)
