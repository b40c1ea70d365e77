#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for fastcat options.

Options objects are frozen dataclasses so a single configuration can be shared
safely between the command line, the orchestrator and the tests.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Self:
        """Build an instance from a mapping of field names to values.

        Parameters
        ----------
        values : Mapping[str, Any]
            Field values, typically loaded from a config file

        Returns
        -------
        Self
            New instance; fields absent from ``values`` keep their defaults

        Raises
        ------
        ValueError
            If ``values`` contains a key that is not a field of this class

        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown option(s) for {cls.__name__}: {', '.join(unknown)}")
        return cls(**dict(values))
