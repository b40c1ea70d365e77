#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/profiles.py
"""Language profile registry.

Profiles are immutable descriptors constructed once at import time. A profile
is looked up either by an explicit name (with short aliases such as ``md`` or
``py``) or by the extension of a source name. Anything unmatched resolves to
``None``, which callers render pass-through.

"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from fastcat.constants import (
    CPP_BLOCK_COMMENT,
    CPP_EXTENSIONS,
    CPP_LINE_COMMENT,
    JSON_EXTENSIONS,
    MARKDOWN_EXTENSIONS,
    MARKDOWN_FENCE,
    PROFILE_ALIASES,
    PYTHON_EXTENSIONS,
    PYTHON_LINE_COMMENT,
)

logger = logging.getLogger(__name__)


class ProfileKind(str, Enum):
    """Closed set of supported language profiles."""

    CPP = "cpp"
    PYTHON = "python"
    MARKDOWN = "markdown"
    JSON = "json"


@dataclass(frozen=True)
class LanguageProfile:
    """Descriptor for one language ruleset.

    Parameters
    ----------
    kind : ProfileKind
        Identity of the profile; used for tokenizer dispatch
    extensions : frozenset[str]
        Lowercase file extensions (with leading dot) recognized by the profile
    line_comment : str or None
        Single-line comment marker, if the language has one
    block_comment : tuple[str, str] or None
        Multi-line comment start/end markers, if the language has them

    """

    kind: ProfileKind
    extensions: frozenset[str]
    line_comment: str | None = None
    block_comment: tuple[str, str] | None = None

    @property
    def name(self) -> str:
        """Return the canonical profile name."""
        return self.kind.value


CPP_PROFILE = LanguageProfile(
    kind=ProfileKind.CPP,
    extensions=CPP_EXTENSIONS,
    line_comment=CPP_LINE_COMMENT,
    block_comment=CPP_BLOCK_COMMENT,
)
PYTHON_PROFILE = LanguageProfile(
    kind=ProfileKind.PYTHON,
    extensions=PYTHON_EXTENSIONS,
    line_comment=PYTHON_LINE_COMMENT,
)
MARKDOWN_PROFILE = LanguageProfile(
    kind=ProfileKind.MARKDOWN,
    extensions=MARKDOWN_EXTENSIONS,
    block_comment=(MARKDOWN_FENCE, MARKDOWN_FENCE),
)
JSON_PROFILE = LanguageProfile(
    kind=ProfileKind.JSON,
    extensions=JSON_EXTENSIONS,
)

# Detection order: first match wins.
PROFILES: tuple[LanguageProfile, ...] = (CPP_PROFILE, PYTHON_PROFILE, MARKDOWN_PROFILE, JSON_PROFILE)

_PROFILES_BY_KIND = {profile.kind: profile for profile in PROFILES}


def get_extension(name_or_path: str) -> str:
    """Return the lowercased extension (with dot) of a source name.

    Only the final path component is considered, so ``dir.c/README`` has no
    extension. A leading-dot name such as ``.json`` is its own extension.

    Parameters
    ----------
    name_or_path : str
        File name or path

    Returns
    -------
    str
        Lowercased extension including the dot, or an empty string

    """
    basename = os.path.basename(name_or_path)
    dot = basename.rfind(".")
    if dot < 0:
        return ""
    return basename[dot:].lower()


def normalize_profile_name(name: str) -> str | None:
    """Map a profile name or alias to its canonical name.

    Parameters
    ----------
    name : str
        Explicit profile name such as "md", "py", "c" or "cpp"

    Returns
    -------
    str or None
        Canonical profile name, or None if the name is unknown

    """
    return PROFILE_ALIASES.get(name.strip().lower())


def get_profile(name: str) -> LanguageProfile | None:
    """Look up a profile by explicit name, bypassing extension detection.

    Parameters
    ----------
    name : str
        Profile name or alias

    Returns
    -------
    LanguageProfile or None
        The named profile, or None for unknown names

    """
    canonical = normalize_profile_name(name)
    if canonical is None:
        logger.debug(f"Unknown profile name: {name!r}")
        return None
    return _PROFILES_BY_KIND[ProfileKind(canonical)]


def detect(name_or_path: str | None) -> LanguageProfile | None:
    """Detect a profile from the extension of a source name.

    Extensions are matched case-insensitively against each profile's
    extension set, checking profiles in the order C-family, Python, Markdown,
    JSON.

    Parameters
    ----------
    name_or_path : str or None
        Source name used for detection

    Returns
    -------
    LanguageProfile or None
        The first matching profile, or None

    """
    if not name_or_path:
        return None

    ext = get_extension(name_or_path)
    if not ext:
        return None

    for profile in PROFILES:
        if ext in profile.extensions:
            logger.debug(f"Detected profile {profile.name!r} from extension {ext!r}")
            return profile
    return None


def resolve_profile(source_name: str | None = None, override: str | None = None) -> LanguageProfile | None:
    """Resolve the active profile for one render session.

    An explicit override short-circuits extension detection, even when the
    override names an unknown profile.

    Parameters
    ----------
    source_name : str or None
        Source name used for extension detection
    override : str or None
        Explicit profile name

    Returns
    -------
    LanguageProfile or None
        The active profile, or None for pass-through rendering

    """
    if override is not None:
        return get_profile(override)
    return detect(source_name)
