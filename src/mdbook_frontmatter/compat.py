#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbook_frontmatter/compat.py
"""Compatibility check between the preprocessor and the calling mdbook.

mdbook reports its own version in the preprocessor context. The preprocessor
knows which mdbook version its wire format was written against and accepts
any version matching that requirement. A mismatch is only a warning: the
JSON shape rarely changes between releases, so processing always continues.

Versions follow semantic versioning (``MAJOR.MINOR.PATCH[-pre][+build]``).
Pre-release and build metadata are dropped before comparing. Requirements
use Cargo syntax (``^0.4.40``, ``~1.2``, ``>=1.0, <2.0``, ``0.4.*``); a bare
version is a caret requirement. Both are translated onto the ``packaging``
library's :class:`~packaging.version.Version` and
:class:`~packaging.specifiers.SpecifierSet`.

Examples
--------
    >>> check_compatibility("0.4.21", "0.4.40").compatible
    False
    >>> check_compatibility("0.4.52", "0.4.40").compatible
    True

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import Version

from mdbook_frontmatter.exceptions import VersionParseError

logger = logging.getLogger(__name__)

_SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)

_COMPARATOR_PATTERN = re.compile(
    r"^(?P<op>=|>=|<=|>|<|~|\^)?\s*"
    r"(?P<major>\d+|[*xX])"
    r"(?:\.(?P<minor>\d+|[*xX]))?"
    r"(?:\.(?P<patch>\d+|[*xX]))?"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)

_WILDCARDS = frozenset("*xX")


@dataclass(frozen=True)
class CompatibilityResult:
    """Outcome of a compatibility check.

    Parameters
    ----------
    declared : str
        Version mdbook reported
    expected_range : str
        Requirement the preprocessor was built against
    compatible : bool
        Whether ``declared`` satisfies ``expected_range``

    """

    declared: str
    expected_range: str
    compatible: bool


def parse_version(text: str) -> Version:
    """Parse a semantic version, discarding pre-release and build metadata.

    Parameters
    ----------
    text : str
        Version such as ``"0.4.40"`` or ``"1.0.0-alpha.1+build.5"``

    Returns
    -------
    Version
        ``MAJOR.MINOR.PATCH`` as a :class:`packaging.version.Version`

    Raises
    ------
    VersionParseError
        If ``text`` is not a semantic version

    """
    match = _SEMVER_PATTERN.match(text.strip())
    if not match:
        raise VersionParseError(text, kind="version")
    return Version(f"{match['major']}.{match['minor']}.{match['patch']}")


def _release(major: int, minor: int = 0, patch: int = 0) -> str:
    return f"{major}.{minor}.{patch}"


def _comparator_to_specifiers(op: str, major: int, minor: Optional[int], patch: Optional[int]) -> list[str]:
    """Translate one Cargo comparator into PEP 440 specifiers."""
    if op == "^":
        if minor is None:
            return [f">={_release(major)}", f"<{_release(major + 1)}"]
        if patch is None:
            if major == 0 and minor == 0:
                return [f">={_release(0)}", f"<{_release(0, 1)}"]
            patch = 0
        if major > 0:
            upper = _release(major + 1)
        elif minor > 0:
            upper = _release(0, minor + 1)
        else:
            upper = _release(0, 0, patch + 1)
        return [f">={_release(major, minor, patch)}", f"<{upper}"]

    if op == "~":
        if minor is None:
            return [f">={_release(major)}", f"<{_release(major + 1)}"]
        return [f">={_release(major, minor, patch or 0)}", f"<{_release(major, minor + 1)}"]

    if op == "=":
        if minor is None:
            return [f">={_release(major)}", f"<{_release(major + 1)}"]
        if patch is None:
            return [f">={_release(major, minor)}", f"<{_release(major, minor + 1)}"]
        return [f"=={_release(major, minor, patch)}"]

    if op == ">":
        if minor is None:
            return [f">={_release(major + 1)}"]
        if patch is None:
            return [f">={_release(major, minor + 1)}"]
        return [f">{_release(major, minor, patch)}"]

    if op == ">=":
        return [f">={_release(major, minor or 0, patch or 0)}"]

    if op == "<":
        return [f"<{_release(major, minor or 0, patch or 0)}"]

    if op == "<=":
        if minor is None:
            return [f"<{_release(major + 1)}"]
        if patch is None:
            return [f"<{_release(major, minor + 1)}"]
        return [f"<={_release(major, minor, patch)}"]

    raise ValueError(f"Unsupported comparator operator: {op}")


def parse_version_req(text: str) -> SpecifierSet:
    """Parse a Cargo-style version requirement.

    Parameters
    ----------
    text : str
        Comma-separated comparators, e.g. ``"0.4.40"``, ``">=0.4, <0.5"``
        or ``"*"``

    Returns
    -------
    SpecifierSet
        Equivalent set of PEP 440 specifiers

    Raises
    ------
    VersionParseError
        If any comparator is malformed

    """
    specifiers: list[str] = []
    comparators = [part.strip() for part in text.split(",")]
    if not text.strip() or any(not part for part in comparators):
        raise VersionParseError(text, kind="requirement")

    for comparator in comparators:
        if comparator in _WILDCARDS:
            continue

        match = _COMPARATOR_PATTERN.match(comparator)
        if not match or match["major"] in _WILDCARDS:
            raise VersionParseError(text, kind="requirement")

        op = match["op"]
        major = int(match["major"])
        minor_text, patch_text = match["minor"], match["patch"]

        # A wildcard truncates the version: "1.2.*" behaves like "=1.2"
        if minor_text in _WILDCARDS or patch_text in _WILDCARDS:
            if op is not None or (minor_text in _WILDCARDS and patch_text is not None):
                raise VersionParseError(text, kind="requirement")
            op = "="
            patch_text = None
            if minor_text in _WILDCARDS:
                minor_text = None

        minor = int(minor_text) if minor_text is not None else None
        patch = int(patch_text) if patch_text is not None else None
        specifiers.extend(_comparator_to_specifiers(op or "^", major, minor, patch))

    try:
        return SpecifierSet(",".join(specifiers))
    except InvalidSpecifier as e:
        raise VersionParseError(text, kind="requirement", original_error=e) from e


def check_compatibility(declared_version: str, expected_range: str) -> CompatibilityResult:
    """Check whether the calling mdbook version satisfies the expected range.

    Parameters
    ----------
    declared_version : str
        Version reported by mdbook in the preprocessor context
    expected_range : str
        Requirement the preprocessor was built against

    Returns
    -------
    CompatibilityResult
        The comparison outcome; a mismatch is not an error

    Raises
    ------
    VersionParseError
        If either string cannot be parsed

    """
    version = parse_version(declared_version)
    requirement = parse_version_req(expected_range)
    compatible = requirement.contains(version)
    logger.debug("mdbook %s against requirement %r: compatible=%s", version, str(requirement), compatible)
    return CompatibilityResult(declared=declared_version, expected_range=expected_range, compatible=compatible)


__all__ = [
    "CompatibilityResult",
    "check_compatibility",
    "parse_version",
    "parse_version_req",
]
