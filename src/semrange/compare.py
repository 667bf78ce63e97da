# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release versions sort before the release they lead up to, numeric
identifiers compare numerically and sort before alphanumeric ones.
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Union

from .parser import parse_version
from .semver import Version, _is_numeric


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def _compare_prerelease(pre1: tuple[str, ...], pre2: tuple[str, ...]) -> int:
    """Compare two pre-release identifier sequences.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    # No pre-release > any pre-release
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    for p1, p2 in zip(pre1, pre2):
        is_num1 = _is_numeric(p1)
        is_num2 = _is_numeric(p2)

        if is_num1 and is_num2:
            n1, n2 = int(p1), int(p2)
            if n1 != n2:
                return -1 if n1 < n2 else 1
        elif is_num1:
            # Numeric < alphanumeric per SemVer
            return -1
        elif is_num2:
            return 1
        elif p1 != p2:
            return -1 if p1 < p2 else 1

    # All compared parts equal - longer pre-release has higher precedence
    if len(pre1) != len(pre2):
        return -1 if len(pre1) < len(pre2) else 1

    return 0


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by SemVer precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Note:
        Strings are parsed permissively, so "1.2" compares equal to "1.2.0".
        Build metadata is ignored in comparisons per SemVer specification.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0", "1.0.0+build.7")
        0
        >>> compare_versions("1.0.0-alpha.beta", "1.0.0-alpha.1")
        1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    # Compare major.minor.patch
    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    # Compare pre-release (build metadata is ignored)
    return _compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _coerce(version).precedence_key
