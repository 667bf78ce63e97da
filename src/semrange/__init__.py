# SPDX-License-Identifier: MIT
"""Semantic version parsing, ordering and range matching.

This package parses version strings (permissively, strictly per SemVer
2.0.0, or from free text), orders them by SemVer precedence, and answers
range queries such as "the newest release compatible with ^1.2".

Example:
    >>> from semrange import parse_version, parse_range, VersionCollection
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', '1')
    >>>
    >>> parse_range("^1.0.0").satisfied_by(version)
    True
    >>>
    >>> versions = VersionCollection(["0.9.0", "0.9.9", "1.0.0"])
    >>> str(versions.greatest_satisfying(parse_range("^0.9.0")))
    '0.9.9'
"""

__version__ = "0.1.0"

from .errors import (
    InvalidVersionError,
    NoDigitsFound,
    UnexpectedCharacter,
    ZeroLengthComponent,
    PrecedingZero,
    VersionIncomplete,
    InvalidRangeSyntax,
)
from .semver import (
    Version,
    Shape,
    MAJOR,
    MINOR,
    PATCH,
    PRE,
    PRE_RAW,
    META,
    META_RAW,
    MAJOR_MINOR,
    MAJOR_MINOR_PATCH,
    MMP_PRE,
    COMPLETE,
)
from .parser import (
    parse_version,
    parse_strict,
    parse_any,
    is_valid_semver,
)
from .compare import (
    compare_versions,
    version_key,
)
from .ranges import (
    Bound,
    Range,
    parse_range,
    equal_to,
    greater_than,
    greater_than_or_equal_to,
    less_than,
    less_than_or_equal_to,
    between,
    tilde,
    caret,
)
from .collection import VersionCollection

__all__ = [
    # Errors
    "InvalidVersionError",
    "NoDigitsFound",
    "UnexpectedCharacter",
    "ZeroLengthComponent",
    "PrecedingZero",
    "VersionIncomplete",
    "InvalidRangeSyntax",
    # Version value and formatting
    "Version",
    "Shape",
    "MAJOR",
    "MINOR",
    "PATCH",
    "PRE",
    "PRE_RAW",
    "META",
    "META_RAW",
    "MAJOR_MINOR",
    "MAJOR_MINOR_PATCH",
    "MMP_PRE",
    "COMPLETE",
    # Version parsing
    "parse_version",
    "parse_strict",
    "parse_any",
    "is_valid_semver",
    # Version comparison
    "compare_versions",
    "version_key",
    # Ranges
    "Bound",
    "Range",
    "parse_range",
    "equal_to",
    "greater_than",
    "greater_than_or_equal_to",
    "less_than",
    "less_than_or_equal_to",
    "between",
    "tilde",
    "caret",
    # Collections
    "VersionCollection",
]
