# SPDX-License-Identifier: MIT
"""Version ranges such as ``>=1.2.0 <2.0.0``, ``^1.2`` or ``~1.2.3``.

A Range has at most one lower and one upper Bound, each of which is either
inclusive or exclusive. A Range without bounds is satisfied by every version.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union

from .compare import compare_versions
from .errors import InvalidRangeSyntax
from .parser import DIGITS, parse_any, parse_version
from .semver import Version


@dataclass(frozen=True, slots=True)
class Bound:
    """One side of a Range.

    Attributes:
        version: The limiting version
        inclusive: Whether ``version`` itself is inside the range
    """

    version: Version
    inclusive: bool


@dataclass(frozen=True, slots=True)
class Range:
    """A constraint over versions.

    Two ranges are equal when both of their bounds are equal: absent bounds
    are equal to each other, and present bounds compare their versions by
    precedence and their inclusiveness.

    Attributes:
        lower: Lower bound, or None for no lower limit
        upper: Upper bound, or None for no upper limit
    """

    lower: Optional[Bound] = None
    upper: Optional[Bound] = None

    def satisfied_by(self, version: Union[str, Version]) -> bool:
        """Return True if ``version`` lies within every bound of this range.

        Examples:
            >>> parse_range("^1.0.0").satisfied_by("1.99.99")
            True
            >>> parse_range("^1.0.0").satisfied_by("2.0.0")
            False
        """
        if isinstance(version, str):
            version = parse_version(version)
        if self.lower is not None:
            result = compare_versions(version, self.lower.version)
            if result < 0 or (result == 0 and not self.lower.inclusive):
                return False
        if self.upper is not None:
            result = compare_versions(version, self.upper.version)
            if result > 0 or (result == 0 and not self.upper.inclusive):
                return False
        return True

    def __contains__(self, version: Union[str, Version]) -> bool:
        return self.satisfied_by(version)

    @property
    def is_exact(self) -> bool:
        """Return True if the range admits a single precedence value."""
        return (
            self.lower is not None
            and self.upper is not None
            and self.lower.inclusive
            and self.upper.inclusive
            and self.lower.version == self.upper.version
        )

    def __str__(self) -> str:
        lower, upper = self.lower, self.upper
        if self.is_exact:
            return str(lower.version)
        if lower is not None and upper is not None and lower.inclusive and not upper.inclusive:
            if upper.version == lower.version.increment_major():
                return "^" + str(lower.version)
            if upper.version == lower.version.increment_minor():
                return "~" + str(lower.version)

        clauses = []
        if lower is not None:
            clauses.append((">=" if lower.inclusive else ">") + str(lower.version))
        if upper is not None:
            clauses.append(("<=" if upper.inclusive else "<") + str(upper.version))
        return " ".join(clauses)


def equal_to(version: Version) -> Range:
    return Range(lower=Bound(version, True), upper=Bound(version, True))


def greater_than(version: Version) -> Range:
    return Range(lower=Bound(version, False))


def greater_than_or_equal_to(version: Version) -> Range:
    return Range(lower=Bound(version, True))


def less_than(version: Version) -> Range:
    return Range(upper=Bound(version, False))


def less_than_or_equal_to(version: Version) -> Range:
    return Range(upper=Bound(version, True))


def between(lower: Version, upper: Version) -> Range:
    """Return the range ``>=lower <upper``."""
    return Range(lower=Bound(lower, True), upper=Bound(upper, False))


def tilde(version: Version) -> Range:
    """Return ``~version``: patch-level changes within the same minor."""
    return between(version, version.increment_minor())


def caret(version: Version) -> Range:
    """Return ``^version``: changes within the same major."""
    return between(version, version.increment_major())


_TWO_CHAR_OPERATORS: dict[str, Callable[[Version], Range]] = {
    "==": equal_to,
    ">=": greater_than_or_equal_to,
    "<=": less_than_or_equal_to,
}

_ONE_CHAR_OPERATORS: dict[str, Callable[[Version], Range]] = {
    "=": equal_to,
    ">": greater_than,
    "<": less_than,
    "~": tilde,
    "^": caret,
}


def parse_range(text: str) -> Range:
    """Parse a range expression.

    Supported forms are a bare version (exact match) or a version preceded
    by one of ``=``, ``==``, ``>``, ``>=``, ``<``, ``<=``, ``~`` or ``^``.
    Whitespace is allowed between the operator and the version.

    Raises:
        InvalidRangeSyntax: If the text starts with neither an operator nor a digit
        NoDigitsFound: If an operator is not followed by any version

    Examples:
        >>> str(parse_range("^1.0.0"))
        '^1.0.0'
        >>> str(parse_range(">= 2"))
        '>=2'
    """
    if not isinstance(text, str):
        raise InvalidRangeSyntax(str(text))

    stripped = text.strip()
    if not stripped:
        raise InvalidRangeSyntax(text)

    if stripped[:2] in _TWO_CHAR_OPERATORS:
        operator = stripped[:2]
        constructor = _TWO_CHAR_OPERATORS[operator]
    elif stripped[0] in _ONE_CHAR_OPERATORS:
        operator = stripped[0]
        constructor = _ONE_CHAR_OPERATORS[operator]
    elif stripped[0] in DIGITS:
        operator = ""
        constructor = equal_to
    else:
        raise InvalidRangeSyntax(text)

    return constructor(parse_any(stripped[len(operator):]))
