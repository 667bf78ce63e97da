# SPDX-License-Identifier: MIT
"""Semantic version value type and formatting.

A Version holds MAJOR.MINOR.PATCH with optional pre-release and build
metadata identifiers:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1
- Build metadata: +build, +build.123, +20240101

Versions also remember their Shape, i.e. how much of the original text was
explicit, so that ``str(parse_version("1.2"))`` gives back ``"1.2"``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Optional, Union

# Template tokens understood by Version.format()
MAJOR = "M"
MINOR = "m"
PATCH = "p"
PRE_DELIM = "-"
PRE = PRE_DELIM + "?"
PRE_RAW = PRE_DELIM + "!"
META_DELIM = "+"
META = META_DELIM + "?"
META_RAW = META_DELIM + "!"
MAJOR_MINOR = MAJOR + "." + MINOR
MAJOR_MINOR_PATCH = MAJOR_MINOR + "." + PATCH
MMP_PRE = MAJOR_MINOR_PATCH + PRE
COMPLETE = MMP_PRE + META

_NUMERIC_TEMPLATES = {1: MAJOR, 2: MAJOR_MINOR, 3: MAJOR_MINOR_PATCH}

# Longest tokens first so "-?" is never read as a literal "-" followed by "?"
_TOKEN_PATTERN = re.compile(r"-\?|-!|\+\?|\+!|[Mmp]")


@dataclass(frozen=True, slots=True)
class Shape:
    """Which parts of a version were explicit when it was written.

    Attributes:
        numeric: Number of explicit numeric components (1 to 3)
        prerelease: Whether a pre-release field was present
        metadata: Whether a build metadata field was present
        custom: A caller-supplied template overriding all of the above
    """

    numeric: int = 3
    prerelease: bool = True
    metadata: bool = True
    custom: Optional[str] = None

    def __post_init__(self) -> None:
        if self.numeric not in _NUMERIC_TEMPLATES:
            raise ValueError(f"Shape numeric must be 1, 2 or 3, got {self.numeric!r}")

    @classmethod
    def from_template(cls, template: str) -> "Shape":
        """Return a shape that always formats with ``template``."""
        return cls(custom=template)

    @property
    def template(self) -> str:
        """Return the format template equivalent to this shape."""
        if self.custom is not None:
            return self.custom
        template = _NUMERIC_TEMPLATES[self.numeric]
        if self.prerelease:
            template += PRE
        if self.metadata:
            template += META
        return template


def _split_identifiers(value: Union[str, tuple[str, ...], list[str], None]) -> tuple[str, ...]:
    if value is None or value == "":
        return ()
    if isinstance(value, str):
        return tuple(value.split("."))
    return tuple(value)


_IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]*")


def _is_numeric(identifier: str) -> bool:
    return identifier.isascii() and identifier.isdigit()


def _identifier_key(identifier: str) -> tuple:
    # Numeric identifiers sort before alphanumeric ones
    if _is_numeric(identifier):
        return (0, int(identifier))
    return (1, identifier)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed semantic version.

    Equality, hashing and ordering follow SemVer precedence: only major,
    minor, patch and pre-release take part. Build metadata and shape are
    carried for display only.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g. ("alpha", "1")), empty for a release
        build: Build metadata identifiers (e.g. ("build", "123"))
        shape: How the version is rendered by str()
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()
    shape: Shape = field(default_factory=Shape)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")
        for name in ("prerelease", "build"):
            identifiers = _split_identifiers(getattr(self, name))
            for identifier in identifiers:
                if not isinstance(identifier, str) or not _IDENTIFIER_PATTERN.fullmatch(identifier):
                    raise ValueError(f"invalid {name} identifier {identifier!r}")
            # Empty identifiers inside a dotted list are allowed for permissive parsing
            if identifiers == ("",):
                raise ValueError(f"{name} must not be empty, got {identifiers!r}")
            object.__setattr__(self, name, identifiers)

    @classmethod
    def from_parts(cls, major: int, minor: int, patch: int) -> "Version":
        """Create a release version from its three numeric components."""
        return cls(major, minor, patch)

    def __str__(self) -> str:
        """Return the version at the level of detail it was created with."""
        return self.format(self.shape.template)

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"

    def format(self, template: str = "") -> str:
        """Render the version using a template.

        The tokens ``M``, ``m`` and ``p`` are replaced by the numeric
        components. ``-?`` and ``+?`` become the pre-release or build
        metadata prefixed by its delimiter, or nothing when the field is
        empty. ``-!`` and ``+!`` always become the bare field content.
        An empty template uses the version's own shape.

        Examples:
            >>> Version(1, 2, 3, "beta").format("M.m")
            '1.2'
            >>> Version(1, 2, 3, "beta").format("v" + MMP_PRE)
            'v1.2.3-beta'
        """
        if not template:
            template = self.shape.template
        pre = ".".join(self.prerelease)
        meta = ".".join(self.build)
        replacements = {
            MAJOR: str(self.major),
            MINOR: str(self.minor),
            PATCH: str(self.patch),
            PRE: PRE_DELIM + pre if pre else "",
            PRE_RAW: pre,
            META: META_DELIM + meta if meta else "",
            META_RAW: meta,
        }
        return _TOKEN_PATTERN.sub(lambda match: replacements[match.group(0)], template)

    def with_format(self, template: str) -> "Version":
        """Return a copy of this version that str() renders with ``template``."""
        return replace(self, shape=Shape.from_template(template))

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def precedence_key(self) -> tuple:
        """Return a tuple whose natural ordering is SemVer precedence."""
        if not self.prerelease:
            # A release sorts after every pre-release of the same triple
            prerelease_key: tuple = (1,)
        else:
            prerelease_key = (0, tuple(_identifier_key(part) for part in self.prerelease))
        return (self.major, self.minor, self.patch, prerelease_key)

    def increment_major(self) -> "Version":
        """Return the next major release, e.g. 1.2.3-beta -> 2.0.0."""
        return replace(self, major=self.major + 1, minor=0, patch=0, prerelease=(), build=())

    def increment_minor(self) -> "Version":
        """Return the next minor release, e.g. 1.2.3 -> 1.3.0."""
        return replace(self, minor=self.minor + 1, patch=0, prerelease=(), build=())

    def increment_patch(self) -> "Version":
        """Return the next patch release, e.g. 1.2.3 -> 1.2.4."""
        return replace(self, patch=self.patch + 1, prerelease=(), build=())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key == other.precedence_key

    def __hash__(self) -> int:
        return hash(self.precedence_key)

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key < other.precedence_key

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key <= other.precedence_key

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key > other.precedence_key

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key >= other.precedence_key
