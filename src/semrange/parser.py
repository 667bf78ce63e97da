# SPDX-License-Identifier: MIT
"""Character-by-character parser for semantic version strings.

The grammar is scanned left to right, one field at a time::

    MAJOR [. MINOR [. PATCH]] [- PRERELEASE] [+ METADATA]

Three entry points share the scanner:

- parse_version() is permissive: "1" and "1.2" are accepted (missing
  components default to zero) and leading zeros are tolerated.
- parse_strict() accepts exactly SemVer 2.0.0.
- parse_any() finds the first version embedded in arbitrary text, such as
  the output of ``git --version``.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional

from .errors import (
    InvalidVersionError,
    NoDigitsFound,
    PrecedingZero,
    UnexpectedCharacter,
    VersionIncomplete,
    ZeroLengthComponent,
)
from .semver import Shape, Version, _is_numeric

DIGITS = frozenset(string.digits)
PRE_AND_META_CHARS = frozenset(string.digits + string.ascii_letters + ".-")


class Field(IntEnum):
    """Fields of a version string, in the order they can appear."""

    MAJOR = 0
    MINOR = 1
    PATCH = 2
    PRERELEASE = 3
    METADATA = 4

    @property
    def label(self) -> str:
        return self.name.lower()


NUMERIC_FIELDS = (Field.MAJOR, Field.MINOR, Field.PATCH)


@dataclass(frozen=True, slots=True)
class ScanState:
    """Immutable accumulator threaded through the scan.

    Attributes:
        field: Field currently receiving characters
        buffers: Text collected so far for each field, indexed by Field
        opened: Fields whose delimiter has been seen (major is always open)
    """

    field: Field = Field.MAJOR
    buffers: tuple[str, ...] = ("", "", "", "", "")
    opened: frozenset[Field] = frozenset({Field.MAJOR})

    def text(self, target: Field) -> str:
        return self.buffers[target]

    def is_open(self, target: Field) -> bool:
        return target in self.opened

    def advance(self, char: str) -> Optional["ScanState"]:
        """Return the state after consuming ``char``, or None if it is rejected."""
        current = self.field
        if char == "." and current in (Field.MAJOR, Field.MINOR):
            return self._switch(Field(current + 1))
        if char == "." and current == Field.PATCH:
            return None
        if char == "-" and current in NUMERIC_FIELDS:
            return self._switch(Field.PRERELEASE)
        if char == "+":
            if current == Field.METADATA:
                return None
            return self._switch(Field.METADATA)

        allowed = DIGITS if current in NUMERIC_FIELDS else PRE_AND_META_CHARS
        if char not in allowed:
            return None
        buffers = list(self.buffers)
        buffers[current] += char
        return replace(self, buffers=tuple(buffers))

    def _switch(self, target: Field) -> "ScanState":
        return replace(self, field=target, opened=self.opened | {target})


def scan(text: str) -> tuple[ScanState, Optional[UnexpectedCharacter]]:
    """Scan ``text`` until the end or the first rejected character.

    Returns:
        The state reached, and the UnexpectedCharacter error that stopped
        the scan (None if the whole text was consumed)
    """
    state = ScanState()
    for position, char in enumerate(text):
        next_state = state.advance(char)
        if next_state is None:
            return state, UnexpectedCharacter(text, char, position)
        state = next_state
    return state, None


def _numeric_errors(text: str, state: ScanState) -> list[InvalidVersionError]:
    errors: list[InvalidVersionError] = []
    for numeric in NUMERIC_FIELDS:
        if not state.is_open(numeric):
            continue
        value = state.text(numeric)
        if not value:
            errors.append(ZeroLengthComponent(text, numeric.label))
        elif len(value) > 1 and value[0] == "0":
            errors.append(PrecedingZero(text, numeric.label, value))
    return errors


def _identifier_errors(text: str, state: ScanState, strict: bool) -> list[InvalidVersionError]:
    errors: list[InvalidVersionError] = []
    for target in (Field.PRERELEASE, Field.METADATA):
        if not state.is_open(target):
            continue
        value = state.text(target)
        if not value:
            errors.append(ZeroLengthComponent(text, target.label))
            continue
        if not strict:
            continue
        for identifier in value.split("."):
            if not identifier:
                errors.append(ZeroLengthComponent(text, f"{target.label} identifier"))
            elif (
                target == Field.PRERELEASE
                and _is_numeric(identifier)
                and len(identifier) > 1
                and identifier[0] == "0"
            ):
                errors.append(PrecedingZero(text, target.label, identifier))
    return errors


def _build(state: ScanState, numeric: int) -> Version:
    """Create a Version from the first ``numeric`` components of ``state``."""
    values = [int(state.text(f)) if f < numeric else 0 for f in NUMERIC_FIELDS]
    pre = state.text(Field.PRERELEASE)
    meta = state.text(Field.METADATA)
    return Version(
        values[0],
        values[1],
        values[2],
        prerelease=pre,
        build=meta,
        shape=Shape(numeric=numeric, prerelease=bool(pre), metadata=bool(meta)),
    )


def _parse(text: object, strict: bool) -> Version:
    if not isinstance(text, str):
        raise InvalidVersionError(
            str(text), f"Version must be a string, got {type(text).__name__}"
        )

    state, scan_error = scan(text)

    errors: list[InvalidVersionError] = []
    if scan_error is not None:
        errors.append(scan_error)
    elif not state.is_open(Field.MINOR):
        errors.append(VersionIncomplete(text, Field.MINOR.label))
    elif not state.is_open(Field.PATCH):
        errors.append(VersionIncomplete(text, Field.PATCH.label))
    errors.extend(_numeric_errors(text, state))
    errors.extend(_identifier_errors(text, state, strict))

    if not strict:
        errors = [e for e in errors if not isinstance(e, (PrecedingZero, VersionIncomplete))]
    if errors:
        raise errors[0]

    numeric = 1 + sum(1 for f in (Field.MINOR, Field.PATCH) if state.is_open(f))
    return _build(state, numeric)


def parse_version(version_string: str) -> Version:
    """Parse a version string permissively.

    The shortest accepted string is a single number, which is read as the
    major version. Missing minor and patch components default to zero, and
    the version keeps the original level of detail when printed.

    Args:
        version_string: Text of the form MAJOR[.MINOR[.PATCH]][-prerelease][+build]

    Returns:
        A Version object with parsed components

    Raises:
        UnexpectedCharacter: If a character is not allowed where it appears
        ZeroLengthComponent: If a component was started but left empty
        InvalidVersionError: If the input is not a string

    Examples:
        >>> parse_version("1.2.3")
        Version('1.2.3')
        >>> parse_version("1").format("M.m.p")
        '1.0.0'
        >>> str(parse_version("2.0-rc.1+build.456"))
        '2.0-rc.1+build.456'
    """
    return _parse(version_string, strict=False)


def parse_strict(version_string: str) -> Version:
    """Parse a string that must conform exactly to SemVer 2.0.0.

    Raises:
        VersionIncomplete: If minor or patch is missing
        PrecedingZero: If a numeric component or identifier has a leading zero
        UnexpectedCharacter: If a character is not allowed where it appears
        ZeroLengthComponent: If a component or identifier is empty
    """
    return _parse(version_string, strict=True)


def parse_any(text: str) -> Version:
    """Parse the first version found anywhere in ``text``.

    Parsing starts at the first decimal digit and stops at the first
    character that cannot continue the version.

    Raises:
        NoDigitsFound: If ``text`` contains no digit at all

    Examples:
        >>> str(parse_any("git version 2.6.1"))
        '2.6.1'
        >>> str(parse_any("go version go1.6 darwin/amd64"))
        '1.6'
    """
    if not isinstance(text, str):
        raise InvalidVersionError(str(text), f"Version must be a string, got {type(text).__name__}")

    start = next((i for i, char in enumerate(text) if char in DIGITS), None)
    if start is None:
        raise NoDigitsFound(text)

    state, _ = scan(text[start:])

    # Keep numeric components up to the first one left empty
    numeric = 1
    for target in (Field.MINOR, Field.PATCH):
        if not state.is_open(target) or not state.text(target):
            break
        numeric += 1
    if numeric < 3 and state.is_open(Field(numeric)):
        state = replace(state, buffers=state.buffers[:3] + ("", ""))
    return _build(state, numeric)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid SemVer 2.0.0 version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    try:
        parse_strict(version_string)
    except InvalidVersionError:
        return False
    return True
