# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing versions and version ranges."""

from __future__ import annotations


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class NoDigitsFound(InvalidVersionError):
    """Raised when text contains no decimal digit to start a version at."""

    def __init__(self, version: str):
        super().__init__(version, f"no version found in {version!r}")


class UnexpectedCharacter(InvalidVersionError):
    """Raised when the grammar rejects a character.

    Attributes:
        char: The offending character
        position: Zero-based offset of the character in the parsed text
    """

    def __init__(self, version: str, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(version, f"unexpected character '{char}' at position {position}")


class ZeroLengthComponent(InvalidVersionError):
    """Raised when a component was opened by its delimiter but left empty."""

    def __init__(self, version: str, component: str):
        self.component = component
        super().__init__(version, f"zero-length {component} component")


class PrecedingZero(InvalidVersionError):
    """Raised in strict mode when a numeric component has a leading zero."""

    def __init__(self, version: str, component: str, text: str):
        self.component = component
        self.text = text
        super().__init__(
            version, f"unexpected preceding zero in {component} component: {text!r}"
        )


class VersionIncomplete(InvalidVersionError):
    """Raised in strict mode when minor or patch is missing."""

    def __init__(self, version: str, component: str):
        self.component = component
        super().__init__(version, f"version incomplete: missing {component} component")


class InvalidRangeSyntax(InvalidVersionError):
    """Raised when a range has no recognised operator or leading digit."""

    def __init__(self, text: str):
        super().__init__(text, f"unable to parse version range {text!r}")
