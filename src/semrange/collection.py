# SPDX-License-Identifier: MIT
"""Ordered collections of versions and queries over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Optional, Union, overload

from .compare import version_key
from .parser import parse_strict, parse_version
from .ranges import Range
from .semver import Version


class VersionCollection(Sequence[Version]):
    """An immutable sequence of versions.

    Duplicates are allowed, including versions of equal precedence that
    differ only in build metadata. Ordering is applied on demand by the
    sorting methods, which return new collections.

    Example:
        >>> from semrange import parse_range
        >>> versions = VersionCollection(["0.9.0", "0.9.9", "1.0.0"])
        >>> str(versions.greatest_satisfying(parse_range("^0.9.0")))
        '0.9.9'
    """

    __slots__ = ("_versions",)

    def __init__(self, versions: Iterable[Union[str, Version]] = ()) -> None:
        self._versions: tuple[Version, ...] = tuple(
            parse_version(v) if isinstance(v, str) else v for v in versions
        )

    @classmethod
    def parse(cls, strings: Iterable[str], strict: bool = False) -> "VersionCollection":
        """Build a collection from version strings.

        Raises:
            InvalidVersionError: If any string fails to parse
        """
        parse = parse_strict if strict else parse_version
        return cls(parse(s) for s in strings)

    @overload
    def __getitem__(self, index: int) -> Version: ...

    @overload
    def __getitem__(self, index: slice) -> "VersionCollection": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return VersionCollection(self._versions[index])
        return self._versions[index]

    def __len__(self) -> int:
        return len(self._versions)

    def __iter__(self) -> Iterator[Version]:
        return iter(self._versions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionCollection):
            return NotImplemented
        return self._versions == other._versions

    def __hash__(self) -> int:
        return hash(self._versions)

    def __repr__(self) -> str:
        return f"VersionCollection([{', '.join(repr(str(v)) for v in self._versions)}])"

    def sorted_ascending(self) -> "VersionCollection":
        """Return the versions from lowest to highest precedence.

        The sort is stable: versions of equal precedence keep their order.
        """
        return VersionCollection(sorted(self._versions, key=version_key))

    def sorted_descending(self) -> "VersionCollection":
        """Return the versions from highest to lowest precedence."""
        return VersionCollection(sorted(self._versions, key=version_key, reverse=True))

    def filter(self, version_range: Range) -> "VersionCollection":
        """Return the versions satisfying ``version_range``, in their current order."""
        return VersionCollection(v for v in self._versions if version_range.satisfied_by(v))

    def latest(self) -> Optional[Version]:
        """Return the highest version, or None if the collection is empty."""
        if not self._versions:
            return None
        return self.sorted_descending()[0]

    def greatest_satisfying(self, version_range: Range) -> Optional[Version]:
        """Return the highest version satisfying ``version_range``.

        When several satisfying versions share the highest precedence, the
        first of them in the collection is returned.

        Returns:
            The matching version, or None if no version satisfies the range
        """
        for version in self.sorted_descending():
            if version_range.satisfied_by(version):
                return version
        return None
