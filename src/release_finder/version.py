# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

import re
from collections.abc import Iterable
from enum import IntEnum
from itertools import zip_longest

import semver

from .errors import ParseError

# Only "stable" versions are of interest: ASCII digits separated by dots,
# nothing else. Compile it with re.ASCII, otherwise \d also matches "٣" or "９".
VERSION_PATTERN = r"(\d+\.)*(\d+)"

_VALID_VERSION = re.compile(VERSION_PATTERN, re.ASCII)


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


class Version:
    """A dotted version such as "1.0", "3.4.5.0" or "0".

    The literal is kept as written; str() gives it back unchanged, so
    "12.34" never turns into "12.34.0". Comparison treats the shorter
    version as if it were padded with zeros, hence Version("0") equals
    Version("0.0.0") even though their literals differ.
    """

    __slots__ = ("_raw", "_components")

    def __init__(self, s: str) -> None:
        if not isinstance(s, str):
            raise ParseError("Version must be a string")
        if not s:
            raise ParseError("input string can not be empty")
        if not _VALID_VERSION.fullmatch(s):
            raise ParseError(f"{s} is not a valid version")

        components: list[int] = []
        for part in s.split("."):
            try:
                value = int(part)
            except ValueError as e:
                raise ParseError(f"{part!r} in {s} is not an integer") from e
            components.append(value)

        object.__setattr__(self, "_raw", s)
        object.__setattr__(self, "_components", _checked(components))

    @classmethod
    def parse(cls, s: str) -> "Version":
        return cls(s)

    @classmethod
    def from_components(cls, components: Iterable[int]) -> "Version":
        """Build a version from integers, e.g. (1, 2, 0) -> "1.2.0"."""
        values = _checked(components)
        return cls(".".join(str(v) for v in values))

    @property
    def components(self) -> tuple[int, ...]:
        return self._components

    @property
    def semver(self) -> semver.Version | None:
        """Zero-filled semantic version, or None for more than 3 components."""
        if len(self._components) > 3:
            return None
        major, minor, patch = (self._components + (0, 0))[:3]
        return semver.Version(major, minor, patch)

    def render(self) -> str:
        return self._raw

    def compare(self, other: "Version") -> Ordering:
        return compare(self, other)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Version is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == Ordering.EQUAL

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == Ordering.LESS

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) != Ordering.GREATER

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == Ordering.GREATER

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) != Ordering.LESS

    def __hash__(self) -> int:
        # Trailing zeros do not change the value ("1" == "1.0.0").
        significant = list(self._components)
        while len(significant) > 1 and significant[-1] == 0:
            significant.pop()
        return hash(tuple(significant))

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"Version({self._raw!r})"


def _checked(components: Iterable[int]) -> tuple[int, ...]:
    values = tuple(components)
    if not values:
        raise ParseError("a version needs at least one component")
    for value in values:
        if value < 0:
            raise ParseError(f"value must be a positive integer, got {value}")
    return values


def compare(a: Version, b: Version) -> Ordering:
    """Compare a to b, most significant component first.

    A missing component counts as 0, so "1.2" vs "1.2.0.0" is EQUAL and
    "0.0.0.1.0" vs "0" is GREATER.
    """
    for x, y in zip_longest(a.components, b.components, fillvalue=0):
        if x > y:
            return Ordering.GREATER
        if x < y:
            return Ordering.LESS
    return Ordering.EQUAL
