"""Artifact coordinates and inclusion patterns.

A ``Coordinate`` identifies a dependency or capability-unit artifact by
``(group, name, version)``. An ``ArtifactPattern`` is the inclusion filter
handed to path extraction; it follows the Maven resolver convention of
colon-separated ``group:name:extension:version`` tokens where each token may
be a wildcard, a prefix/suffix/substring wildcard, a version range, or a
literal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from capresolve.exceptions import MalformedCoordinateError


# ---------------------------------------------------------------------------
# Coordinate: artifact identity
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Coordinate:
    """Immutable identity of an artifact.

    Equality and hashing are structural over ``group``, ``name`` and
    ``version``. The ``extension`` (packaging type) travels with the
    coordinate for pattern matching only and is not part of its identity.

    Attributes:
        group: Group identifier (e.g. ``io.openliberty.features``).
        name: Artifact name; for capability units this is the unit name.
        version: Version string as published.
        extension: Packaging type, ``jar`` unless stated otherwise.
    """

    group: str
    name: str
    version: str
    extension: str = field(default="jar", compare=False)

    @classmethod
    def parse(cls, text: str, extension: str = "jar") -> Coordinate:
        """Parse a ``group:name:version`` string.

        Args:
            text: The coordinate string.
            extension: Packaging type to attach to the parsed coordinate.

        Returns:
            The parsed ``Coordinate``.

        Raises:
            MalformedCoordinateError: If *text* does not split into exactly
                three non-empty colon-separated tokens.
        """
        tokens = text.strip().split(":")
        if len(tokens) != 3 or not all(tokens):
            raise MalformedCoordinateError(text)
        return cls(tokens[0], tokens[1], tokens[2], extension)

    def __str__(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"


# ---------------------------------------------------------------------------
# Version ordering for range tokens
# ---------------------------------------------------------------------------

_VERSION_SPLIT_RE = re.compile(r"[.\-]")


def _artifact_version_key(version: str) -> tuple[tuple[int, int | str], ...]:
    """Ordering key for artifact versions such as ``6.0.1`` or ``2.3-b02``.

    Numeric segments compare numerically and rank above qualifier segments
    in the same position. Trailing zero segments are insignificant.
    """
    parts: list[tuple[int, int | str]] = []
    for segment in _VERSION_SPLIT_RE.split(version.strip()):
        if segment.isdigit():
            parts.append((1, int(segment)))
        elif segment:
            parts.append((0, segment.lower()))
    while parts and parts[-1] == (1, 0):
        parts.pop()
    return tuple(parts)


_RANGE_RE = re.compile(
    r"^(?P<open>[\[(])\s*(?P<low>[^,\])]*?)\s*"
    r"(?:,\s*(?P<high>[^\])]*?)\s*)?(?P<close>[\])])$"
)


def _in_version_range(version: str, spec: str) -> bool:
    """Check *version* against a Maven-style range like ``[1.0,2.0)``."""
    m = _RANGE_RE.match(spec.strip())
    if not m:
        return False
    low, high = m.group("low"), m.group("high")
    key = _artifact_version_key(version)

    if high is None:
        # "[1.0]" pins an exact version
        return bool(low) and key == _artifact_version_key(low)

    if low:
        low_key = _artifact_version_key(low)
        if key < low_key or (m.group("open") == "(" and key == low_key):
            return False
    if high:
        high_key = _artifact_version_key(high)
        if key > high_key or (m.group("close") == ")" and key == high_key):
            return False
    return True


# ---------------------------------------------------------------------------
# ArtifactPattern: inclusion filter for path extraction
# ---------------------------------------------------------------------------


def _token_matches(token: str, pattern: str) -> bool:
    if pattern in ("", "*"):
        return True
    if len(pattern) > 1 and pattern.startswith("*") and pattern.endswith("*"):
        return pattern[1:-1] in token
    if pattern.startswith("*"):
        return token.endswith(pattern[1:])
    if pattern.endswith("*"):
        return token.startswith(pattern[:-1])
    return token == pattern


@dataclass(frozen=True)
class ArtifactPattern:
    """An inclusion pattern ``group[:name[:extension[:version]]]``.

    Missing trailing tokens and empty tokens match anything. A version token
    starting with ``[`` or ``(`` is treated as a version range.

    Attributes:
        raw: The pattern exactly as supplied.
    """

    raw: str

    @classmethod
    def for_coordinate(cls, coordinate: Coordinate) -> ArtifactPattern:
        """Pattern matching *coordinate* with any packaging type."""
        return cls(f"{coordinate.group}:{coordinate.name}::{coordinate.version}")

    def matches(self, coordinate: Coordinate) -> bool:
        """Return True if *coordinate* falls within this pattern."""
        patterns = self.raw.strip().split(":")
        tokens = (
            coordinate.group,
            coordinate.name,
            coordinate.extension,
            coordinate.version,
        )
        if len(patterns) > len(tokens):
            return False
        for index, pattern in enumerate(patterns):
            token = tokens[index]
            if index == 3 and pattern[:1] in ("[", "("):
                if not _in_version_range(token, pattern):
                    return False
            elif not _token_matches(token, pattern):
                return False
        return True

    def __call__(self, coordinate: Coordinate) -> bool:
        return self.matches(coordinate)

    def __str__(self) -> str:
        return self.raw
