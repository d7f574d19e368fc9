"""Version Aggregator: merge same-named capability units across versions.

Unit identifiers take the form ``<baseName>-<version>``, where the version is
the dotted decimal suffix after the last hyphen (``servlet-4.0``,
``com.ibm.websphere.appserver.jsp-2.3``). Units sharing a base name are
collapsed into a single entry keyed by the highest version seen, carrying the
summed occurrence count of every version.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Mapping

logger = logging.getLogger(__name__)

_DECIMAL_VERSION_RE = re.compile(r"^\d+(?:\.\d+)*$")


class UnversionedPolicy(enum.Enum):
    """What aggregation does with identifiers that carry no version suffix."""

    DROP = "drop"
    KEEP = "keep"


def split_unit(identifier: str) -> tuple[str, str | None]:
    """Split a unit identifier into ``(base_name, version)``.

    The version is the text after the last hyphen, provided it is a dotted
    decimal number. Otherwise the whole identifier is the base name and the
    version is None.

    >>> split_unit("jsp-2.3")
    ('jsp', '2.3')
    >>> split_unit("mpConfig")
    ('mpConfig', None)
    """
    base, sep, version = identifier.rpartition("-")
    if sep and base and _DECIMAL_VERSION_RE.match(version):
        return base, version
    return identifier, None


def version_key(version: str) -> tuple[int, ...]:
    """Numeric ordering key for a dotted decimal version.

    Components compare as integers, so ``2.10`` sorts above ``2.9``.
    Trailing zero components are insignificant: ``4.0`` equals ``4``.

    Raises:
        ValueError: If *version* is not a dotted decimal number.
    """
    if not _DECIMAL_VERSION_RE.match(version):
        raise ValueError(f"Invalid unit version: {version!r}")
    parts = [int(p) for p in version.split(".")]
    while len(parts) > 1 and parts[-1] == 0:
        parts.pop()
    return tuple(parts)


def aggregate_by_base_name(
    tally: Mapping[str, int],
    unversioned: UnversionedPolicy = UnversionedPolicy.DROP,
) -> dict[str, int]:
    """Merge tally entries that differ only by version.

    For each base name the counts of all its versions are summed and keyed
    under ``<baseName>-<highestVersion>``, spelling the version as it was
    written in the highest-versioned identifier. Output order follows the
    first appearance of each base name.

    Identifiers without a version suffix cannot be expressed in merged form.
    Under ``UnversionedPolicy.DROP`` they are left out of the result with a
    warning; under ``UnversionedPolicy.KEEP`` they pass through unchanged.

    Re-aggregating the output returns an equal mapping.

    Args:
        tally: Occurrence counts keyed by unit identifier.
        unversioned: Policy for identifiers with no version suffix.

    Returns:
        A new mapping with at most one entry per base name.
    """
    groups: dict[tuple[str, bool], tuple[str | None, int]] = {}

    for identifier, count in tally.items():
        base, version = split_unit(identifier)
        if version is None:
            if unversioned is UnversionedPolicy.DROP:
                logger.warning(
                    "Dropping unit %s (%d occurrence(s)): no version suffix",
                    identifier, count,
                )
                continue
            key = (identifier, False)
            _, total = groups.get(key, (None, 0))
            groups[key] = (None, total + count)
            continue

        key = (base, True)
        if key not in groups:
            groups[key] = (version, count)
            continue
        best, total = groups[key]
        if version_key(version) > version_key(best):
            best = version
        groups[key] = (best, total + count)

    result: dict[str, int] = {}
    for (base, versioned), (version, total) in groups.items():
        result[f"{base}-{version}" if versioned else base] = total
    return result
