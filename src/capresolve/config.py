"""Resolver configuration.

All settings that used to be process-wide (where the platform checkout lives,
which group marks capability-unit artifacts) are carried in one immutable
``ResolverConfig`` passed explicitly to the engine.

Example ``capresolve.yaml``::

    checkout_dir: ../open-liberty
    visibility_path: dev/com.ibm.websphere.appserver.features/visibility
    unit_group: io.openliberty.features
    unversioned: drop        # or keep
    workers: 4
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from capresolve.catalog.checkout import DEFAULT_VISIBILITY_PATH
from capresolve.core.resolution.membership import DEFAULT_UNIT_GROUP
from capresolve.core.resolution.versions import UnversionedPolicy
from capresolve.exceptions import ConfigError

DEFAULT_CHECKOUT_DIR = Path("../open-liberty")


@dataclass(frozen=True)
class ResolverConfig:
    """Settings for one resolution run.

    Attributes:
        checkout_dir: Root of the platform source checkout.
        visibility_path: Unit visibility tree, relative to ``checkout_dir``.
        unit_group: Group id marking capability-unit artifacts.
        unversioned: Aggregation policy for units without a version suffix.
        workers: Number of patterns resolved in parallel.
    """

    checkout_dir: Path = DEFAULT_CHECKOUT_DIR
    visibility_path: str = DEFAULT_VISIBILITY_PATH
    unit_group: str = DEFAULT_UNIT_GROUP
    unversioned: UnversionedPolicy = UnversionedPolicy.DROP
    workers: int = 1

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ConfigError(f"workers must be at least 1, got {self.workers}")

    def with_overrides(self, **overrides: Any) -> ResolverConfig:
        """Copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return _coerce(self, changes)


_FIELDS = {f.name for f in dataclasses.fields(ResolverConfig)}


def _coerce(base: ResolverConfig, values: dict[str, Any]) -> ResolverConfig:
    unknown = sorted(set(values) - _FIELDS)
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

    changes: dict[str, Any] = dict(values)
    try:
        if "checkout_dir" in changes:
            changes["checkout_dir"] = Path(changes["checkout_dir"])
        if "unversioned" in changes and not isinstance(
            changes["unversioned"], UnversionedPolicy
        ):
            changes["unversioned"] = UnversionedPolicy(str(changes["unversioned"]).lower())
        if "workers" in changes:
            changes["workers"] = int(changes["workers"])
        for key in ("visibility_path", "unit_group"):
            if key in changes:
                changes[key] = str(changes[key])
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid configuration value: {exc}") from exc
    return dataclasses.replace(base, **changes)


def load_config(path: Path | str | None = None) -> ResolverConfig:
    """Load a ``ResolverConfig`` from a YAML file, or defaults if *path* is None.

    Raises:
        ConfigError: If the file is unreadable, is not a mapping, or holds
            unknown keys or invalid values.
    """
    if path is None:
        return ResolverConfig()

    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot load configuration {path}: {exc}") from exc

    if data is None:
        return ResolverConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration {path} must be a mapping")
    return _coerce(ResolverConfig(), data)
