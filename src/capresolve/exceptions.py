"""capresolve exception hierarchy.

All public exceptions inherit from CapResolveError, giving callers a single
base class to catch when they want to handle any capresolve-specific failure
without swallowing unrelated errors.

Expected outcomes of a resolution (no matching path, tied occurrence counts)
are reported through ``ResolutionResult`` and never raise.
"""


class CapResolveError(Exception):
    """Base exception for all capresolve errors."""


class MalformedCoordinateError(CapResolveError):
    """Raised when a coordinate string is not ``group:name:version``.

    Covers capability-unit definitions scraped from descriptor files and
    coordinates given on the command line or in graph documents.

    Attributes:
        text: The offending string, exactly as found.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"The string {text!r} is not a valid coordinate. "
            "Expected format is group:name:version"
        )


class CatalogError(CapResolveError):
    """Raised when the capability-unit catalog cannot be loaded.

    Covers a missing platform checkout, a missing visibility directory and
    an empty public-unit set. Always raised before any resolution begins.
    """


class GraphCollectionError(CapResolveError):
    """Raised when the dependency graph for one root cannot be collected.

    Attributes:
        coordinate: The root coordinate whose graph is unavailable.
    """

    def __init__(self, coordinate: object, reason: str = "") -> None:
        self.coordinate = coordinate
        message = f"Could not collect dependencies of {coordinate}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConfigError(CapResolveError):
    """Raised for an unreadable or invalid resolver configuration file."""


class GraphDocumentError(CapResolveError):
    """Raised when a dependency graph document cannot be read.

    Covers unreadable files, invalid YAML/JSON and a top-level structure
    that is not a mapping with a ``roots`` list.
    """
