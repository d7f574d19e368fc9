"""Adapters that hand pre-built dependency graphs to the resolution engine.

Building a graph (reading a build descriptor, querying a repository) is the
job of the build tool. This package only accepts graphs that already exist,
either from a ``GraphSource`` implementation or from a YAML/JSON document
exported by the build tool.
"""

from capresolve.graphs.base import GraphSource, collect_roots
from capresolve.graphs.documents import (
    DocumentGraphSource,
    load_graph_document,
    managed_dependencies,
    package_index,
)

__all__ = [
    "DocumentGraphSource",
    "GraphSource",
    "collect_roots",
    "load_graph_document",
    "managed_dependencies",
    "package_index",
]
