"""Dependency graph nodes as supplied by the graph-collection layer.

The graph is owned by whoever collected it; the resolution core only reads
it. A node may be reachable through several parents and the same
``Coordinate`` may appear at different positions.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from capresolve.core.resolution.coordinate import Coordinate


@dataclass(eq=False)
class GraphNode:
    """A vertex in a dependency graph.

    Nodes compare by identity: two nodes carrying equal coordinates at
    different graph positions are distinct.

    Attributes:
        coordinate: The artifact this node stands for.
        children: Direct dependencies, in declaration order.
    """

    coordinate: Coordinate
    children: list[GraphNode] = field(default_factory=list)

    @property
    def name(self) -> str:
        """Shortcut for ``coordinate.name``."""
        return self.coordinate.name

    def add_child(self, child: GraphNode) -> GraphNode:
        """Append *child* and return it, for chained graph building."""
        self.children.append(child)
        return child

    def walk(self) -> Iterator[GraphNode]:
        """Yield every node reachable from this one, depth-first pre-order.

        Shared sub-graphs are yielded once per path that reaches them.
        """
        stack: list[tuple[GraphNode, frozenset[int]]] = [(self, frozenset())]
        while stack:
            node, ancestors = stack.pop()
            yield node
            on_path = ancestors | {id(node)}
            for child in reversed(node.children):
                if id(child) not in on_path:
                    stack.append((child, on_path))

    def __repr__(self) -> str:
        return f"GraphNode({self.coordinate}, children={len(self.children)})"


# A root-to-match path: index 0 is the root, the last element is the match.
Path = tuple[GraphNode, ...]
