"""
Weak connectivity analysis by component compression.

This module decides whether a graph forms a single connected mass. A plain
DFS from one vertex misses vertices that only have edges pointing into the
start's component, so the graph is first compressed into components and the
components are then checked on an undirected component-level graph.
"""

import logging
from typing import List, Set

import numpy as np

from ..classes.handle import Handle
from ..core.adjacency import AdjacencyGraph
from ..core.unweighted import UnweightedGraph

logger = logging.getLogger(__name__)


class ConnectivityAnalyzer:
    """
    Weak connectivity check for any graph implementing AdjacencyGraph.

    The analysis runs in two passes:
    - Label vertices with components found by outgoing-edge-only DFS, and
      record which other components each component reaches
    - Connect components symmetrically and check that a DFS from the first
      component reaches all of them

    Running time is O(n + m) for the labelling pass, n vertices and m edges.
    """

    def __init__(self, graph: AdjacencyGraph):
        """
        Initialize the connectivity analyzer.

        Args:
            graph: Graph to analyze. It is never modified.
        """
        self.graph = graph

    def is_connected(self) -> bool:
        """
        Check whether the graph is weakly connected.

        Component adjacency is treated as undirected: component A and B are
        connected when A reaches B or B reaches A. An empty graph and a single
        vertex are both connected.

        Returns:
            True if every component is reachable from the first one
        """
        if self.graph.size() == 0:
            return True

        _, connections = self._label_components()
        component_count = len(connections)

        component_graph = UnweightedGraph(range(1, component_count + 1))
        component_graph.construct_edges_from(
            lambda a, b: a in connections[b - 1] or b in connections[a - 1]
        )

        seen = np.zeros(component_count, dtype=bool)
        stack = [0]
        while stack:
            top = stack.pop()
            seen[top] = True
            for neighbor in component_graph.connected_neighbors(Handle(top)):
                if not seen[neighbor.index]:
                    stack.append(neighbor.index)

        connected = bool(seen.all())
        logger.debug(f"Graph with {component_count} components is {'connected' if connected else 'not connected'}")
        return connected

    def component_labels(self) -> List[int]:
        """
        Get the component label of every vertex.

        Labels start at 1 and are allocated in the order components are
        discovered while scanning vertices by index.

        Returns:
            Label per vertex, indexed like the graph's vertices
        """
        labels, _ = self._label_components()
        return labels.tolist()

    def _label_components(self):
        """
        Label vertices by outgoing-edge-only DFS.

        Returns:
            Tuple of (label array, list of sets where entry ``label - 1`` holds
            the other labels reached from that component)
        """
        size = self.graph.size()
        labels = np.zeros(size, dtype=np.int64)
        connections: List[Set[int]] = []
        current = 1

        for start in range(size):
            if labels[start] != 0:
                continue

            stack = [start]
            reached: Set[int] = set()

            while stack:
                top = stack.pop()
                labels[top] = current

                for neighbor in self.graph.connected_neighbors(Handle(top)):
                    label = labels[neighbor.index]
                    if label == 0:
                        stack.append(neighbor.index)
                    elif label != current:
                        reached.add(int(label))

            logger.debug(f"Component {current} reaches components {sorted(reached)}")
            connections.append(reached)
            current += 1

        return labels, connections


def is_connected(graph: AdjacencyGraph) -> bool:
    """
    Check whether a graph is weakly connected.

    Args:
        graph: Weighted or unweighted graph

    Returns:
        True if the graph is connected, see ConnectivityAnalyzer.is_connected
    """
    return ConnectivityAnalyzer(graph).is_connected()
