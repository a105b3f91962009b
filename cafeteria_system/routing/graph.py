"""Facility graph and single-source shortest paths."""

import heapq
import logging
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from ..core.errors import InvalidGraphEndpoint


SAMPLE_EDGES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 3),
    (0, 2, 2),
    (1, 3, 4),
    (2, 3, 2),
    (3, 4, 6),
    (2, 5, 7),
)
SAMPLE_NODES = 6

UNREACHABLE = "Unreachable"


class Edge(NamedTuple):
    to: int
    weight: int


class FacilityGraph:
    """Undirected weighted graph over nodes 0..num_nodes-1.

    Edges are stored in both adjacency lists with the same weight. Parallel
    edges are kept as given.
    """

    def __init__(self, num_nodes: int = 0):
        if num_nodes < 0:
            raise ValueError("num_nodes must be non-negative")
        self.num_nodes = num_nodes
        self.adj: List[List[Edge]] = [[] for _ in range(num_nodes)]

    def resize(self, num_nodes: int) -> None:
        """Reset to ``num_nodes`` isolated nodes."""
        if num_nodes < 0:
            raise ValueError("num_nodes must be non-negative")
        self.num_nodes = num_nodes
        self.adj = [[] for _ in range(num_nodes)]

    def has_node(self, u: int) -> bool:
        return 0 <= u < self.num_nodes

    def add_edge(self, u: int, v: int, weight: int) -> bool:
        """Add an undirected edge.

        An edge touching a node outside the graph is ignored and logged, and
        False is returned; the adjacency lists are left untouched.
        """
        if not (self.has_node(u) and self.has_node(v)):
            logging.warning("%s", InvalidGraphEndpoint(u, v, self.num_nodes))
            return False
        if weight < 0:
            raise ValueError(f"Edge {u}-{v} has negative weight {weight}")

        self.adj[u].append(Edge(v, weight))
        self.adj[v].append(Edge(u, weight))
        return True

    def add_edges(self, edges: Iterable[Sequence[int]]) -> int:
        """Add (u, v, weight) triples; returns how many were accepted."""
        return sum(1 for u, v, w in edges if self.add_edge(u, v, w))

    def neighbors(self, u: int) -> List[Edge]:
        return list(self.adj[u])

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.adj) // 2

    def shortest_paths(self, src: int) -> List[Optional[int]]:
        """Dijkstra distances from ``src``; None marks an unreachable node."""
        if not self.has_node(src):
            raise ValueError(f"Source node {src} not in [0, {self.num_nodes})")

        dist: List[Optional[int]] = [None] * self.num_nodes
        dist[src] = 0
        frontier = [(0, src)]

        while frontier:
            d, u = heapq.heappop(frontier)
            # Stale entry: a shorter path to u was already settled.
            if d > dist[u]:
                continue
            for edge in self.adj[u]:
                candidate = d + edge.weight
                if dist[edge.to] is None or candidate < dist[edge.to]:
                    dist[edge.to] = candidate
                    heapq.heappush(frontier, (candidate, edge.to))

        return dist


def sample_facility_graph() -> FacilityGraph:
    """Six-node cafeteria layout used when no graph is configured."""
    graph = FacilityGraph(SAMPLE_NODES)
    graph.add_edges(SAMPLE_EDGES)
    return graph


def format_distance(distance: Optional[int]) -> str:
    return UNREACHABLE if distance is None else str(distance)


def format_distance_table(src: int, distances: List[Optional[int]]) -> str:
    lines = [f"Shortest distances from node {src}:"]
    for node, distance in enumerate(distances):
        lines.append(f" -> To node {node} = {format_distance(distance)}")
    return "\n".join(lines)
