import numbers
from typing import List, Optional

import networkx as nx
import pandas as pd

from add_edge import add_edge
from edge import Edge, INF
from errors import InvalidArgument, InvalidState


class FlowNetwork:
    """
    Capacitated network with a fixed number of vertices.

    Vertex 0 is the source and the last vertex is the sink. Every edge lives
    in the adjacency lists of both its endpoints, in insertion order.

    Attributes:
        graph (List[List[Edge]]): adjacency list, one slot per vertex
        flow_value (Optional[int]): max-flow value once solved, else None
        failed (bool): a solve aborted on an internal invariant; edge flows are unusable
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 2:
            raise InvalidArgument(
                f"a flow network needs distinct source and sink, got {vertex_count} vertices"
            )
        self.graph: List[List[Edge]] = [[] for _ in range(vertex_count)]
        self.flow_value: Optional[int] = None
        self.failed = False

    @property
    def source(self) -> int:
        return 0

    @property
    def sink(self) -> int:
        return len(self.graph) - 1

    @property
    def solved(self) -> bool:
        return self.flow_value is not None

    def vertices(self) -> int:
        return len(self.graph)

    def add_edge(self, u: int, v: int, capacity: int) -> Edge:
        """
        Add a u → v edge with zero flow. Parallel edges are allowed.

        Raises:
            InvalidArgument: out-of-range vertex, self-loop, bad capacity
            InvalidState: the network has already been solved, or its solve failed
        """
        if self.solved or self.failed:
            raise InvalidState("cannot add edges to a network that has been solved")
        for vertex in (u, v):
            if isinstance(vertex, bool) or not isinstance(vertex, numbers.Integral):
                raise InvalidArgument(f"vertex must be an integer, got {vertex!r}")
            if not 0 <= vertex < len(self.graph):
                raise InvalidArgument(f"vertex {vertex} out of range [0, {len(self.graph)})")
        if u == v:
            raise InvalidArgument(f"self-loop on vertex {u} is not allowed")
        if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral):
            raise InvalidArgument(f"capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise InvalidArgument(f"capacity must be non-negative, got {capacity}")

        return add_edge(self.graph, int(u), int(v), int(capacity))

    def adjacent(self, vertex: int) -> List[Edge]:
        if not 0 <= vertex < len(self.graph):
            raise InvalidArgument(f"vertex {vertex} out of range [0, {len(self.graph)})")
        return self.graph[vertex]

    def edges(self) -> List[Edge]:
        """
        Every edge exactly once, taken from its tail's adjacency list.
        """
        result = []
        for vertex, adjacent in enumerate(self.graph):
            for e in adjacent:
                # second occurrence, already listed under e.u
                if e.v == vertex:
                    continue
                result.append(e)
        return result

    def outflow(self, vertex: int) -> int:
        """
        Net flow leaving `vertex` (negative when more enters than leaves).
        """
        total = 0
        for e in self.adjacent(vertex):
            if e.u == vertex:
                total += e.flow
            else:
                total -= e.flow
        return total

    def to_dataframe(self) -> pd.DataFrame:
        """
        One row per edge with columns from, to, flow, capacity, saturated.
        """
        rows = [
            [e.u, e.v, e.flow, e.capacity, e.is_saturated()]
            for e in self.edges()
        ]
        return pd.DataFrame(rows, columns=["from", "to", "flow", "capacity", "saturated"])

    def to_networkx(self) -> nx.DiGraph:
        """
        Directed networkx view. Parallel edges are merged by summing capacity;
        INF edges get no `capacity` attribute, which networkx treats as unbounded.
        """
        G = nx.DiGraph()
        G.add_nodes_from(range(len(self.graph)))

        unbounded = set()
        for e in self.edges():
            if e.capacity == INF:
                unbounded.add((e.u, e.v))
                continue
            if G.has_edge(e.u, e.v):
                G[e.u][e.v]["capacity"] += e.capacity
            else:
                G.add_edge(e.u, e.v, capacity=e.capacity)

        for u, v in unbounded:
            if G.has_edge(u, v):
                del G[u][v]["capacity"]
            else:
                G.add_edge(u, v)
        return G

    def __repr__(self) -> str:
        return f"FlowNetwork(vertices={len(self.graph)}, edges={len(self.edges())})"
