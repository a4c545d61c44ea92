from collections import deque
from typing import List, Optional, Tuple

from edge import Edge
from flow_network import FlowNetwork


def get_augmenting_path(network: FlowNetwork) -> Tuple[List[Edge], bool]:
    """
    BFS over the residual network from source to sink.
    An edge is traversable toward a vertex iff its residual toward that vertex is > 0.
    Returns (path_edges, found_flag).  If no s-t path exists, found_flag == False.
    """
    s, t = network.source, network.sink
    n = network.vertices()
    prev: List[Optional[Edge]] = [None] * n
    visited = [False] * n

    q = deque([s])
    visited[s] = True

    # loop
    while q and not visited[t]:
        u = q.popleft()

        # adjacency insertion order keeps the search deterministic
        for e in network.adjacent(u):
            v = e.other(u)
            # check if visited
            if visited[v]:
                continue
            # check if edge has residual capacity toward v
            if e.residual_toward(v) <= 0:
                continue

            visited[v] = True
            prev[v] = e
            q.append(v)

    # Sink t not reachable
    if not visited[t]:
        return [], False

    # reconstruct the path
    path = []
    v = t
    while v != s:
        e = prev[v]
        path.append(e)
        v = e.other(v)
    path.reverse()

    return path, True
