from typing import List
from edge import Edge

def add_edge(graph: List[List[Edge]], u: int, v: int, cap: int) -> Edge:
    """
    Append one shared edge to the adjacency lists of both endpoints (graph).
    """
    e = Edge(u, v, cap)
    graph[u].append(e)
    graph[v].append(e)
    return e
