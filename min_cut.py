import logging
from collections import deque
from typing import List

import pandas as pd

from edge import Edge
from edmonds_karp import max_flow
from errors import InvariantViolation
from flow_network import FlowNetwork

logger = logging.getLogger(__name__)


def reachable_from_source(network: FlowNetwork) -> List[bool]:
    """
    Vertices still connected to the source in the residual network,
    using the same traversal rule as the augmenting-path search.
    """
    s = network.source
    reachable = [False] * network.vertices()
    reachable[s] = True
    q = deque([s])
    while q:
        u = q.popleft()
        for e in network.adjacent(u):
            v = e.other(u)
            if not reachable[v] and e.residual_toward(v) > 0:
                reachable[v] = True
                q.append(v)
    return reachable


def min_cut(network: FlowNetwork) -> List[Edge]:
    """
    Minimum s-t cut of `network`, solving it first if needed.

    The cut is every edge u → v with u reachable from the source in the
    residual network and v not. Edges crossing back into the reachable set
    carry no flow at the optimum and are not part of the cut.

    Raises:
        InvariantViolation: the sink is still reachable after saturation
    """
    max_flow(network)

    reachable = reachable_from_source(network)
    if reachable[network.sink]:
        network.failed = True
        raise InvariantViolation("sink still reachable after saturation")

    cut = [e for e in network.edges() if reachable[e.u] and not reachable[e.v]]
    logger.debug("min cut of %d edges, capacity %d", len(cut), cut_capacity(cut))
    return cut


def cut_capacity(cut: List[Edge]) -> int:
    return sum(e.capacity for e in cut)


def cut_dataframe(cut: List[Edge]) -> pd.DataFrame:
    """
    Cut edges as a table with columns from, to, flow, capacity.
    """
    rows = [[e.u, e.v, e.flow, e.capacity] for e in cut]
    return pd.DataFrame(rows, columns=["from", "to", "flow", "capacity"])
