from typing import List, Tuple
import numpy as np
from ortools.graph.python import max_flow

from edge import INF
from flow_network import FlowNetwork


def ortools_max_flow(network: FlowNetwork) -> Tuple[int, List[int]]:
    """
    Solve the same instance with OR-Tools, for cross-checking.
    INF capacities are replaced by one more than the sum of all finite ones,
    which is never cheaper than a finite cut. The result only matches
    max_flow when such a finite cut exists; if every source-sink path is
    made of INF edges the two disagree.

    Returns (maxFlow, source side of a min cut).
    """
    # Instantiate a SimpleMaxFlow solver.
    smf = max_flow.SimpleMaxFlow()

    edges = network.edges()
    finite_total = sum(e.capacity for e in edges if e.capacity != INF)

    # Define three parallel arrays: from-node, to-node, capacities.
    start_nodes = np.array([e.u for e in edges])
    end_nodes = np.array([e.v for e in edges])
    capacities = np.array(
        [finite_total + 1 if e.capacity == INF else e.capacity for e in edges],
        dtype=np.int64,
    )

    # Add arcs in bulk using numpy.
    smf.add_arcs_with_capacity(start_nodes, end_nodes, capacities)

    status = smf.solve(network.source, network.sink)
    if status != smf.OPTIMAL:
        raise RuntimeError(f"There was an issue with the max flow input. Status: {status}")

    return smf.optimal_flow(), list(smf.get_source_side_min_cut())
