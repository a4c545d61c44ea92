import logging
from typing import List, Tuple

from edge import Edge
from errors import FlowError, InvariantViolation
from flow_network import FlowNetwork
from get_augmenting_path import get_augmenting_path

logger = logging.getLogger(__name__)


def path_bottleneck(path: List[Edge], s: int) -> int:
    """
    Smallest residual along `path`, walking it from `s`.
    """
    bottleneck = None
    current = s
    for e in path:
        nxt = e.other(current)
        residual = e.residual_toward(nxt)
        if bottleneck is None or residual < bottleneck:
            bottleneck = residual
        current = nxt
    return bottleneck


def _saturate(network: FlowNetwork) -> Tuple[int, int]:
    """
    Augment along BFS paths until none is left. Returns (flow, rounds).
    """
    s = network.source
    flow = 0
    rounds = 0
    while True:
        path, found = get_augmenting_path(network)
        if not found:
            break

        # bottleneck on the path
        bottleneck = path_bottleneck(path, s)
        if bottleneck is None or bottleneck <= 0:
            raise InvariantViolation(
                f"augmenting path {path} has non-positive bottleneck {bottleneck}"
            )

        # augment flow along the path, source → sink
        current = s
        for e in path:
            e.push(current, bottleneck)
            current = e.other(current)

        flow += bottleneck
        rounds += 1
        logger.debug(
            "augmentation %d: %d edges, push = %d, flow = %d",
            rounds, len(path), bottleneck, flow,
        )
    return flow, rounds


def max_flow(network: FlowNetwork) -> int:
    """
    Edmonds-Karp: saturate the network with shortest (BFS) augmenting paths.

    Parameters
    ----------
    network : FlowNetwork
        Mutated in place; every edge's `flow` holds the final flow afterwards.

    Returns
    -------
    maxFlow
        Also stored in `network.flow_value`. A network is solved only once;
        later calls return the stored value.

    Raises
    ------
    InvariantViolation
        If an augmenting path has a non-positive bottleneck, or an earlier
        solve of this network aborted.
    """
    if network.failed:
        raise InvariantViolation("an earlier solve of this network aborted; its flows are unusable")
    if network.solved:
        return network.flow_value

    try:
        flow, rounds = _saturate(network)
    except FlowError:
        # flows pushed before the failure stay on the edges
        network.failed = True
        raise

    logger.info("max flow %d after %d augmentations", flow, rounds)
    network.flow_value = flow
    return flow
