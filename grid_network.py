from typing import Callable, Tuple

import numpy as np

from edge import INF
from errors import InvalidArgument, InvalidState
from flow_network import FlowNetwork
from min_cut import reachable_from_source

DEFAULT_CONNECTIVITY = 4

# (row offset, col offset) of the neighbours linked from each cell
_OFFSETS = {
    4: [(0, 1), (1, 0), (0, -1), (-1, 0)],
    8: [(0, 1), (1, 0), (0, -1), (-1, 0), (1, 1), (1, -1), (-1, 1), (-1, -1)],
}


def grid_vertex(shape: Tuple[int, int], row: int, col: int) -> int:
    """
    Row-major vertex index of cell (row, col); vertex 0 is the source.
    """
    rows, cols = shape
    if not (0 <= row < rows and 0 <= col < cols):
        raise InvalidArgument(f"cell ({row}, {col}) outside grid of shape {shape}")
    return 1 + row * cols + col


def build_from_grid(
    values,
    source_capacity: Callable[[int], int],
    sink_capacity: Callable[[int], int],
    neighbor_capacity: Callable[[int, int], int],
    connectivity: int = DEFAULT_CONNECTIVITY,
) -> FlowNetwork:
    """
    Build the pixel network of a 2-D grid: one vertex per cell plus the
    two terminals.

    Args:
        values: 2-D array-like of cell values (rows x cols)
        source_capacity: value -> capacity of source → cell, first row only
        sink_capacity: value -> capacity of cell → sink, last row only
        neighbor_capacity: (value_a, value_b) -> capacity of cell_a → cell_b,
            for every ordered pair of neighbouring cells. May return INF.
        connectivity: 4 or 8

    Returns:
        An unsolved FlowNetwork with rows * cols + 2 vertices.
    """
    grid = np.asarray(values)
    if grid.ndim != 2 or grid.size == 0:
        raise InvalidArgument(f"expected a non-empty 2-D grid, got shape {grid.shape}")
    if connectivity not in _OFFSETS:
        raise InvalidArgument(f"connectivity must be 4 or 8, got {connectivity}")

    rows, cols = grid.shape
    network = FlowNetwork(rows * cols + 2)
    s, t = network.source, network.sink

    # terminal edges
    for c in range(cols):
        network.add_edge(s, grid_vertex(grid.shape, 0, c), source_capacity(grid[0, c]))
    for c in range(cols):
        network.add_edge(grid_vertex(grid.shape, rows - 1, c), t, sink_capacity(grid[rows - 1, c]))

    # neighbour edges, one per ordered pair
    for r in range(rows):
        for c in range(cols):
            a = grid_vertex(grid.shape, r, c)
            for dr, dc in _OFFSETS[connectivity]:
                nr, nc = r + dr, c + dc
                if not (0 <= nr < rows and 0 <= nc < cols):
                    continue
                b = grid_vertex(grid.shape, nr, nc)
                network.add_edge(a, b, neighbor_capacity(grid[r, c], grid[nr, nc]))

    return network


def infinite(*_) -> int:
    """
    Capacity rule for structural edges that must never be cut.
    """
    return INF


def segmentation_mask(network: FlowNetwork, shape: Tuple[int, int]) -> np.ndarray:
    """
    Boolean mask of the cells left on the source side of the minimum cut.
    The network must already be solved.
    """
    if not network.solved:
        raise InvalidState("solve the network before reading its segmentation")
    rows, cols = shape
    if network.vertices() != rows * cols + 2:
        raise InvalidArgument(
            f"network has {network.vertices()} vertices, grid {shape} needs {rows * cols + 2}"
        )
    reachable = np.array(reachable_from_source(network), dtype=bool)
    return reachable[1:-1].reshape(rows, cols)
