"""
Pytest configuration: puts the project root on sys.path so the flat
modules import without installation.
"""

import sys
import os

import pytest

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flow_network import FlowNetwork  # noqa: E402


@pytest.fixture
def chain():
    # Scenario A: 0 -5-> 1 -3-> 2
    g = FlowNetwork(3)
    g.add_edge(0, 1, 5)
    g.add_edge(1, 2, 3)
    return g


@pytest.fixture
def classic():
    # s=0, v1..v4, t=5
    g = FlowNetwork(6)
    for u, v, cap in [
        (0, 1, 16), (0, 2, 13), (1, 2, 10), (2, 1, 4), (1, 3, 12),
        (3, 2, 9), (2, 4, 14), (4, 3, 7), (3, 5, 20), (4, 5, 4),
    ]:
        g.add_edge(u, v, cap)
    return g
