import networkx as nx
import pytest

from edge import INF
from edmonds_karp import max_flow, path_bottleneck
from errors import InvalidState, InvariantViolation
from flow_network import FlowNetwork
from get_augmenting_path import get_augmenting_path
from min_cut import min_cut


def assert_conserved(g):
    for vertex in range(1, g.vertices() - 1):
        assert g.outflow(vertex) == 0


def assert_within_capacity(g):
    for e in g.edges():
        assert 0 <= e.flow <= e.capacity


def test_chain(chain):
    assert max_flow(chain) == 3
    assert chain.flow_value == 3


def test_parallel_paths():
    # Scenario B
    g = FlowNetwork(2)
    a = g.add_edge(0, 1, 4)
    b = g.add_edge(0, 1, 6)
    assert max_flow(g) == 10
    assert a.is_saturated() and b.is_saturated()


def test_classic(classic):
    assert max_flow(classic) == 23
    assert_conserved(classic)
    assert_within_capacity(classic)


def test_needs_flow_cancellation():
    g = FlowNetwork(4)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 3, 1)
    g.add_edge(0, 2, 1)
    g.add_edge(1, 3, 1)
    assert max_flow(g) == 2
    assert_conserved(g)


def test_zero_capacity_source():
    g = FlowNetwork(3)
    g.add_edge(0, 1, 0)
    g.add_edge(1, 2, 5)
    assert max_flow(g) == 0


def test_infinite_edges_do_not_bind():
    g = FlowNetwork(4)
    g.add_edge(0, 1, 7)
    g.add_edge(1, 2, INF)
    g.add_edge(2, 3, 9)
    assert max_flow(g) == 7


def test_second_call_returns_stored_value(classic):
    assert max_flow(classic) == 23
    flows = [e.flow for e in classic.edges()]
    assert max_flow(classic) == 23
    assert [e.flow for e in classic.edges()] == flows


def test_matches_networkx(classic):
    expected = nx.maximum_flow_value(classic.to_networkx(), classic.source, classic.sink)
    assert max_flow(classic) == expected


def test_path_bottleneck(chain):
    path, _ = get_augmenting_path(chain)
    assert path_bottleneck(path, chain.source) == 3


def test_non_positive_bottleneck_is_invariant_violation(chain, monkeypatch):
    path, _ = get_augmenting_path(chain)
    path[1].flow = 3  # saturate behind the search's back

    monkeypatch.setattr("edmonds_karp.get_augmenting_path", lambda g: (path, True))
    with pytest.raises(InvariantViolation):
        max_flow(chain)
    assert not chain.solved
    with pytest.raises(InvariantViolation):
        max_flow(chain)
    with pytest.raises(InvariantViolation):
        min_cut(chain)


def test_failed_solve_is_never_resumed(classic, monkeypatch):
    # first round augments normally, the second is handed a stale path
    calls = []

    def stale_after_first(g):
        path, found = get_augmenting_path(g)
        if calls:
            path = calls[0]
        calls.append(path)
        return path, found

    monkeypatch.setattr("edmonds_karp.get_augmenting_path", stale_after_first)
    with pytest.raises(InvariantViolation):
        max_flow(classic)
    assert classic.failed
    assert any(e.flow for e in classic.edges())

    monkeypatch.undo()
    with pytest.raises(InvariantViolation):
        max_flow(classic)
    with pytest.raises(InvariantViolation):
        min_cut(classic)
    with pytest.raises(InvalidState):
        classic.add_edge(0, 5, 1)
