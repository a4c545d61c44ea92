from errors import InvalidArgument, InvalidState

INF = 10**18  # "∞" capacity for structural edges, never a bottleneck


class Edge:
    """
    One capacitated connection u → v.
    The same object sits in the adjacency list of both endpoints, so the
    reverse residual arc is derived from `flow` instead of stored.
    """

    __slots__ = (
        "u",          # from node
        "v",          # to node
        "capacity",   # max flow, INF for structural edges
        "flow",       # current flow, oriented u → v
    )

    def __init__(self, u: int, v: int, capacity: int) -> None:
        self.u = u
        self.v = v
        self.capacity = capacity
        self.flow = 0

    # ------------------------------------------------------------------ helpers

    def other(self, vertex: int) -> int:
        if vertex == self.u:
            return self.v
        if vertex == self.v:
            return self.u
        raise InvalidArgument(f"vertex {vertex} is not an endpoint of {self!r}")

    def residual_toward(self, vertex: int) -> int:
        """
        Room to push flow so that it moves *toward* `vertex`:
        forward room when `vertex` is the head, cancellable flow when it is the tail.
        """
        if vertex == self.v:
            return self.capacity - self.flow
        if vertex == self.u:
            return self.flow
        raise InvalidArgument(f"vertex {vertex} is not an endpoint of {self!r}")

    def push(self, from_vertex: int, amount: int) -> None:
        """
        Push `amount` units out of `from_vertex` through this edge.
        """
        if from_vertex == self.u:
            flow = self.flow + amount
        elif from_vertex == self.v:
            flow = self.flow - amount
        else:
            raise InvalidArgument(f"vertex {from_vertex} is not an endpoint of {self!r}")

        if flow < 0 or flow > self.capacity:
            raise InvalidState(
                f"pushing {amount} from {from_vertex} on {self!r} "
                f"would leave flow={flow} outside [0, {self.capacity}]"
            )
        self.flow = flow

    def is_saturated(self) -> bool:
        return self.capacity != INF and self.flow == self.capacity

    # ------------------------------------------------------------------ dunder

    def __repr__(self) -> str:  # nice for debugging
        cap = "INF" if self.capacity == INF else self.capacity
        return f"Edge({self.u}→{self.v}, flow={self.flow}, cap={cap})"
