from typing import Dict, Any, List, Optional
import pulp as pl
from pulp import LpProblem, LpMaximize, LpVariable, lpSum, LpStatus

from edge import INF
from flow_network import FlowNetwork


class MaxFlowLP:
    """
    Solves the max flow of a FlowNetwork as a linear program.
    Reads the network only; edge flows are left untouched.

    Attributes:
        network (FlowNetwork): The input network
        problem (LpProblem): The linear programming problem
        flow_vars (Dict[int, LpVariable]): Flow variable per edge, keyed by position in network.edges()
    """

    def __init__(self, network: FlowNetwork) -> None:
        self.network = network
        self.edges = network.edges()
        self.problem = LpProblem("Max_Flow", LpMaximize)
        self.flow_vars: Dict[int, LpVariable] = {}
        # per node: variables of edges leaving it / entering it
        self.out_vars: List[List[LpVariable]] = [[] for _ in range(network.vertices())]
        self.in_vars: List[List[LpVariable]] = [[] for _ in range(network.vertices())]
        self._solution: Optional[Dict[str, Any]] = None

    def build_model(self) -> None:
        self._add_flow_vars()
        self._add_objective()
        self._add_flow_conservation_constraints()

    def _add_flow_vars(self) -> None:
        """
        Add flow variables to the problem, bounded by edge capacity.
        """
        for i, e in enumerate(self.edges):
            up = None if e.capacity == INF else e.capacity
            var = LpVariable(f"f_{i}_{e.u}_{e.v}", lowBound=0, upBound=up)
            self.flow_vars[i] = var
            self.out_vars[e.u].append(var)
            self.in_vars[e.v].append(var)

    def _net_outflow(self, node: int):
        return lpSum(self.out_vars[node]) - lpSum(self.in_vars[node])

    def _add_objective(self) -> None:
        """
        Objective: net flow leaving the source.
        """
        self.problem += self._net_outflow(self.network.source)

    def _add_flow_conservation_constraints(self) -> None:
        for node in range(self.network.vertices()):
            if node in (self.network.source, self.network.sink):
                continue
            self.problem += (self._net_outflow(node) == 0)

    def solve(self) -> Dict[str, Any]:
        """
        Solve the optimization problem.

        Returns:
            Dict containing:
                - status: Solution status
                - objective_value: Optimal objective value
                - flows: Dictionary of (u, v, index) -> flow
        Raises:
            RuntimeError: If model hasn't been built or solver fails
        """
        if not self.flow_vars:
            raise RuntimeError("Model must be built before solving")

        status = self.problem.solve(pl.PULP_CBC_CMD(msg=False))
        if status != pl.LpStatusOptimal:
            raise RuntimeError(f"Solver status: {LpStatus[status]}")

        self._solution = {
            'status': 'Optimal',
            'objective_value': pl.value(self.problem.objective),
            'flows': {
                (self.edges[i].u, self.edges[i].v, i): var.value()
                for i, var in self.flow_vars.items()
            },
        }
        return self._solution
