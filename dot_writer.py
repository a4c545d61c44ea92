from pathlib import Path
from typing import Union

from flow_network import FlowNetwork


def to_dot(network: FlowNetwork) -> str:
    """
    Graphviz description of the network, one `u->v[label="flow/capacity"];` line per edge.
    """
    lines = ["digraph G{"]
    for e in network.edges():
        lines.append(f'{e.u}->{e.v}[label="{e.flow}/{e.capacity}"];')
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(network: FlowNetwork, path: Union[str, Path]) -> None:
    Path(path).write_text(to_dot(network), encoding="utf-8")
