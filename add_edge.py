from typing import Iterable

from edge import DEFAULT_CAPACITY
from flow_network import FlowNetwork


def create_network(vertex_count: int) -> FlowNetwork:
    return FlowNetwork(vertex_count)


def add_edge(network: FlowNetwork, u: int, v: int, capacity: int = DEFAULT_CAPACITY) -> None:
    """
    Append one shared edge u -> v to the adjacency lists of both endpoints.
    """
    network.add_edge(u, v, capacity)


def connect_source_to_set(network: FlowNetwork, source: int, vertices: Iterable[int]) -> None:
    """
    Add source -> x for every x in `vertices` (the left half).
    All indices are checked first, so a bad one leaves the network untouched.
    """
    vertices = list(vertices)
    for x in [source, *vertices]:
        network.check_vertex(x)
    for x in vertices:
        network.add_edge(source, x)


def connect_sink_from_set(network: FlowNetwork, sink: int, vertices: Iterable[int]) -> None:
    """
    Add x -> sink for every x in `vertices` (the right half).
    """
    vertices = list(vertices)
    for x in [sink, *vertices]:
        network.check_vertex(x)
    for x in vertices:
        network.add_edge(x, sink)
