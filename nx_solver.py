from typing import Sequence

import networkx as nx

from flow_network import FlowNetwork
from lp_solver import compatibility_edges


def to_networkx(network: FlowNetwork) -> nx.DiGraph:
    """
    Directed graph with `capacity` and `flow` edge attributes.
    Parallel edges are merged by summing capacity and flow; self-loops are dropped.
    """
    G = nx.DiGraph()
    G.add_nodes_from(range(network.vertex_count))
    for e in network.edges:
        if e.u == e.v:
            continue
        if G.has_edge(e.u, e.v):
            G[e.u][e.v]["capacity"] += e.capacity
            G[e.u][e.v]["flow"] += e.flow
        else:
            G.add_edge(e.u, e.v, capacity=e.capacity, flow=e.flow)
    return G


def networkx_max_flow(network: FlowNetwork, source: int, sink: int) -> int:
    network.check_vertex(source)
    network.check_vertex(sink)
    G = to_networkx(network)
    return int(nx.maximum_flow_value(G, source, sink, capacity="capacity"))


def networkx_matching_size(network: FlowNetwork, left: Sequence[int], right: Sequence[int],
                           source: int, sink: int) -> int:
    """
    Hopcroft-Karp on the compatibility edges only.
    """
    B = nx.Graph()
    B.add_nodes_from(left, bipartite=0)
    B.add_nodes_from(right, bipartite=1)
    B.add_edges_from(compatibility_edges(network, source, sink))
    matching = nx.bipartite.maximum_matching(B, top_nodes=list(left))
    # the dict holds every pair twice (u->v and v->u)
    return len(matching) // 2
