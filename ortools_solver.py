import numpy as np
from ortools.graph.python import max_flow as or_max_flow

from flow_network import FlowNetwork


def ortools_max_flow(network: FlowNetwork, source: int, sink: int) -> int:
    """
    Max-flow value of `network` computed by OR-Tools, for cross-checking.
    Only capacities are read; the flows stored on the network are ignored.
    """
    network.check_vertex(source)
    network.check_vertex(sink)
    if not network.adjacency[source] or not network.adjacency[sink]:
        return 0

    # Instantiate a SimpleMaxFlow solver.
    smf = or_max_flow.SimpleMaxFlow()

    # Define three parallel arrays: start_nodes, end_nodes, and the capacities.
    start_nodes = np.array([e.u for e in network.edges], dtype=np.int64)
    end_nodes = np.array([e.v for e in network.edges], dtype=np.int64)
    capacities = np.array([e.capacity for e in network.edges], dtype=np.int64)

    # Add arcs in bulk.
    smf.add_arcs_with_capacity(start_nodes, end_nodes, capacities)

    status = smf.solve(source, sink)
    if status != smf.OPTIMAL:
        raise RuntimeError(f"OR-Tools max flow failed with status {status}")
    return int(smf.optimal_flow())
