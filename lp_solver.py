from typing import List, Sequence, Tuple

import pulp as pl

from flow_network import FlowNetwork


def lp_matching_size(
    left: Sequence[int],
    right: Sequence[int],
    edges: Sequence[Tuple[int, int]],
) -> int:
    """
    Maximum matching size as a 0/1 program solved by CBC.

    left, right : vertex ids of the two halves
    edges       : compatible (left, right) pairs; duplicates become separate variables

    Edges with an endpoint outside `left` / `right` are ignored.
    """
    left_set, right_set = set(left), set(right)
    E = [(u, v) for u, v in edges if u in left_set and v in right_set]
    if not E:
        return 0

    # -------------------------------------------------- model
    mdl = pl.LpProblem("BipartiteMatching", pl.LpMaximize)

    # x[i] binary – is edge i in the matching?
    x = [pl.LpVariable(f"x_{i}_{u}_{v}", 0, 1, pl.LpBinary) for i, (u, v) in enumerate(E)]

    # ---- 1. objective: number of matched pairs
    mdl += pl.lpSum(x)

    # ---- 2. every vertex used at most once
    for vertex in left_set | right_set:
        incident = [x[i] for i, (u, v) in enumerate(E) if vertex in (u, v)]
        if incident:
            mdl += pl.lpSum(incident) <= 1

    # -------------------------------------------------- solve
    status = mdl.solve(pl.PULP_CBC_CMD(msg=False))
    if status != pl.LpStatusOptimal:
        raise RuntimeError(f"Matching LP not solved: {pl.LpStatus[status]}")

    return int(round(pl.value(mdl.objective)))


def compatibility_edges(network: FlowNetwork, source: int, sink: int) -> List[Tuple[int, int]]:
    """
    The edges of `network` that touch neither the source nor the sink.
    """
    return [
        (e.u, e.v) for e in network.edges
        if source not in (e.u, e.v) and sink not in (e.u, e.v)
    ]


def lp_max_matching(network: FlowNetwork, left: Sequence[int], right: Sequence[int],
                    source: int, sink: int) -> int:
    return lp_matching_size(left, right, compatibility_edges(network, source, sink))
