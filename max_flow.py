from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import pandas as pd

from errors import InvalidVertex
from flow_network import FlowNetwork
from get_augmenting_path import get_augmenting_path


@dataclass
class MatchingResult:
    """
    Outcome of one `compute_max_flow` call.

    Attributes:
        total_flow (int): Net flow leaving the source after the call, i.e. the matching size
        pairs (List[Tuple[int, int]]): (left, right) vertex pairs, in sink adjacency order
        augmented (int): Flow added by this call alone
        rounds (int): Number of augmenting paths applied by this call
        complete (bool): False if the round budget ran out before the search failed
    """

    total_flow: int
    pairs: List[Tuple[int, int]] = field(default_factory=list)
    augmented: int = 0
    rounds: int = 0
    complete: bool = True

    def to_dataframe(self, labels=None) -> pd.DataFrame:
        """
        One row per matched pair. With `labels` (anything exposing
        `name(index)`), human-readable names are added next to the indices.
        """
        columns = ["left", "right"]
        rows: List[list] = [[left, right] for left, right in self.pairs]
        if labels is not None:
            columns.extend(["left_name", "right_name"])
            for row in rows:
                row.extend([labels.name(row[0]), labels.name(row[1])])

        df = pd.DataFrame(rows, columns=columns)
        df["left"] = df["left"].astype(int)
        df["right"] = df["right"].astype(int)
        return df


def _check_terminals(network: FlowNetwork, source: int, sink: int) -> None:
    network.check_vertex(source)
    network.check_vertex(sink)
    if source == sink:
        raise InvalidVertex(f"source and sink must differ, both are {source}")


def matched_pairs(network: FlowNetwork, source: int, sink: int) -> List[Tuple[int, int]]:
    """
    Read the matching off the current edge flows.

    Every unit entering the sink is traced backwards along flow-carrying
    edges until an edge leaving the source is met; the vertex at the end of
    that edge is the left partner, the vertex next to the sink the right one.
    Each unit of flow on an edge is consumed once, so duplicate edges yield
    one pair per unit.
    """
    _check_terminals(network, source, sink)
    remaining = [e.flow for e in network.edges]
    pairs: List[Tuple[int, int]] = []

    for index in network.adjacency[sink]:
        e = network.edges[index]
        if e.v != sink:
            continue
        while remaining[index] > 0:
            remaining[index] -= 1
            right = e.u
            cur = right
            left: Optional[int] = None
            while left is None:
                incoming = next(
                    (
                        j for j in network.adjacency[cur]
                        if network.edges[j].v == cur and remaining[j] > 0
                    ),
                    None,
                )
                if incoming is None:
                    break
                remaining[incoming] -= 1
                prev = network.edges[incoming].u
                if prev == source:
                    left = cur
                cur = prev
            if left is not None and left != right:
                pairs.append((left, right))

    return pairs


def compute_max_flow(
    network: FlowNetwork,
    source: int,
    sink: int,
    *,
    max_rounds: Optional[int] = None,
) -> MatchingResult:
    """
    Ford-Fulkerson with DFS augmenting paths.

    Continues from whatever flow the network already carries: a second call
    on a finished network applies no further path and reports the same
    total_flow with augmented == 0.

    Parameters
    ----------
    network : FlowNetwork
        Populated network; its edge flows are updated in place.
    source, sink : int
        Terminal vertices, validated before any search.
    max_rounds : (optional) stop after this many augmenting paths and
        return the partial matching with complete == False.

    Returns
    -------
    MatchingResult
    """
    _check_terminals(network, source, sink)

    augmented = 0
    rounds = 0
    complete = True
    while True:
        if max_rounds is not None and rounds >= max_rounds:
            # budget spent, only report whether a further path existed
            complete = not get_augmenting_path(network, source, sink)[1]
            break

        path, found = get_augmenting_path(network, source, sink)
        if not found:
            break

        # bottleneck on the path
        bottleneck = min(
            network.edges[index].residual_capacity_to(v) for v, index in path
        )

        # augment flow along every edge of the chain
        for v, index in path:
            network.edges[index].increase_flow_at(v, bottleneck)

        augmented += bottleneck
        rounds += 1

    total_flow = network.flow_out_of(source) - network.flow_into(source)
    return MatchingResult(
        total_flow=total_flow,
        pairs=matched_pairs(network, source, sink),
        augmented=augmented,
        rounds=rounds,
        complete=complete,
    )
