from dataclasses import dataclass
from typing import List

import pandas as pd

from add_edge import connect_sink_from_set, connect_source_to_set, create_network
from flow_network import FlowNetwork
from labels import VertexLabels

SOURCE_NAME = "S"
SINK_NAME = "T"


@dataclass
class BipartiteProblem:
    network: FlowNetwork
    labels: VertexLabels
    left: List[int]
    right: List[int]
    source: int
    sink: int


def read_pairs(file_path: str, left_col: str = "left", right_col: str = "right") -> pd.DataFrame:
    """
    Read compatible (left, right) pairs from a CSV file. Incomplete rows are dropped.
    """
    pairs_df = pd.read_csv(file_path, dtype=str).dropna(subset=[left_col, right_col])
    return pairs_df


def build_bipartite_network(
    pairs_df: pd.DataFrame,
    left_col: str = "left",
    right_col: str = "right",
) -> BipartiteProblem:
    """
    Index left names first (first-seen order), then right names, then the
    source "S" and the sink "T". Compatibility edges are added in row order,
    followed by the source and sink wiring.

    Raises:
        ValueError: If a column is missing or a name appears on both sides
    """
    # validate dataframe containing required columns
    required_columns = [left_col, right_col]
    if not all(col in pairs_df.columns for col in required_columns):
        raise ValueError(f"DataFrame must contain columns: {required_columns}")

    left_names = pairs_df[left_col].astype(str).unique().tolist()
    right_names = pairs_df[right_col].astype(str).unique().tolist()

    overlap = set(left_names) & set(right_names)
    if overlap:
        raise ValueError(f"Names {sorted(overlap)} appear on both sides")
    reserved = {SOURCE_NAME, SINK_NAME} & (set(left_names) | set(right_names))
    if reserved:
        raise ValueError(f"Names {sorted(reserved)} are reserved for source and sink")

    labels = VertexLabels(left_names + right_names + [SOURCE_NAME, SINK_NAME])
    source = labels.index(SOURCE_NAME)
    sink = labels.index(SINK_NAME)

    network = create_network(len(labels))
    for l, r in pairs_df[[left_col, right_col]].astype(str).itertuples(index=False):
        network.add_edge(labels.index(l), labels.index(r))

    left = list(range(len(left_names)))
    right = list(range(len(left_names), len(left_names) + len(right_names)))
    connect_source_to_set(network, source, left)
    connect_sink_from_set(network, sink, right)

    return BipartiteProblem(network, labels, left, right, source, sink)
