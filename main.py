import argparse
import os
from datetime import datetime

from add_edge import add_edge, connect_sink_from_set, connect_source_to_set, create_network
from labels import VertexLabels
from load_data import BipartiteProblem, build_bipartite_network, read_pairs
from lp_solver import lp_max_matching
from max_flow import MatchingResult, compute_max_flow
from nx_solver import networkx_matching_size
from ortools_solver import ortools_max_flow

input_dir = "data/"
output_dir = "results/"


def build_problem(names, left, right, edges) -> BipartiteProblem:
    """
    Wire up a demonstration graph: `names` covers left and right halves,
    source "S" and sink "T" are appended as the last two vertices.
    """
    labels = VertexLabels(list(names) + ["S", "T"])
    source, sink = len(names), len(names) + 1

    network = create_network(len(labels))
    for u, v in edges:
        add_edge(network, u, v)
    connect_source_to_set(network, source, left)
    connect_sink_from_set(network, sink, right)
    return BipartiteProblem(network, labels, list(left), list(right), source, sink)


def demo_problems():
    graph1 = build_problem(
        ["1", "2", "3", "4", "5", "1'", "2'", "3'", "4'", "5'"],
        left=[0, 1, 2, 3, 4],
        right=[5, 6, 7, 8, 9],
        edges=[(0, 5), (0, 6), (1, 6), (2, 5), (2, 7), (2, 8), (3, 6), (3, 9), (4, 6), (4, 9)],
    )
    graph2 = build_problem(
        ["1", "2", "3", "4", "5", "6", "1'", "2'", "3'", "4'", "5'"],
        left=[0, 1, 2, 3, 4, 5],
        right=[6, 7, 8, 9, 10],
        edges=[(0, 7), (1, 6), (2, 7), (3, 6), (3, 8), (3, 9), (4, 7), (4, 9), (5, 8), (5, 10)],
    )
    return [("Graph 1", graph1), ("Graph 2", graph2)]


def report(result: MatchingResult, labels: VertexLabels) -> None:
    for pair in result.pairs:
        print(f"Matched Vertices  {labels.format_pair(pair)}")
    print(f"\nMaximum pairs matched = {result.total_flow}")


def cross_check(problem: BipartiteProblem, result: MatchingResult) -> bool:
    """
    Compare the matching size against OR-Tools, PuLP and networkx.
    Call it after compute_max_flow; none of the solvers touch the flows.
    """
    checks = {
        "ortools": ortools_max_flow(problem.network, problem.source, problem.sink),
        "pulp": lp_max_matching(problem.network, problem.left, problem.right,
                                problem.source, problem.sink),
        "networkx": networkx_matching_size(problem.network, problem.left, problem.right,
                                           problem.source, problem.sink),
    }
    ok = True
    for solver, value in checks.items():
        if value != result.total_flow:
            print(f"Warning: {solver} found {value}, expected {result.total_flow}")
            ok = False
    if ok:
        print(f"Cross-check ok: {', '.join(checks)} agree on {result.total_flow}")
    return ok


def run(title: str, problem: BipartiteProblem, *, check: bool = False, save_dir=None) -> MatchingResult:
    print(f"Running Bipartite Matching on {title}")
    result = compute_max_flow(problem.network, problem.source, problem.sink)
    report(result, problem.labels)

    if check:
        cross_check(problem, result)

    if save_dir is not None:
        os.makedirs(save_dir, exist_ok=True)
        csv_filename = f'matching_results_{datetime.now().strftime("%Y%m%d_%H%M%S")}.csv'
        result.to_dataframe(problem.labels).to_csv(os.path.join(save_dir, csv_filename), index=False)
        print(f"Results saved to {csv_filename}")
    return result


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Maximum bipartite matching via Ford-Fulkerson")
    parser.add_argument("--edges", help=f"CSV file with one compatible (left, right) pair per row (e.g. {input_dir}pairs.csv)")
    parser.add_argument("--left-col", default="left")
    parser.add_argument("--right-col", default="right")
    parser.add_argument("--output-dir", default=None,
                        help=f"save the matched pairs as CSV (e.g. {output_dir})")
    parser.add_argument("--check", action="store_true",
                        help="cross-check the result with OR-Tools, PuLP and networkx")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.edges is None:
        for title, problem in demo_problems():
            run(title, problem, check=args.check, save_dir=args.output_dir)
            print("\n")
        return

    try:
        pairs_df = read_pairs(args.edges, args.left_col, args.right_col)
        problem = build_bipartite_network(pairs_df, args.left_col, args.right_col)
    except (ValueError, KeyError, FileNotFoundError) as e:
        print(f"Error: {e}")
        print("Please check the input data.")
        exit(1)

    run(args.edges, problem, check=args.check, save_dir=args.output_dir)


if __name__ == "__main__":
    main()
