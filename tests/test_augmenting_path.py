import random

import pytest

from add_edge import create_network
from get_augmenting_path import depth_first_search, get_augmenting_path
from matching_util import make_bipartite, random_cases
from max_flow import compute_max_flow


def recursive_dfs(network, source, sink):
    visited = [False] * network.vertex_count
    edge_to = [None] * network.vertex_count

    def visit(v):
        if v == sink:
            return
        for index in network.adjacency[v]:
            e = network.edges[index]
            w = e.other_endpoint(v)
            if not visited[w] and e.residual_capacity_to(w) > 0:
                edge_to[w] = index
                visited[w] = True
                visit(w)

    visited[source] = True
    visit(source)
    return visited, edge_to


def test_first_path(scenario2):
    network, _, _, source, sink = scenario2
    path, found = get_augmenting_path(network, source, sink)
    assert found
    assert [v for v, _ in path] == [0, 7, sink]
    assert [network.edges[index].u for _, index in path] == [source, 0, 7]


def test_path_through_reverse_edge(reroute):
    network, _, _, source, sink = reroute
    compute_max_flow(network, source, sink, max_rounds=1)

    path, found = get_augmenting_path(network, source, sink)
    assert found
    assert path == [(1, 4), (2, 2), (0, 0), (3, 1), (5, 6)]


def test_no_path_when_saturated(scenario2):
    network, _, _, source, sink = scenario2
    compute_max_flow(network, source, sink)
    path, found = get_augmenting_path(network, source, sink)
    assert not found
    assert path == []


def test_source_equals_sink():
    network, _, _, source, _ = make_bipartite(1, 1, [(0, 1)])
    visited, edge_to = depth_first_search(network, source, source)
    assert visited[source]
    assert sum(visited) == 1
    assert all(index is None for index in edge_to)

    path, found = get_augmenting_path(network, source, source)
    assert found
    assert path == []


def test_nothing_expanded_past_sink():
    # 0 is only reachable through the sink
    network, _, _, source, sink = make_bipartite(0, 1, [])
    network.add_edge(sink, 0)
    network.add_edge(0, sink)
    visited, _ = depth_first_search(network, source, sink)
    assert not visited[sink]

    network.add_edge(source, sink)
    visited, _ = depth_first_search(network, source, sink)
    assert visited[sink]
    assert not visited[0]


def test_search_state_is_fresh_every_call(scenario1):
    network, _, _, source, sink = scenario1
    first = depth_first_search(network, source, sink)
    second = depth_first_search(network, source, sink)
    assert first == second
    assert first[0] is not second[0]


@pytest.mark.parametrize(("n_left", "n_right", "edges"), random_cases(40))
def test_matches_recursive_order(n_left, n_right, edges):
    network, _, _, source, sink = make_bipartite(n_left, n_right, edges)
    rng = random.Random(len(edges))
    # compare on a partially augmented network so reverse edges matter too
    compute_max_flow(network, source, sink, max_rounds=rng.randint(0, 3))
    assert depth_first_search(network, source, sink) == recursive_dfs(network, source, sink)


def test_deep_chain_does_not_recurse():
    n = 5000
    network = create_network(n)
    for v in range(n - 1):
        network.add_edge(v, v + 1)
    path, found = get_augmenting_path(network, 0, n - 1)
    assert found
    assert len(path) == n - 1
