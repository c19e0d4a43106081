from typing import Iterator, List, Optional, Tuple

from flow_network import FlowNetwork


def depth_first_search(
    network: FlowNetwork,
    source: int,
    sink: int,
) -> Tuple[List[bool], List[Optional[int]]]:
    """
    DFS over edges with positive residual capacity, starting at `source`.

    Uses an explicit stack of adjacency iterators so that the order in which
    vertices are marked is the same as a recursive DFS scanning adjacency
    lists in insertion order. Nothing is expanded past `sink`, and the
    traversal always runs to exhaustion.

    Returns (visited, edge_to): edge_to[w] is the index of the edge used to
    first reach w, or None. Both are fresh lists on every call.
    """
    n = network.vertex_count
    visited = [False] * n
    edge_to: List[Optional[int]] = [None] * n

    visited[source] = True
    if source == sink:
        return visited, edge_to

    stack: List[Tuple[int, Iterator[int]]] = [(source, iter(network.adjacency[source]))]

    while stack:
        u, pending = stack[-1]
        for index in pending:
            e = network.edges[index]
            w = e.other_endpoint(u)
            # check if visited
            if visited[w]:
                continue
            # check if edge has residual cap towards w
            if e.residual_capacity_to(w) <= 0:
                continue

            visited[w] = True
            edge_to[w] = index
            if w != sink:
                stack.append((w, iter(network.adjacency[w])))
            break
        else:
            # adjacency of u exhausted
            stack.pop()

    return visited, edge_to


def get_augmenting_path(
    network: FlowNetwork,
    s: int,
    t: int,
) -> Tuple[List[Tuple[int, int]], bool]:
    """
    Returns (path, found_flag). `path` lists (vertex, edge_index) steps from
    s to t: the vertex reached and the edge it was reached through.
    If no s-t path exists, found_flag == False and path is empty.
    """
    visited, edge_to = depth_first_search(network, s, t)

    # Sink t not reachable
    if not visited[t]:
        return [], False

    # reconstruct the path
    path = []
    v = t
    while v != s:
        index = edge_to[v]
        path.append((v, index))
        v = network.edges[index].other_endpoint(v)
    path.reverse()

    return path, True
