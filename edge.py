from errors import InvalidFlowUpdate, InvalidVertex

DEFAULT_CAPACITY = 1  # bipartite matching only ever needs unit channels


class Edge:
    """
    One compatibility link, shared by the adjacency lists of both endpoints.
    `flow` is a single quantity travelling u -> v; residual capacity depends
    on which endpoint the edge is traversed towards.
    """

    __slots__ = (
        "u",          # "from" endpoint
        "v",          # "to" endpoint
        "capacity",   # fixed at construction
        "flow",       # current flow u -> v
    )

    def __init__(self, u: int, v: int, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"edge capacity must be non-negative, got {capacity}")
        self.u = u
        self.v = v
        self.capacity = capacity
        self.flow = 0

    # ------------------------------------------------------------------ helpers

    def other_endpoint(self, vertex: int) -> int:
        if vertex == self.u:
            return self.v
        if vertex == self.v:
            return self.u
        raise InvalidVertex(f"vertex {vertex} is not an endpoint of {self!r}")

    def residual_capacity_to(self, vertex: int) -> int:
        """
        Flow that can still be pushed towards `vertex`.
        Towards u this is the flow we could cancel, towards v the unused capacity.
        """
        if vertex == self.u:
            return self.flow
        return self.capacity - self.flow

    def increase_flow_at(self, vertex: int, delta: int) -> None:
        """
        Push `delta` units through this edge arriving at `vertex`.
        """
        if delta < 0 or delta > self.residual_capacity_to(vertex):
            raise InvalidFlowUpdate(
                f"cannot push {delta} towards {vertex} on {self!r}, "
                f"residual is {self.residual_capacity_to(vertex)}"
            )
        if vertex == self.u:
            self.flow -= delta
        else:
            self.flow += delta

    # ------------------------------------------------------------------ dunder

    def __repr__(self) -> str:  # nice for debugging
        return f"Edge({self.u}→{self.v}, cap={self.capacity}, flow={self.flow})"
