class MatchingError(Exception):
    """
    Base class for every error raised by the matching core.
    """


class InvalidVertex(MatchingError, ValueError):
    """
    A vertex index outside [0, vertex_count), a negative vertex count,
    or a source/sink pair that cannot be used for a flow computation.
    """


class InvalidFlowUpdate(MatchingError, RuntimeError):
    """
    Attempt to push more flow through an edge than its residual capacity allows.
    """
