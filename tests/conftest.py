import pytest

from matching_util import SCENARIO_1_EDGES, SCENARIO_2_EDGES, make_bipartite


@pytest.fixture
def scenario1():
    return make_bipartite(5, 5, SCENARIO_1_EDGES)


@pytest.fixture
def scenario2():
    return make_bipartite(6, 5, SCENARIO_2_EDGES)


@pytest.fixture
def reroute():
    """
    0 takes 2 first, 1 can only use 2, so 0 must be moved to 3.
    Edge indices: 0:(0,2) 1:(0,3) 2:(1,2) 3:(4,0) 4:(4,1) 5:(2,5) 6:(3,5)
    """
    return make_bipartite(2, 2, [(0, 2), (0, 3), (1, 2)])
