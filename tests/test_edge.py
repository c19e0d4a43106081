import pytest

from edge import Edge
from errors import InvalidFlowUpdate, InvalidVertex


def test_default_capacity_is_one():
    e = Edge(0, 1)
    assert e.capacity == 1
    assert e.flow == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Edge(0, 1, -1)


def test_other_endpoint():
    e = Edge(3, 7)
    assert e.other_endpoint(3) == 7
    assert e.other_endpoint(7) == 3


def test_other_endpoint_of_stranger():
    with pytest.raises(InvalidVertex) as execinfo:
        Edge(3, 7).other_endpoint(5)
    assert "not an endpoint" in str(execinfo.value)


def test_residual_capacity_by_direction():
    e = Edge(0, 1, 3)
    assert e.residual_capacity_to(1) == 3
    assert e.residual_capacity_to(0) == 0

    e.increase_flow_at(1, 2)
    assert e.flow == 2
    assert e.residual_capacity_to(1) == 1
    assert e.residual_capacity_to(0) == 2


def test_pushing_towards_from_endpoint_cancels_flow():
    e = Edge(0, 1)
    e.increase_flow_at(1, 1)
    e.increase_flow_at(0, 1)
    assert e.flow == 0


@pytest.mark.parametrize(
    ("vertex", "delta"),
    [
        (1, 2),   # more than capacity
        (0, 1),   # nothing to cancel yet
        (1, -1),
    ],
)
def test_invalid_flow_update(vertex, delta):
    e = Edge(0, 1)
    with pytest.raises(InvalidFlowUpdate):
        e.increase_flow_at(vertex, delta)
    assert e.flow == 0


def test_repr():
    e = Edge(0, 1)
    assert "cap=1" in repr(e)
    assert "flow=0" in repr(e)
