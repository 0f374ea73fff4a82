"""Shared fixtures for FSM tests."""
import pytest
from fsm_runtime import FSM


@pytest.fixture
def traffic_light():
    """Three-state cycle driven by a single 'timer' event."""
    return FSM({
        "initial": "green",
        "states": {
            "green": {"transitions": {"timer": "yellow"}},
            "yellow": {"transitions": {"timer": "red"}},
            "red": {"transitions": {"timer": "green"}},
        },
    })


@pytest.fixture
def two_state():
    """A -go-> B, B has no transitions."""
    return FSM({
        "initial": "A",
        "states": {
            "A": {"transitions": {"go": "B"}},
            "B": {"transitions": {}},
        },
    })
