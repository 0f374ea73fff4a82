"""fsm-runtime - A minimal finite state machine with one-step undo/redo."""
from __future__ import annotations

from fsm_runtime.config import FSMConfig, StateDef
from fsm_runtime.machine import FSM
from fsm_runtime.types import ConfigError, EventId, StateId, TransitionError

__all__ = [
    "FSM",
    "FSMConfig",
    "StateDef",
    "ConfigError",
    "TransitionError",
    "StateId",
    "EventId",
]
