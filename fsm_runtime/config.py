"""FSM configuration dataclasses."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from fsm_runtime.types import ConfigError, EventId, StateId


@dataclass(frozen=True)
class StateDef:
    """A single state: maps event names to target state names.

    Targets are not checked against the machine's state set.
    """

    transitions: Mapping[EventId, StateId] | None = field(default_factory=dict)

    def __post_init__(self) -> None:
        transitions = self.transitions if self.transitions is not None else {}
        if not isinstance(transitions, Mapping):
            raise ConfigError(
                f"Transitions must be a mapping, got {type(transitions).__name__}"
            )
        object.__setattr__(self, "transitions", MappingProxyType(dict(transitions)))


def _as_state_def(name: StateId, raw: Any) -> StateDef:
    if isinstance(raw, StateDef):
        return raw
    if not isinstance(raw, Mapping):
        raise ConfigError(f"State {name!r} must be a mapping, got {type(raw).__name__}")
    transitions = raw.get("transitions")
    if transitions is not None and not isinstance(transitions, Mapping):
        raise ConfigError(
            f"Transitions of state {name!r} must be a mapping, "
            f"got {type(transitions).__name__}"
        )
    return StateDef(transitions=transitions)


@dataclass(frozen=True)
class FSMConfig:
    """Immutable configuration for an FSM.

    Attributes:
        initial: State the machine starts in and returns to on reset.
        states: State definitions in declaration order. ``get_states``
            reports states in this order. Plain ``{"transitions": ...}``
            records are converted to ``StateDef``.
    """

    initial: StateId
    states: Mapping[StateId, StateDef]

    def __post_init__(self) -> None:
        if not isinstance(self.states, Mapping):
            raise ConfigError(
                f"Config 'states' must be a mapping, got {type(self.states).__name__}"
            )
        states = {name: _as_state_def(name, raw) for name, raw in self.states.items()}
        object.__setattr__(self, "states", MappingProxyType(states))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FSMConfig:
        """Build a config from the plain record shape.

        ``{"initial": "A", "states": {"A": {"transitions": {"go": "B"}}}}``

        A state without ``transitions`` gets an empty transition map. The
        state graph itself is not validated.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")
        for key in ("initial", "states"):
            if key not in data:
                raise ConfigError(f"Config is missing required key {key!r}")
        return cls(initial=data["initial"], states=data["states"])
