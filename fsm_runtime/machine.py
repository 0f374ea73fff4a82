"""FSM engine: current state, transitions and one-step undo/redo."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fsm_runtime.config import FSMConfig
from fsm_runtime.types import ConfigError, EventId, StateId, TransitionError

logger = logging.getLogger(__name__)


class FSM:
    """Finite state machine over a static state/transition table.

    The machine remembers exactly one step back (``previous_state``) and one
    step forward (``next_state``). Any successful ``change_state`` or
    ``trigger`` overwrites the back slot; only ``undo`` fills the forward
    slot.

    ``reset`` returns to the initial state but keeps both history slots,
    and ``change_state`` keeps the forward slot. Use ``clear_history`` to
    drop them.

    Not thread-safe. Guard shared instances with an external lock.
    """

    def __init__(self, config: FSMConfig | Mapping[str, Any] | None) -> None:
        if config is None:
            raise ConfigError("FSM requires a configuration")
        if not isinstance(config, FSMConfig):
            config = FSMConfig.from_dict(config)
        self._config = config
        self._current: StateId = config.initial
        self._previous: StateId | None = None
        self._next: StateId | None = None
        logger.debug("FSM created in state %r with %d states", self._current, len(config.states))

    @property
    def config(self) -> FSMConfig:
        return self._config

    @property
    def state(self) -> StateId:
        return self._current

    @property
    def previous_state(self) -> StateId | None:
        return self._previous

    @property
    def next_state(self) -> StateId | None:
        return self._next

    @property
    def can_undo(self) -> bool:
        return self._previous is not None

    @property
    def can_redo(self) -> bool:
        return self._next is not None

    def get_state(self) -> StateId:
        """Return the active state."""
        return self._current

    def change_state(self, state: StateId) -> None:
        """Jump directly to a declared state. Leaves the redo slot alone."""
        if state not in self._config.states:
            raise TransitionError(
                f"Unknown state {state!r}", state=self._current, target=state,
            )
        self._move(state)
        logger.debug("FSM changed state %r -> %r", self._previous, state)

    def trigger(self, event: EventId) -> StateId:
        """Follow the current state's transition for ``event``.

        Returns the new state. The target is not checked against the
        declared states.
        """
        state_def = self._config.states.get(self._current)
        if state_def is None or event not in state_def.transitions:
            raise TransitionError(
                f"No transition for event {event!r} from state {self._current!r}",
                state=self._current,
                event=event,
            )
        target = state_def.transitions[event]
        self._move(target)
        logger.debug("FSM event %r: %r -> %r", event, self._previous, target)
        return target

    def reset(self) -> None:
        """Return to the initial state. History slots are kept."""
        self._current = self._config.initial
        logger.debug("FSM reset to %r", self._current)

    def get_states(self, event: EventId | None = None) -> list[StateId]:
        """List declared states, or only those that handle ``event``.

        Declaration order is preserved in both cases.
        """
        states = self._config.states
        if event is None:
            return list(states)
        return [name for name, state_def in states.items() if event in state_def.transitions]

    def undo(self) -> bool:
        """Step back to the previous state. Returns False if there is none."""
        if self._previous is None:
            return False
        self._next = self._current
        self._current = self._previous
        self._previous = None
        logger.debug("FSM undo %r -> %r", self._next, self._current)
        return True

    def redo(self) -> bool:
        """Step forward to the undone state. Returns False if there is none."""
        if self._next is None:
            return False
        self._current = self._next
        self._next = None
        logger.debug("FSM redo -> %r", self._current)
        return True

    def clear_history(self) -> None:
        self._previous = None
        self._next = None
        logger.debug("FSM history cleared")

    def _move(self, target: StateId) -> None:
        self._previous = self._current
        self._current = target

    def __repr__(self) -> str:
        return (
            f"FSM(state={self._current!r}, previous={self._previous!r}, "
            f"next={self._next!r})"
        )
