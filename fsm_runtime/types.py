"""Shared type aliases and exceptions for the FSM runtime."""
from __future__ import annotations

StateId = str
EventId = str


class ConfigError(ValueError):
    """Raised when an FSM is constructed without a readable configuration."""


class TransitionError(KeyError):
    """Raised when a transition is rejected. The machine is left unchanged.

    ``state`` is the current state at the time of the call. ``event`` is set
    for rejected triggers, ``target`` for rejected direct jumps.
    """

    def __init__(
        self,
        message: str,
        state: StateId,
        event: EventId | None = None,
        target: StateId | None = None,
    ) -> None:
        self.state = state
        self.event = event
        self.target = target
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])
