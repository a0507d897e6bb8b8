from __future__ import annotations

from enum import Enum


class TicketStatus(str, Enum):
    """Supported states for a ticket's lifecycle."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class TicketStateMachine:
    """Describe ticket lifecycle transitions.

    Every status may follow every other status, including itself; there is
    no terminal state.
    """

    _TRANSITIONS: dict[TicketStatus, frozenset[TicketStatus]] = {
        status: frozenset(TicketStatus) for status in TicketStatus
    }

    @classmethod
    def initial_state(cls) -> TicketStatus:
        return TicketStatus.OPEN

    @classmethod
    def can_transition(cls, current: TicketStatus, new: TicketStatus) -> bool:
        return new in cls._TRANSITIONS.get(current, frozenset())
