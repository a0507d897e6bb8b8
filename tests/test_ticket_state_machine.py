import itertools

from supportdesk.tickets.state import TicketStateMachine, TicketStatus


def test_initial_state_is_open():
    assert TicketStateMachine.initial_state() is TicketStatus.OPEN


def test_every_transition_is_allowed():
    for current, new in itertools.product(TicketStatus, repeat=2):
        assert TicketStateMachine.can_transition(current, new)


def test_closed_is_not_terminal():
    assert TicketStateMachine.can_transition(TicketStatus.CLOSED, TicketStatus.OPEN)
