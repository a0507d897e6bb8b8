from __future__ import annotations

import pytest

from supportdesk.core.config import get_settings
from supportdesk.customers.repository import InMemoryCustomerRepository
from supportdesk.customers.service import CustomerService
from supportdesk.notifications.dispatcher import NotificationDispatcher
from supportdesk.tickets.repository import InMemoryTicketRepository
from supportdesk.tickets.service import TicketService


class RecordingLogger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)


class ExplodingLogger:
    def log(self, message: str) -> None:
        raise OSError("disk full")


class RecordingChannel:
    def __init__(self, name: str, *, succeed: bool = True, call_log: list[str] | None = None) -> None:
        self.name = name
        self.succeed = succeed
        self.calls: list[tuple[str, str]] = []
        self._call_log = call_log

    def send(self, recipient: str, message: str) -> bool:
        self.calls.append((recipient, message))
        if self._call_log is not None:
            self._call_log.append(self.name)
        return self.succeed


class ExplodingChannel:
    name = "Broken"

    def __init__(self) -> None:
        self.calls = 0

    def send(self, recipient: str, message: str) -> bool:
        self.calls += 1
        raise ConnectionError("transport unavailable")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def event_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def exploding_logger() -> ExplodingLogger:
    return ExplodingLogger()


@pytest.fixture
def make_channel():
    def factory(name: str, *, succeed: bool = True, call_log: list[str] | None = None) -> RecordingChannel:
        return RecordingChannel(name, succeed=succeed, call_log=call_log)

    return factory


@pytest.fixture
def exploding_channel() -> ExplodingChannel:
    return ExplodingChannel()


@pytest.fixture
def customer_repository() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


@pytest.fixture
def ticket_repository() -> InMemoryTicketRepository:
    return InMemoryTicketRepository()


@pytest.fixture
def channel(make_channel) -> RecordingChannel:
    return make_channel("Email")


@pytest.fixture
def dispatcher(channel, event_logger) -> NotificationDispatcher:
    dispatcher = NotificationDispatcher(event_logger=event_logger)
    dispatcher.add_channel(channel)
    return dispatcher


@pytest.fixture
def customer_service(customer_repository, event_logger) -> CustomerService:
    return CustomerService(customer_repository, event_logger=event_logger)


@pytest.fixture
def ticket_service(ticket_repository, customer_repository, dispatcher, event_logger) -> TicketService:
    return TicketService(ticket_repository, customer_repository, dispatcher, event_logger=event_logger)
