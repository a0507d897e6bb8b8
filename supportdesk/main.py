from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass

from fastapi import FastAPI

from supportdesk.api.routes import customers, health, tickets
from supportdesk.core.config import Settings, get_settings
from supportdesk.core.logging import LoggingEventLogger, configure_logging, init_tracer, shutdown_tracer
from supportdesk.customers.repository import InMemoryCustomerRepository
from supportdesk.customers.service import CustomerService
from supportdesk.notifications.channels import build_channels
from supportdesk.notifications.dispatcher import NotificationDispatcher
from supportdesk.tickets.repository import InMemoryTicketRepository
from supportdesk.tickets.service import TicketService


@dataclass(slots=True)
class ServiceContainer:
    """Explicitly constructed collaborators shared by one application instance."""

    customer_repository: InMemoryCustomerRepository
    ticket_repository: InMemoryTicketRepository
    dispatcher: NotificationDispatcher
    customer_service: CustomerService
    ticket_service: TicketService


def build_services(settings: Settings) -> ServiceContainer:
    event_logger = LoggingEventLogger()
    customer_repository = InMemoryCustomerRepository()
    ticket_repository = InMemoryTicketRepository()

    dispatcher = NotificationDispatcher(event_logger=event_logger)
    for channel in build_channels(settings):
        dispatcher.add_channel(channel)

    customer_service = CustomerService(
        customer_repository,
        event_logger=event_logger,
        counter_seed=settings.id_counter_seed,
    )
    ticket_service = TicketService(
        ticket_repository,
        customer_repository,
        dispatcher,
        event_logger=event_logger,
        counter_seed=settings.id_counter_seed,
    )
    return ServiceContainer(
        customer_repository=customer_repository,
        ticket_repository=ticket_repository,
        dispatcher=dispatcher,
        customer_service=customer_service,
        ticket_service=ticket_service,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger = configure_logging(settings)
    tracer_provider = init_tracer(settings)

    app.state.logger = logger
    app.state.tracer_provider = tracer_provider

    services = build_services(settings)
    app.state.services = services
    app.state.customer_service = services.customer_service
    app.state.ticket_service = services.ticket_service
    logger.info("%s started with %d notification channel(s)", settings.app_name, len(services.dispatcher.channels))
    try:
        yield
    finally:
        shutdown_tracer(tracer_provider)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.include_router(health.router)
    app.include_router(customers.router)
    app.include_router(tickets.router)
    return app


app = create_app()
