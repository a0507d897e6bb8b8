from __future__ import annotations

import logging
from threading import Lock

from opentelemetry import trace

from supportdesk.core.logging import EventLogger, emit_event

from .channels import NotificationChannel

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class NotificationDispatcher:
    """Broadcast one message to every registered channel.

    Channels are tried in registration order. A channel that reports failure
    or raises is skipped without retry, and the caller gets no signal either
    way.
    """

    def __init__(self, *, event_logger: EventLogger | None = None) -> None:
        self._channels: list[NotificationChannel] = []
        self._lock = Lock()
        self._event_logger = event_logger

    @property
    def channels(self) -> tuple[NotificationChannel, ...]:
        with self._lock:
            return tuple(self._channels)

    def add_channel(self, channel: NotificationChannel) -> None:
        with self._lock:
            self._channels.append(channel)
        emit_event(self._event_logger, f"Added notification channel: {channel.name}")

    def notify(self, recipient: str, message: str) -> None:
        with tracer.start_as_current_span("notifications.notify") as span:
            channels = self.channels
            span.set_attribute("notifications.channel_count", len(channels))
            for channel in channels:
                try:
                    delivered = channel.send(recipient, message)
                except Exception as exc:
                    logger.warning("Notification channel '%s' raised: %s", channel.name, exc)
                    continue
                if delivered:
                    emit_event(self._event_logger, f"Notification sent via {channel.name} to {recipient}")
