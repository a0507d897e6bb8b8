"""Notification channels the dispatcher can fan out to."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Protocol

import httpx

from supportdesk.core.config import Settings

logger = logging.getLogger(__name__)


class NotificationChannel(Protocol):
    """Delivery medium fed a recipient and a message string."""

    name: str

    def send(self, recipient: str, message: str) -> bool:
        ...


@dataclass(slots=True)
class OutboxEntry:
    """Message accepted by an outbox channel."""

    recipient: str
    message: str
    sent_at: datetime


class OutboxChannel:
    """Channel that records recent messages locally and echoes them to the log.

    Stands in for a real transport; the outbox keeps what would have been
    delivered so it can be inspected, keeping at most ``outbox_size`` entries.
    """

    name = "Outbox"
    label = "OUTBOX"

    DEFAULT_OUTBOX_SIZE = 1000

    def __init__(self, *, outbox_size: int = DEFAULT_OUTBOX_SIZE) -> None:
        self.outbox: deque[OutboxEntry] = deque(maxlen=outbox_size)

    def send(self, recipient: str, message: str) -> bool:
        self.outbox.append(
            OutboxEntry(recipient=recipient, message=message, sent_at=datetime.now(timezone.utc))
        )
        logger.info("[%s] To: %s", self.label, recipient)
        logger.info("[%s] Message: %s", self.label, message)
        return True


class EmailChannel(OutboxChannel):
    name = "Email"
    label = "EMAIL"


class SmsChannel(OutboxChannel):
    name = "SMS"
    label = "SMS"


class PushChannel(OutboxChannel):
    name = "Push"
    label = "PUSH"


class WebhookChannel:
    """Post each notification as JSON to an HTTP endpoint."""

    name = "Webhook"

    def __init__(self, url: str, *, timeout: float = 10.0, client: httpx.Client | None = None) -> None:
        self._url = url
        self._timeout = timeout
        self._client = client

    def send(self, recipient: str, message: str) -> bool:
        payload = {"channel": self.name, "recipient": recipient, "message": message}
        try:
            if self._client is not None:
                response = self._client.post(self._url, json=payload, timeout=self._timeout)
            else:
                response = httpx.post(self._url, json=payload, timeout=self._timeout)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Failed to deliver webhook notification to '%s': %s", self._url, exc)
            return False
        return True


_OUTBOX_CHANNELS: dict[str, type[OutboxChannel]] = {
    "email": EmailChannel,
    "sms": SmsChannel,
    "push": PushChannel,
}


def build_channels(settings: Settings) -> list[NotificationChannel]:
    """Instantiate the channels named in ``settings`` in their configured order."""

    channels: list[NotificationChannel] = []
    for key in _normalise_keys(settings.notification_channels):
        channel_cls = _OUTBOX_CHANNELS.get(key)
        if channel_cls is None:
            logger.warning("Ignoring unknown notification channel '%s'.", key)
            continue
        channels.append(channel_cls(outbox_size=settings.outbox_size))
    if settings.webhook_url:
        channels.append(WebhookChannel(settings.webhook_url, timeout=settings.webhook_timeout))
    return channels


def _normalise_keys(keys: Iterable[str]) -> list[str]:
    return [key.strip().lower() for key in keys if key and key.strip()]
