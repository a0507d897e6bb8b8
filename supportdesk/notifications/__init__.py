"""Notification fan-out to delivery channels."""

from .channels import (
    EmailChannel,
    NotificationChannel,
    OutboxChannel,
    OutboxEntry,
    PushChannel,
    SmsChannel,
    WebhookChannel,
    build_channels,
)
from .dispatcher import NotificationDispatcher

__all__ = [
    "EmailChannel",
    "NotificationChannel",
    "NotificationDispatcher",
    "OutboxChannel",
    "OutboxEntry",
    "PushChannel",
    "SmsChannel",
    "WebhookChannel",
    "build_channels",
]
