"""Creation-time ticket rules and display names."""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from .state import TicketStatus


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class TicketCategory(str, Enum):
    TECHNICAL = "technical"
    BILLING = "billing"
    GENERAL = "general"
    COMPLAINT = "complaint"
    FEATURE_REQUEST = "feature_request"


UNKNOWN_NAME = "Unknown"
BASE_TAG = "new"

AUTO_ASSIGNED_AGENTS: Mapping[Priority, str] = {
    Priority.CRITICAL: "Senior-Agent-001",
    Priority.HIGH: "Agent-002",
}

CATEGORY_TAGS: Mapping[TicketCategory, str] = {
    TicketCategory.TECHNICAL: "technical-support",
    TicketCategory.BILLING: "finance",
    TicketCategory.COMPLAINT: "urgent",
    TicketCategory.FEATURE_REQUEST: "product",
}

CATEGORY_NAMES: Mapping[TicketCategory, str] = {
    TicketCategory.TECHNICAL: "Technical",
    TicketCategory.BILLING: "Billing",
    TicketCategory.GENERAL: "General",
    TicketCategory.COMPLAINT: "Complaint",
    TicketCategory.FEATURE_REQUEST: "Feature Request",
}

PRIORITY_NAMES: Mapping[Priority, str] = {
    Priority.LOW: "Low",
    Priority.MEDIUM: "Medium",
    Priority.HIGH: "High",
    Priority.CRITICAL: "Critical",
}

STATUS_NAMES: Mapping[TicketStatus, str] = {
    TicketStatus.OPEN: "Open",
    TicketStatus.IN_PROGRESS: "In Progress",
    TicketStatus.RESOLVED: "Resolved",
    TicketStatus.CLOSED: "Closed",
}


def get_auto_assigned_agent(priority: Priority) -> str:
    """Return the agent picked up by ``priority`` tickets, or ``""`` for none."""

    return AUTO_ASSIGNED_AGENTS.get(priority, "")


def get_default_tags(category: TicketCategory) -> list[str]:
    tags = [BASE_TAG]
    category_tag = CATEGORY_TAGS.get(category)
    if category_tag:
        tags.append(category_tag)
    return tags


def get_category_name(category: TicketCategory) -> str:
    return CATEGORY_NAMES.get(category, UNKNOWN_NAME)


def get_priority_name(priority: Priority) -> str:
    return PRIORITY_NAMES.get(priority, UNKNOWN_NAME)


def get_status_name(status: TicketStatus) -> str:
    return STATUS_NAMES.get(status, UNKNOWN_NAME)
