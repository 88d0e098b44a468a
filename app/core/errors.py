from __future__ import annotations


class EventStatusError(Exception):
    """Base exception for the event status service."""


class ConfigError(EventStatusError):
    """Configuration is missing, invalid, or inconsistent."""


class EventRepositoryError(EventStatusError):
    """Event lookup failed at the storage or transport layer."""
