"""Event system for application layer"""

from src.application.events.events import (
    DomainEvent,
    RegionsChanged,
)
from src.application.events.event_bus import EventBus

__all__ = [
    'DomainEvent',
    'RegionsChanged',
    'EventBus',
]
