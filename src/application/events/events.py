"""
Domain Events

Events that represent significant occurrences in the domain.
Used for loose coupling between components.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterable, Optional


@dataclass
class DomainEvent:
    """Base class for all domain events"""
    name: ClassVar[str] = "DomainEvent"
    data: Dict[str, Any] = field(default_factory=dict)


# Region Events
@dataclass
class RegionsChanged(DomainEvent):
    """
    Raised when the content of one or more regions should be considered stale.

    ``regions`` is exactly what the caller passed to
    ``RegionRegistry.raise_regions_changed``; None means "not specified".
    """
    name: ClassVar[str] = "RegionsChanged"
    regions: Optional[Iterable[str]] = None
