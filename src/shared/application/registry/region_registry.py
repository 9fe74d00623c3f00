"""
Region Registry

Lets independent parts of the UI declare "render component X (with these
construction parameters) inside the placeholder named Y", and lets the
placeholder discover everything registered for its name.

Usage:
    registry = RegionRegistry()

    # Register directly
    registry.register("Toolbar", SaveButton)
    registry.register("Toolbar", SaveButton, key="secondary", parameters={"label": "Save as"})

    # Or via decorator
    @registry.component("StatusBar")
    class ClockWidget:
        pass

    # Placeholder side
    registry.add_region_changed_handler(on_regions_changed)
    for registration in registry.get_registrations("Toolbar"):
        host.render(registration.descriptor, registration.parameters)

    # Registration does not notify by itself; batch changes, then broadcast
    registry.raise_regions_changed(["Toolbar", "StatusBar"])

A (region, descriptor, key) triple identifies one slot. A key of None is a
value of its own, not a wildcard. Regions exist only while they hold at
least one registration.

The registry is not thread-safe: confine it to the UI thread or guard it
externally.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar

from src.application.events.event_bus import EventBus
from src.application.events.events import RegionsChanged
from src.shared.application.registry.exceptions import (
    DuplicateRegistrationError,
    RegionNotFoundError,
    RegistrationNotFoundError,
    display_name,
)
from src.utils.message import Log


T = TypeVar('T')  # Component type

RegionsChangedHandler = Callable[[Any, RegionsChanged], None]


def _describe(descriptor: Any, key: Optional[str]) -> str:
    if key is None:
        return display_name(descriptor)
    return f"{display_name(descriptor)} (key={key!r})"


@dataclass(frozen=True)
class Registration:
    """
    One declaration of a component for a region.

    Attributes:
        descriptor: Which component kind to render (usually a class)
        key: Distinguishes several registrations of the same descriptor
        parameters: Construction parameters, passed through untouched
    """
    descriptor: Any
    key: Optional[str] = None
    parameters: Optional[Mapping[str, Any]] = None

    @property
    def display_name(self) -> str:
        return display_name(self.descriptor)

    def matches(self, descriptor: Any, key: Optional[str] = None) -> bool:
        """True when this registration occupies the (descriptor, key) slot."""
        return (self.descriptor is descriptor or self.descriptor == descriptor) and self.key == key


class RegionRegistry:
    """
    Registration table mapping region names to ordered registrations.

    Also the source of the RegionsChanged notification: subscribers attach
    with add_region_changed_handler() and are called as handler(sender, event)
    whenever raise_regions_changed() is invoked.
    """

    def __init__(self, event_bus: Optional[EventBus] = None):
        """
        Initialize registry.

        Args:
            event_bus: Optional bus that also receives every RegionsChanged event
        """
        self._regions: Dict[str, List[Registration]] = {}
        self._handlers: List[RegionsChangedHandler] = []
        self._event_bus = event_bus
        Log.debug("RegionRegistry: Initialized")

    # =========================================================================
    # Registration
    # =========================================================================

    def register(
        self,
        region_name: str,
        descriptor: Any,
        key: Optional[str] = None,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Register a component for a region, creating the region if needed.

        Args:
            region_name: Name of the target region
            descriptor: Component to render (usually a class)
            key: Optional key distinguishing registrations of the same descriptor
            parameters: Optional construction parameters

        Raises:
            DuplicateRegistrationError: If (descriptor, key) already exists in the region
        """
        registrations = self._regions.get(region_name, [])
        if any(r.matches(descriptor, key) for r in registrations):
            error = DuplicateRegistrationError(region_name, descriptor, key)
            Log.warning(f"RegionRegistry: {error}")
            raise error

        registrations.append(Registration(descriptor=descriptor, key=key, parameters=parameters))
        self._regions[region_name] = registrations
        Log.debug(f"RegionRegistry: Registered {_describe(descriptor, key)} with region '{region_name}'")

    def component(
        self,
        region_name: str,
        key: Optional[str] = None,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> Callable[[Type[T]], Type[T]]:
        """
        Decorator to register a component class for a region.

        Example:
            @registry.component("Toolbar", key="save")
            class SaveButton:
                pass
        """
        def decorator(cls: Type[T]) -> Type[T]:
            self.register(region_name, cls, key=key, parameters=parameters)
            return cls
        return decorator

    def unregister(self, region_name: str, descriptor: Any, key: Optional[str] = None) -> None:
        """
        Remove the registration for (descriptor, key) from a region.

        The region itself disappears with its last registration.

        Raises:
            RegionNotFoundError: If the region has no registrations
            RegistrationNotFoundError: If the region does not hold (descriptor, key)
        """
        registrations = self._regions.get(region_name)
        if not registrations:
            error = RegionNotFoundError(region_name)
            Log.warning(f"RegionRegistry: {error}")
            raise error

        for index, registration in enumerate(registrations):
            if registration.matches(descriptor, key):
                del registrations[index]
                break
        else:
            error = RegistrationNotFoundError(region_name, descriptor, key)
            Log.warning(f"RegionRegistry: {error}")
            raise error

        if not registrations:
            del self._regions[region_name]
        Log.debug(f"RegionRegistry: Unregistered {_describe(descriptor, key)} from region '{region_name}'")

    def clear(self) -> None:
        """Drop every registration. Subscribers stay attached; nothing is raised."""
        self._regions.clear()
        Log.debug("RegionRegistry: Cleared all registrations")

    # =========================================================================
    # Queries
    # =========================================================================

    def get_registrations(self, region_name: str) -> Tuple[Registration, ...]:
        """
        Snapshot of the registrations for a region, in registration order.

        Unknown regions yield an empty tuple.
        """
        return tuple(self._regions.get(region_name, ()))

    def region_names(self) -> List[str]:
        """Names of all regions that currently hold registrations."""
        return list(self._regions.keys())

    def has_region(self, region_name: str) -> bool:
        return region_name in self._regions

    def is_registered(self, region_name: str, descriptor: Any, key: Optional[str] = None) -> bool:
        return any(r.matches(descriptor, key) for r in self._regions.get(region_name, ()))

    def count(self, region_name: Optional[str] = None) -> int:
        """Registrations in one region, or across all regions when region_name is None."""
        if region_name is not None:
            return len(self._regions.get(region_name, ()))
        return sum(len(registrations) for registrations in self._regions.values())

    # =========================================================================
    # Change notification
    # =========================================================================

    def add_region_changed_handler(self, handler: RegionsChangedHandler) -> None:
        """
        Attach a handler called as handler(sender, event) on every broadcast.

        Attaching the same handler twice makes it run twice.
        """
        self._handlers.append(handler)

    def remove_region_changed_handler(self, handler: RegionsChangedHandler) -> None:
        """Detach one attachment of handler. Unknown handlers are ignored."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def get_subscriber_count(self) -> int:
        return len(self._handlers)

    def raise_regions_changed(self, region_names: Optional[Iterable[str]] = None) -> None:
        """
        Tell subscribers that the given regions' content is stale.

        Handlers run synchronously, in attach order, and their exceptions
        propagate to the caller. The payload is region_names, unmodified.

        Args:
            region_names: Regions to refresh (None when unspecified)
        """
        event = RegionsChanged(regions=region_names)
        handlers = list(self._handlers)

        if handlers:
            Log.debug(f"RegionRegistry: Raising RegionsChanged for {region_names!r} to {len(handlers)} handlers")
        for handler in handlers:
            handler(self, event)

        if self._event_bus is not None:
            self._event_bus.publish(event)


# =============================================================================
# Global Registry
# =============================================================================

_region_registry: Optional[RegionRegistry] = None


def get_region_registry() -> RegionRegistry:
    """
    Get or create the process-wide region registry.

    Example:
        registry = get_region_registry()
        registry.register("Toolbar", SaveButton)
    """
    global _region_registry
    if _region_registry is None:
        _region_registry = RegionRegistry()
    return _region_registry


def reset_region_registry() -> None:
    """
    Drop the process-wide registry.

    Primarily used for testing.
    """
    global _region_registry
    _region_registry = None


def register_region_component(
    region_name: str,
    key: Optional[str] = None,
    parameters: Optional[Mapping[str, Any]] = None,
) -> Callable[[Type[T]], Type[T]]:
    """
    Decorator to register a component in the process-wide registry.

    Example:
        @register_region_component("Toolbar", parameters={"label": "Save"})
        class SaveButton:
            pass
    """
    def decorator(cls: Type[T]) -> Type[T]:
        get_region_registry().register(region_name, cls, key=key, parameters=parameters)
        return cls
    return decorator
