"""
Region Signals

Re-emits RegionRegistry change notifications as a Qt signal so placeholder
widgets can connect slots instead of registry handlers.
"""
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from src.application.events.events import RegionsChanged
from src.shared.application.registry.region_registry import RegionRegistry, get_region_registry


class RegionSignals(QObject):
    """Emits regions_changed(regions) whenever the attached registry broadcasts."""
    regions_changed = pyqtSignal(object)

    def __init__(self, registry: Optional[RegionRegistry] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._registry: Optional[RegionRegistry] = None
        if registry is not None:
            self.attach(registry)

    @property
    def registry(self) -> Optional[RegionRegistry]:
        return self._registry

    def attach(self, registry: RegionRegistry) -> None:
        """Start forwarding broadcasts from registry (detaches from any previous one)."""
        if registry is self._registry:
            return
        self.detach()
        registry.add_region_changed_handler(self._on_regions_changed)
        self._registry = registry

    def detach(self) -> None:
        if self._registry is not None:
            self._registry.remove_region_changed_handler(self._on_regions_changed)
            self._registry = None

    def _on_regions_changed(self, sender, event: RegionsChanged) -> None:
        self.regions_changed.emit(event.regions)


_region_signals: Optional[RegionSignals] = None  # Lazily created


def _get_region_signals() -> RegionSignals:
    """Get or create the RegionSignals bound to the process-wide registry."""
    global _region_signals
    if _region_signals is None:
        _region_signals = RegionSignals()
    # Follows the process-wide registry if it was reset
    _region_signals.attach(get_region_registry())
    return _region_signals


def on_regions_changed(callback) -> None:
    """
    Connect a callback to the process-wide regions_changed signal.

    Usage:
        from ui.qt_gui.region_signals import on_regions_changed
        on_regions_changed(self._refresh_region)
    """
    _get_region_signals().regions_changed.connect(callback)


def disconnect_regions_changed(callback) -> None:
    """Disconnect a callback from the process-wide regions_changed signal."""
    try:
        _get_region_signals().regions_changed.disconnect(callback)
    except TypeError:
        pass  # Not connected


def reset_region_signals() -> None:
    """Detach and drop the process-wide RegionSignals. Primarily used for testing."""
    global _region_signals
    if _region_signals is not None:
        _region_signals.detach()
        _region_signals = None
