"""
Shared module containing cross-cutting concerns.

Structure:
    shared/
        application/
            registry/       - RegionRegistry for UI composition

Usage:
    # Registry
    from src.shared.application.registry import RegionRegistry, register_region_component

    # Events
    from src.application.events import EventBus, RegionsChanged

    # Utils
    from src.utils import Log, Settings, apply_logging_settings
"""
