"""
Shared registry module.

Provides the region registry for UI composition:
- RegionRegistry: Region name -> ordered component registrations
- Registration: One (descriptor, key, parameters) declaration
- register_region_component: Decorator for the process-wide registry
"""
from .exceptions import (
    RegionRegistryError,
    DuplicateRegistrationError,
    RegionNotFoundError,
    RegistrationNotFoundError,
)
from .region_registry import (
    RegionRegistry,
    Registration,
    get_region_registry,
    reset_region_registry,
    register_region_component,
)

__all__ = [
    'RegionRegistry',
    'Registration',
    'get_region_registry',
    'reset_region_registry',
    'register_region_component',
    'RegionRegistryError',
    'DuplicateRegistrationError',
    'RegionNotFoundError',
    'RegistrationNotFoundError',
]
