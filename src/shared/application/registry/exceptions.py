"""
Region registry errors.

All of these are contract violations by the caller; the registry raises
them immediately and never retries.
"""
from typing import Any, Optional


def display_name(descriptor: Any) -> str:
    """Human-readable name of a component descriptor (class name when available)."""
    return getattr(descriptor, "__name__", None) or str(descriptor)


def _with_key(key: Optional[str]) -> str:
    return f' with key "{key}"' if key is not None else ""


class RegionRegistryError(Exception):
    """Base exception for region registry operations."""
    pass


class DuplicateRegistrationError(RegionRegistryError, ValueError):
    """Raised when (descriptor, key) is already registered in a region."""

    def __init__(self, region_name: str, descriptor: Any, key: Optional[str] = None):
        self.region_name = region_name
        self.descriptor = descriptor
        self.key = key
        super().__init__(
            f"The type {display_name(descriptor)} is already registered"
            f"{_with_key(key)} with region \"{region_name}\"."
        )


class RegionNotFoundError(RegionRegistryError, LookupError):
    """Raised when a region has no registrations at all."""

    def __init__(self, region_name: str):
        self.region_name = region_name
        super().__init__(f"The region \"{region_name}\" does not exist.")


class RegistrationNotFoundError(RegionRegistryError, LookupError):
    """Raised when a region exists but does not hold (descriptor, key)."""

    def __init__(self, region_name: str, descriptor: Any, key: Optional[str] = None):
        self.region_name = region_name
        self.descriptor = descriptor
        self.key = key
        super().__init__(
            f"The type {display_name(descriptor)} is not registered"
            f"{_with_key(key)} with region \"{region_name}\"."
        )
