"""Mini README: Provider registry enabling pluggable mesh sources.

Structure:
    * MeshProviderRegistry - maps ``provider_name`` identifiers onto
      ``MeshProvider`` classes and builds them from a configured source.

Usage:
    Built-in providers decorate themselves with ``@REGISTRY.register``; AR
    bridges living in other packages do the same at import time. Identifiers
    are case-insensitive. Registering a second class under an existing name
    replaces the first and logs a warning, which lets a host swap in a
    device-specific bridge without editing configuration.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, TypeVar

from .base import MeshProvider
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

ProviderT = TypeVar("ProviderT", bound=Type[MeshProvider])


class MeshProviderRegistry:
    """Name-keyed catalogue of mesh provider classes."""

    def __init__(self) -> None:
        self._providers: Dict[str, Type[MeshProvider]] = {}

    def register(self, provider: ProviderT) -> ProviderT:
        """Register ``provider`` under its ``provider_name`` and return it unchanged."""

        identifier = provider.provider_name.strip().lower()
        if not identifier:
            raise ValueError(f"{provider.__name__} does not declare a provider_name")
        previous = self._providers.get(identifier)
        if previous is not None and previous is not provider:
            LOGGER.warning(
                "Mesh provider '%s' now resolves to %s instead of %s",
                identifier,
                provider.__name__,
                previous.__name__,
            )
        self._providers[identifier] = provider
        return provider

    def unregister(self, identifier: str) -> Optional[Type[MeshProvider]]:
        return self._providers.pop(identifier.strip().lower(), None)

    def available_providers(self) -> List[str]:
        return sorted(self._providers)

    def create(self, identifier: str, *, source: Optional[Any] = None) -> MeshProvider:
        """Instantiate the provider registered as ``identifier``."""

        key = identifier.strip().lower()
        provider_cls = self._providers.get(key)
        if provider_cls is None:
            known = ", ".join(self.available_providers()) or "none"
            raise KeyError(f"Unknown mesh provider '{identifier}' (registered: {known})")
        LOGGER.info("Creating mesh provider '%s' from %s", key, source if source is not None else "no source")
        return provider_cls(source=source)


REGISTRY = MeshProviderRegistry()
