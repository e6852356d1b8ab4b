"""
Algorithm registry.

Maps algorithm names to provider instances. Names are case-sensitive and
used verbatim as keys.

Registration is expected to finish during initialization, before any
concurrent sign/verify traffic starts. The registry does not lock:
registering while dispatches are in flight is unsupported.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional
import logging

from .algorithms import BUILTIN_PROVIDERS
from .algorithms.provider import AlgorithmProvider, validate_provider
from .config import BUILTIN_ALGORITHMS
from .runtime.errors import InvalidProviderError

logger = logging.getLogger(__name__)


class AlgorithmRegistry:
    """
    Registry of algorithm providers.

    ``use`` is a combined getter/setter: with a provider it registers,
    without one it looks up.
    """

    def __init__(self):
        self._providers: Dict[str, AlgorithmProvider] = {}

    @classmethod
    def with_builtin_providers(cls, names: Iterable[str] = BUILTIN_ALGORITHMS) -> AlgorithmRegistry:
        """
        Create a registry with built-in providers registered.

        Args:
            names: Built-in algorithm names to register

        Returns:
            New registry

        Raises:
            InvalidProviderError: If a name has no built-in provider
        """
        registry = cls()
        for name in names:
            factory = BUILTIN_PROVIDERS.get(name)
            if factory is None:
                raise InvalidProviderError(
                    f"No built-in provider for algorithm '{name}'",
                    {"algorithm": name, "available": sorted(BUILTIN_PROVIDERS)},
                )
            registry.use(name, factory())
        return registry

    def use(self, name: str, provider: Optional[AlgorithmProvider] = None) -> Optional[AlgorithmProvider]:
        """
        Register or look up a provider.

        Args:
            name: Algorithm name (e.g. rsa, hmac, ed25519)
            provider: Provider to register; omit to look up

        Returns:
            The provider registered under ``name`` (or None) when looking
            up; None when registering

        Raises:
            InvalidProviderError: If ``provider`` lacks callable sign/verify
        """
        if provider is None:
            return self._providers.get(name)

        validate_provider(provider)
        if name in self._providers:
            logger.debug(f"Replacing provider for algorithm {name!r} with {provider!r}")
        else:
            logger.debug(f"Registered provider {provider!r} for algorithm {name!r}")
        self._providers[name] = provider
        return None

    def names(self) -> List[str]:
        """Get the registered algorithm names."""
        return sorted(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def __repr__(self) -> str:
        return f"AlgorithmRegistry({self.names()})"


__all__ = ["AlgorithmRegistry"]
