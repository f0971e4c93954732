"""Dependency injection module."""

from typing import Type

from autoblog.util.di.application import ProdApplicationProvider
from autoblog.util.di.base import Component, ProviderBase
from autoblog.util.di.core import ProdConfigProvider, ProdStateProvider
from autoblog.util.di.domain import ProdDomainProvider
from autoblog.util.di.infrastructure import (
    ClientAggregatorProvider,
    GeminiProvider,
    NaverProvider,
    PersistenceProvider,
    ProdGeminiProvider,
    ProdNaverProvider,
    ProdPersistenceProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdStateProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    NaverProvider,
    GeminiProvider,
    PersistenceProvider,
    # Exposes adapter clients through domain interfaces
    ClientAggregatorProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    A provider without subclasses is concrete and used directly. A provider
    with subclasses is a mockable component; the implementation is picked by
    its ``__is_mock__`` flag.

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdStateProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "ClientAggregatorProvider",
    "GeminiProvider",
    "NaverProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdGeminiProvider",
    "ProdNaverProvider",
    "ProdPersistenceProvider",
]
