"""Dependency injection module.

Providers come in two kinds:

- concrete providers (config, domain, application), always used as-is;
- mockable components (persistence, events): a base class whose subclasses
  are the production and mock implementations, told apart by ``__is_mock__``.
"""

from typing import Type

from roster.util.di.application import ProdApplicationProvider
from roster.util.di.base import Component, ProviderBase
from roster.util.di.core import ProdConfigProvider
from roster.util.di.domain import ProdDomainProvider
from roster.util.di.infrastructure import (
    EventsProvider,
    PersistenceProvider,
    ProdEventsProvider,
    ProdPersistenceProvider,
)

# Concrete providers first, then mockable component bases
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    EventsProvider,
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    """Whether a provider is a component base with implementations."""
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of the requested kind
    """
    if not is_mockable(base):
        return base

    for implementation in base.__subclasses__():
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "is_mockable",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "EventsProvider",
    "PersistenceProvider",
    "ProdEventsProvider",
    "ProdPersistenceProvider",
]
