"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from roster.util.di import PROVIDERS, Component, get_provider, is_mockable


def mockable_components() -> set[Component]:
    """Names of all components that have a mock implementation."""
    return {base.__mock_component__ for base in PROVIDERS if is_mockable(base)}


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked.

    Examples:
        # Unit and e2e tests - in-memory storage, recording event publisher
        container = build_test_container()

        # Integration tests - real SQLAlchemy persistence, DATABASE__URL from env
        container = build_test_container(unmock={"persistence"})

    Args:
        unmock: Components to use production implementations for

    Raises:
        ValueError: If an unknown component is named
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=is_mockable(base) and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers)
