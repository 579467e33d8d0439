"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from blog.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables, so callers point
    DATABASE__URL at a scratch database before building.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - in-memory persistence
        container = build_test_container()

        # Integration tests - real SQLAlchemy persistence
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = getattr(base, "__mock_component__", None)
        if base.__subclasses__() and component_name:
            provider_class = get_provider(base, use_mock=component_name not in unmock)
        else:
            # Concrete provider - always use as-is
            provider_class = get_provider(base, use_mock=False)

        provider_instances.append(provider_class())

    return make_async_container(*provider_instances)


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no provider declares.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components
    """
    all_components = {
        p.__mock_component__
        for p in PROVIDERS
        if p.__subclasses__() and p.__mock_component__
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
