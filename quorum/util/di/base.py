"""Provider metadata and selection for swappable infrastructure.

A provider class that has subclasses is a *component*: it only names a
slot (``__mock_component__``) and its subclasses are the production and
mock implementations, told apart by ``__is_mock__``. A provider class with
no subclasses is concrete and always used as-is.
"""

from typing import ClassVar, Iterable, Literal, Type

from dishka import Provider

# Components tests can swap for in-memory implementations
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every quorum provider.

    Attributes:
        __mock_component__: Slot name on component bases, None on concrete providers
        __is_mock__: True on the in-memory implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def is_component(provider: Type[ProviderBase]) -> bool:
    """Whether ``provider`` is a swappable component base."""
    return bool(provider.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Args:
        base: Concrete provider or component base
        use_mock: Pick the mock implementation of a component

    Returns:
        ``base`` itself for concrete providers, otherwise the matching
        implementation subclass

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    if not is_component(base):
        return base

    for implementation in base.__subclasses__():
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


def component_names(providers: Iterable[Type[ProviderBase]]) -> set[str]:
    """Slot names of the swappable components among ``providers``."""
    return {
        p.__mock_component__
        for p in providers
        if is_component(p) and p.__mock_component__ is not None
    }
