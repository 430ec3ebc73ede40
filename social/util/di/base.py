"""Base classes for dependency injection providers.

A provider class with subclasses is a swappable component: one subclass is
the production implementation, another (defined under tests/) the mock.
"""

from typing import ClassVar, Literal

from dishka import Provider

# Components tests may swap between production and in-memory implementations
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    Attributes:
        __mock_component__: Name of the swappable component, None for
            providers that always run their production code
        __is_mock__: Whether this class is the mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_swappable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool) -> type["ProviderBase"]:
        """Pick the production or mock subclass of a swappable component.

        Raises:
            ValueError: If no subclass of the requested kind is loaded
        """
        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == use_mock:
                return subclass
        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
