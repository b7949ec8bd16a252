"""Generic plugin factory base class.

Provides a reusable factory pattern for creating instances from a registry
of registered constructors. Subclasses specify the registry, the entity name
used in error messages, and how to register defaults.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar, Generic, TypeVar

from observable_form.core.errors import FormConfigurationError

T = TypeVar("T")


class PluginFactory(ABC, Generic[T]):
    """Generic factory for creating plugin instances from a registry.

    Subclasses should define:
        - _registry: Class-level dict mapping type names to constructors
        - _entity_name: Human-readable name for error messages (e.g., "validator")
        - _ensure_defaults_registered(): Method to register default implementations

    Constructors are any callable returning an instance: a class, or a
    factory function taking keyword arguments.

    Example subclass:
        class ValidatorFactory(PluginFactory[Validator[Any]]):
            _registry: ClassVar[dict[str, Callable[..., Validator[Any]]]] = {}
            _entity_name: ClassVar[str] = "validator"

            @classmethod
            def _ensure_defaults_registered(cls) -> None:
                if "required" not in cls._registry:
                    cls._registry["required"] = lambda: required
    """

    _registry: ClassVar[dict[str, Callable[..., Any]]]
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default implementations are registered.

        Subclasses must implement this to lazily register their default
        implementations. This method is called before registry access.
        """
        ...

    @classmethod
    def register(cls, name: str, constructor: Callable[..., T]) -> None:
        """Register a constructor under a type name.

        Args:
            name: Type name for the implementation.
            constructor: Callable returning a new or shared instance.
        """
        cls._ensure_defaults_registered()
        cls._registry[name] = constructor

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister an implementation type.

        Args:
            name: Type name to unregister.
        """
        cls._registry.pop(name, None)

    @classmethod
    def create(cls, name: str, **kwargs: Any) -> T:
        """Create an instance of the specified type.

        Args:
            name: Type name to create.
            **kwargs: Arguments to pass to the constructor.

        Returns:
            Instance of the requested type.

        Raises:
            FormConfigurationError: If the type name is not registered.
        """
        cls._ensure_defaults_registered()

        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise FormConfigurationError(
                f"Unknown {cls._entity_name} type: {name}. Available types: {available}",
                {"name": name, "entity": cls._entity_name},
            )

        constructor = cls._registry[name]
        return constructor(**kwargs)  # type: ignore[no-any-return]

    @classmethod
    def available_types(cls) -> list[str]:
        """Get list of available types.

        Returns:
            List of registered type names.
        """
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())

    @classmethod
    def clear_registry(cls) -> None:
        """Clear the registry (mainly for testing)."""
        cls._registry.clear()
