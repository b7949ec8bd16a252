from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any, ClassVar

from observable_form.core.errors import FormConfigurationError
from observable_form.core.factory import PluginFactory
from observable_form.models.enums import ValidatorKind, kind_key
from observable_form.validation.base import Validator

ValidatorSpec = Validator[Any] | str | Enum


class ValidatorFactory(PluginFactory[Validator[Any]]):
    """Factory for creating validators from registered kind names.

    Stateless built-ins are registered as constructors returning the shared
    instance; parameterized built-ins take their parameters as keyword
    arguments.

    Example:
        >>> ValidatorFactory.create("required")
        >>> ValidatorFactory.create("max_length", n=80)

        # Register a custom validator
        >>> ValidatorFactory.register("slug", lambda: pattern(r"^[a-z0-9-]+$", kind="slug"))
        >>> control = FormControl("", validators=["required", "slug"])
    """

    _registry: ClassVar[dict[str, Callable[..., Validator[Any]]]] = {}
    _entity_name: ClassVar[str] = "validator"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure built-in validators are registered."""
        if ValidatorKind.REQUIRED.value not in cls._registry:
            from observable_form.validation import validators as builtins

            defaults: dict[str, Callable[..., Validator[Any]]] = {
                ValidatorKind.REQUIRED.value: lambda: builtins.required,
                ValidatorKind.EMAIL.value: lambda: builtins.email,
                ValidatorKind.URL.value: lambda: builtins.url,
                ValidatorKind.INTEGER.value: lambda: builtins.integer,
                ValidatorKind.NUMBER.value: lambda: builtins.number,
                ValidatorKind.MIN_LENGTH.value: builtins.min_length,
                ValidatorKind.MAX_LENGTH.value: builtins.max_length,
                ValidatorKind.PATTERN.value: builtins.pattern,
                ValidatorKind.ONE_OF.value: lambda choices=(): builtins.one_of(*choices),
            }
            for kind, constructor in defaults.items():
                cls._registry.setdefault(kind, constructor)

    @classmethod
    def create(cls, name: str | Enum, **kwargs: Any) -> Validator[Any]:  # type: ignore[override]
        """Create a validator by kind name.

        Args:
            name: Registered kind (string or ValidatorKind member).
            **kwargs: Parameters for parameterized validators.

        Returns:
            Validator instance.

        Raises:
            FormConfigurationError: If the kind is not registered.
        """
        return super().create(kind_key(name), **kwargs)


def resolve_validators(specs: Iterable[ValidatorSpec]) -> list[Validator[Any]]:
    """Turn a mix of validators and kind names into validators.

    Raises:
        FormConfigurationError: If an entry is neither a Validator nor a
            registered kind name.
    """
    resolved: list[Validator[Any]] = []
    for spec in specs:
        if isinstance(spec, Validator):
            resolved.append(spec)
        elif isinstance(spec, (str, Enum)):
            resolved.append(ValidatorFactory.create(spec))
        else:
            raise FormConfigurationError(
                f"Expected a Validator or validator kind name, got {type(spec).__name__}",
                {"value": repr(spec)},
            )
    return resolved
