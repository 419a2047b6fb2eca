"""
Normalization of the accepted "injectable" argument shapes.

A callable can declare the names of its dependencies in three ways:

- a trailing-callable sequence: ``["db", "cache", handler]``
- an attached ``__inject__`` name list, usually set with :func:`inject`
- its own parameter names, read from its signature

All three are normalized into an :class:`Injectable` at the public boundary,
so the rest of the package never inspects argument shapes again.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

INJECT_ATTR = "__inject__"

_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True)
class Injectable:
    """
    A callable together with the ordered names of its dependencies.

    ``keywords`` lists the dependencies that must be passed by keyword, i.e.
    the keyword-only parameters found in the callable's signature.
    """

    names: tuple[str, ...]
    body: Callable[..., Any]
    keywords: tuple[str, ...] = ()

    @classmethod
    def of(cls, value: Any) -> Injectable:
        """
        Normalize any accepted injectable shape.

        Raises:
            TypeError: If the value is neither callable nor a sequence ending
                in a callable.
        """
        if isinstance(value, Injectable):
            return value

        if isinstance(value, (list, tuple)):
            if not value or not callable(value[-1]):
                raise TypeError(f"Injectable sequence must end with a callable, got {value!r}")
            names = tuple(value[:-1])
            for name in names:
                if not isinstance(name, str):
                    raise TypeError(f"Dependency names must be strings, got {name!r}")
            return cls(names, value[-1])

        if not callable(value):
            raise TypeError(f"Expected an injectable callable, got {value!r}")

        attached = getattr(value, INJECT_ATTR, None)
        if attached is not None:
            return cls(tuple(attached), value)

        parameters = _dependency_parameters(value)
        return cls(
            tuple(param.name for param in parameters),
            value,
            tuple(param.name for param in parameters if param.kind is inspect.Parameter.KEYWORD_ONLY),
        )

    @property
    def label(self) -> str:
        """Human readable name of the body, used in error messages."""
        return getattr(self.body, "__qualname__", None) or repr(self.body)

    def invoke(self, values: Sequence[Any], args: Sequence[Any] = ()) -> Any:
        """
        Call the body with resolved dependency values, in ``names`` order.

        Keyword-only dependencies are passed by keyword; ``args`` follow the
        positional dependencies.
        """
        positional: list[Any] = []
        keyword: dict[str, Any] = {}
        for name, value in zip(self.names, values, strict=True):
            if name in self.keywords:
                keyword[name] = value
            else:
                positional.append(value)
        return self.body(*positional, *args, **keyword)

    def __call__(self, *args: Any) -> Any:
        return self.body(*args)


def _dependency_parameters(func: Callable[..., Any]) -> list[inspect.Parameter]:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures take no dependencies
        return []

    return [
        param
        for param in signature.parameters.values()
        if param.kind not in _SKIPPED_KINDS and param.default is inspect.Parameter.empty
    ]


def signature_names(func: Callable[..., Any]) -> tuple[str, ...]:
    """
    Extract dependency names from a callable's signature.

    Parameters with defaults and variadic parameters are not dependencies.
    For classes the constructor signature is used, so ``self`` never shows up.
    """
    return tuple(param.name for param in _dependency_parameters(func))


def is_injectable(value: Any) -> bool:
    """Check whether a value has one of the accepted injectable shapes."""
    if isinstance(value, Injectable):
        return True
    if isinstance(value, (list, tuple)):
        return bool(value) and callable(value[-1])
    return callable(value)


def inject(*names: str) -> Callable[[F], F]:
    """
    Attach an explicit dependency name list to a callable.

    Example:
        @inject("db", "settings")
        def configure(database, config):
            ...
    """

    def decorator(func: F) -> F:
        setattr(func, INJECT_ATTR, tuple(names))
        return func

    return decorator
