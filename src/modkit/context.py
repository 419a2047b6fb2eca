"""
Name-keyed injection container.

Every module and app owns one Context. Values registered under a name are
either plain values, returned as they are, or factories (classes and other
callables), invoked with injection on first lookup and cached afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import CircularServiceError, UnresolvedDependencyError
from .injectable import Injectable
from .keys import LOGGER_KEY, SELF_KEY

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class Registration:
    """A registered value plus the instance produced from it, if any."""

    value: Any
    instance: Any = _MISSING

    @property
    def is_factory(self) -> bool:
        return callable(self.value)

    @property
    def is_created(self) -> bool:
        return self.instance is not _MISSING

    def fresh(self) -> Registration:
        """Copy this registration without its created instance."""
        return Registration(self.value)


class Context:
    """
    Container of named services for a single module or app.

    Supports injected invocation: a callable's declared dependency names are
    looked up in this container and passed positionally, except keyword-only
    parameters, which are passed by keyword.
    """

    def __init__(self, name: str | None = None, logger_name: str | None = None):
        self.name = name
        self._logger_name = logger_name or (f"modkit.{name}" if name else "modkit")
        self._registry: dict[str, Registration] = {}
        self._resolving: list[str] = []

    @property
    def registry(self) -> Mapping[str, Registration]:
        """Read-only view of the registrations, in registration order."""
        return self._registry

    def register(self, name: str, value: Any) -> Context:
        """
        Register a value or factory under a name.

        Registering a name again replaces the previous registration.
        """
        if name in self._registry:
            logger.debug("Replacing registration '%s' in %s", name, self)
        self._registry[name] = Registration(value)
        return self

    def adopt(self, name: str, registration: Registration) -> None:
        """Store a registration taken from another container."""
        self._registry[name] = registration

    def has(self, name: str) -> bool:
        return name in self._registry

    def names(self) -> list[str]:
        return list(self._registry)

    def get(self, name: str, default: Any = None) -> Any:
        """
        Get the service registered under a name.

        Args:
            name: The service name
            default: Returned when nothing is registered under the name

        Returns:
            The registered value, or the instance its factory produced

        Raises:
            CircularServiceError: If a factory needs itself while being created
        """
        registration = self._registry.get(name)
        if registration is None:
            if name == LOGGER_KEY:
                return logging.getLogger(self._logger_name)
            return default

        if not registration.is_factory:
            return registration.value

        if not registration.is_created:
            if name in self._resolving:
                raise CircularServiceError(self._resolving[self._resolving.index(name):] + [name])
            self._resolving.append(name)
            try:
                registration.instance = self.call(registration.value)
            finally:
                self._resolving.pop()

        return registration.instance

    def call(self, func: Any, args: tuple[Any, ...] = (), this: Any = None) -> Any:
        """
        Invoke a callable with its dependencies injected.

        Args:
            func: Any accepted injectable shape
            args: Extra positional arguments passed after the dependencies
            this: Value the reserved ``self`` dependency resolves to

        Returns:
            Whatever the callable returns

        Raises:
            UnresolvedDependencyError: If a dependency is not registered
        """
        injectable = Injectable.of(func)
        resolved = [self._resolve(name, injectable, this) for name in injectable.names]
        return injectable.invoke(resolved, args)

    def _resolve(self, name: str, injectable: Injectable, this: Any) -> Any:
        if name == SELF_KEY and this is not None:
            return this
        if name in self._registry or name == LOGGER_KEY:
            return self.get(name)
        raise UnresolvedDependencyError(name, injectable.label, str(self))

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __iter__(self) -> Iterator[str]:
        return iter(self._registry)

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        return f"Context({self.name!r}, services={len(self._registry)})"

    def __str__(self) -> str:
        return f"context '{self.name}'" if self.name else "anonymous context"
