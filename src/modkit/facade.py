"""
Public façades for modules and apps.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self

from .bootstrap import Bootstrapper
from .constructs import define_construct
from .injectable import Injectable
from .mixin import merge_constructs, merge_registry
from .record import ModuleRecord

if TYPE_CHECKING:
    from .registry import ModuleRegistry

logger = logging.getLogger(__name__)


class Module:
    """
    A named, composable unit of services, constructs and config callables.

    Every method except attribute lookup of constructs returns the module
    itself, so calls can be chained::

        registry.module("storage").use("settings").service("db", Database)
    """

    def __init__(self, record: ModuleRecord, registry: ModuleRegistry):
        self._record = record
        self._registry = registry

    @property
    def name(self) -> str:
        return self._record.name

    @property
    def is_app(self) -> bool:
        return self._record.is_app

    def register(self, name: str, value: Any) -> Self:
        """Register a value, or a factory called on first lookup, under a name."""
        self._record.context.register(name, value)
        return self

    def construct(self, construct_name: str, creator: Any) -> Self:
        """
        Define a construct, available afterwards as ``module.<construct_name>``.

        Args:
            construct_name: Name of the new construct
            creator: Injectable returning a ``(constructor, name) -> value``
                transform
        """
        if hasattr(App, construct_name):
            raise ValueError(f"'{construct_name}' is reserved and cannot name a construct")
        self._record.constructs[construct_name] = define_construct(self._record, construct_name, creator)
        return self

    def use(self, *names: str | list[str] | tuple[str, ...]) -> Self:
        """
        Declare dependencies on other modules.

        Accepts any number of names, or a single list of names. Services and
        constructs of modules that already exist are made available right
        away; everything else is resolved when the app starts.
        """
        if len(names) == 1 and isinstance(names[0], (list, tuple)):
            names = tuple(names[0])

        record = self._record
        for name in names:
            if not isinstance(name, str):
                raise TypeError(f"Module names must be strings, got {name!r}")
            record.uses.append(name)

            used = self._registry.find(name)
            if used is None or used.is_app:
                continue

            merge_constructs(record, used)
            merge_registry(record.context, used.context)
        return self

    def config(self, fn: Any) -> Self:
        """Queue an injectable to run when an app using this module starts."""
        self._record.config_queue.append(Injectable.of(fn))
        return self

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        construct = self._record.constructs.get(name)
        if construct is None:
            raise AttributeError(f"{self._record} has no attribute or construct '{name}'")
        return construct

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._record.name!r})"


class App(Module):
    """A module that can be bootstrapped and can run injected callables."""

    def start(self, fn: Any = None) -> Self:
        """
        Queue a start callable, or bootstrap the app when called without one.

        Bootstrapping happens at most once; later calls without arguments
        do nothing.
        """
        if fn is not None:
            self._record.start_queue.append(Injectable.of(fn))
            return self

        Bootstrapper(self._registry).run(self._record)
        return self

    def call(self, fn: Any) -> Any:
        """Invoke an injectable right away against the app's context."""
        return self._record.context.call(fn, (), self)

    @property
    def started(self) -> bool:
        return self._record.started
