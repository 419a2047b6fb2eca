"""
Constructs: named ways of building services.

A construct is created from a *creator*, an injectable that returns a
transform ``(constructor, name) -> value``. Calling the construct builds the
constructor (optionally extended with extra members), runs it through the
transform and registers the result under the given name.

The built-in ``service`` construct uses the identity transform, so
``module.service("mailer", Mailer)`` simply registers ``Mailer``.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

from .errors import ConstructContractError
from .injectable import INJECT_ATTR, Injectable, is_injectable
from .record import ModuleRecord

logger = logging.getLogger(__name__)

SERVICE_CONSTRUCT = "service"


def enhance(
    base: Callable[..., Any],
    members: Mapping[str, Any] | None = None,
    name: str | None = None,
    names: tuple[str, ...] | None = None,
) -> Callable[..., Any]:
    """
    Build a new factory from ``base`` extended with ``members``.

    ``base`` itself is never modified:

    - a class is extended through a new subclass carrying the members
    - a plain function with members becomes the ``__init__`` of a new class,
      receiving the new instance as its first argument, so it must take one
      (``def make(self, db)``) and return nothing
    - with neither members nor names, ``base`` is returned as is

    Explicit ``names``, an ``__inject__`` entry in ``members`` or one attached
    to a plain function become the dependency names of the produced factory.

    Raises:
        TypeError: If a plain function extended with members cannot take the
            new instance as its first argument
    """
    namespace = dict(members or {})
    attached = namespace.pop(INJECT_ATTR, None)
    if names is None and attached is not None:
        names = tuple(attached)

    has_members = bool(namespace)
    if not has_members and names is None:
        return base

    if names is not None:
        namespace[INJECT_ATTR] = tuple(names)

    if inspect.isclass(base):
        return type(base.__name__, (base,), namespace)

    if not has_members:
        @functools.wraps(base)
        def factory(*args: Any, **kwargs: Any) -> Any:
            return base(*args, **kwargs)

        setattr(factory, INJECT_ATTR, namespace[INJECT_ATTR])
        return factory

    if not takes_instance(base):
        raise TypeError(f"{base!r} must take the new instance as its first parameter to be extended with members")

    own_names = getattr(base, INJECT_ATTR, None)
    if names is None and own_names is not None:
        namespace[INJECT_ATTR] = tuple(own_names)
    namespace["__init__"] = base
    return type(name or getattr(base, "__name__", "Construct"), (), namespace)


def takes_instance(func: Callable[..., Any]) -> bool:
    """Check whether a function can be bound as ``__init__``, i.e. accepts a first positional argument."""
    try:
        parameters = list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        return True
    if not parameters:
        return False
    return parameters[0].kind in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
        inspect.Parameter.VAR_POSITIONAL,
    )


def _extends_function(body: Callable[..., Any], members: Mapping[str, Any] | None) -> bool:
    return not inspect.isclass(body) and any(key != INJECT_ATTR for key in members or {})


def define_construct(record: ModuleRecord, construct_name: str, creator: Any) -> Callable[..., Any]:
    """
    Create the construct function ``construct_name`` for ``record``.

    The creator is resolved through the record's own context each time the
    construct is used, with the record's façade as ``self``. Produced values
    are registered into the same context.

    Returns:
        ``construct(name, constructor=None, members=None) -> value``
    """
    creator_injectable = Injectable.of(creator)

    def construct(name: str, constructor: Any = None, members: Mapping[str, Any] | None = None) -> Any:
        if not is_injectable(constructor):
            # No constructor: the object itself is the service
            built = constructor
        else:
            normalized = Injectable.of(constructor)
            if _extends_function(normalized.body, members) and not takes_instance(normalized.body):
                reason = "a function extended with members must take the new instance as its first parameter"
                raise ConstructContractError(construct_name, name, reason)
            if isinstance(constructor, (list, tuple, Injectable)):
                built = enhance(normalized.body, members, name, normalized.names)
            else:
                built = enhance(constructor, members, name)

        transform = record.context.call(creator_injectable, (), record.facade)
        if not callable(transform):
            raise ConstructContractError(construct_name, name, "the creator did not return a function")

        produced = transform(built, name)
        if produced is None:
            raise ConstructContractError(construct_name, name, "the construct function did not return anything")

        logger.debug("Construct '%s' registered '%s' on %s", construct_name, name, record)
        record.context.register(name, produced)
        return produced

    construct.__name__ = construct_name
    construct.__qualname__ = f"{record.name}.{construct_name}"
    return construct


def service_creator() -> Callable[[Any, str], Any]:
    """Creator of the built-in ``service`` construct."""

    def identity(constructor: Any, _name: str) -> Any:
        return constructor

    return identity
