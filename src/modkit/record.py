"""
Module record: the state behind one module or app façade.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .context import Context
from .injectable import Injectable

if TYPE_CHECKING:
    from .facade import Module


@dataclass(eq=False)
class ModuleRecord:
    """
    Everything known about one named module or app.

    A record is created once per name and lives as long as its registry.
    ``is_app`` never changes after creation, and ``started`` only ever goes
    from False to True.
    """

    name: str
    is_app: bool
    context: Context
    uses: list[str] = field(default_factory=list)
    constructs: dict[str, Callable[..., Any]] = field(default_factory=dict)
    config_queue: list[Injectable] = field(default_factory=list)
    start_queue: list[Injectable] = field(default_factory=list)
    started: bool = False
    instance: Module | None = None

    @property
    def kind(self) -> str:
        return "app" if self.is_app else "module"

    @property
    def facade(self) -> Module:
        """The public façade; always set once the registry has built the record."""
        assert self.instance is not None, f"{self.kind} '{self.name}' has no façade yet"
        return self.instance

    def __str__(self) -> str:
        return f"{self.kind} '{self.name}'"
