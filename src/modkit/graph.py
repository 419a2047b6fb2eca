"""
Traversal of the "uses" graph between modules.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from .errors import CyclicModuleError, UnknownModuleError
from .record import ModuleRecord

if TYPE_CHECKING:
    from .registry import ModuleRegistry

logger = logging.getLogger(__name__)


class UsesGraph:
    """
    Depth-first walk over the transitive uses of a module.

    Every used module is visited at most once per traversal, and always
    before the modules that use it.
    """

    def __init__(self, registry: ModuleRegistry):
        self._registry = registry

    def traverse(self, start: str, visit: Callable[[ModuleRecord], None]) -> None:
        """
        Visit the dependency closure of ``start``, dependencies first.

        Args:
            start: Name of the module or app to start from
            visit: Called once per record, ``start`` last

        Raises:
            UnknownModuleError: If a used name is unknown or names an app
            CyclicModuleError: If the registry fails on cycles and one is found
        """
        record = self._registry.find(start)
        if record is None:
            raise UnknownModuleError(start)

        visited: set[str] = set()
        self._walk(record, visit, visited, [record.name])

    def order(self, start: str) -> list[ModuleRecord]:
        """Return the records of the closure of ``start`` in visit order."""
        records: list[ModuleRecord] = []
        self.traverse(start, records.append)
        return records

    def _walk(
        self,
        record: ModuleRecord,
        visit: Callable[[ModuleRecord], None],
        visited: set[str],
        path: list[str],
    ) -> None:
        for used_name in record.uses:
            if used_name in visited:
                if used_name in path:
                    self._on_cycle(path[path.index(used_name):] + [used_name])
                continue

            used = self._registry.find(used_name)
            if used is None or used.is_app:
                raise UnknownModuleError(used_name, record.name, is_app=used is not None)

            # Marked before recursing so a cycle cannot revisit it
            visited.add(used_name)
            path.append(used_name)
            self._walk(used, visit, visited, path)
            path.pop()

        visit(record)

    def _on_cycle(self, cycle: list[str]) -> None:
        if self._registry.settings.fail_on_cycles:
            raise CyclicModuleError(cycle)
        logger.warning("Skipping cyclic module dependency: %s", " -> ".join(cycle))
