"""
Registry-wide settings.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RegistrySettings:
    """
    Behaviour switches for a ModuleRegistry.

    The defaults keep composition permissive: a name requested as the other
    kind returns whatever was created first, and a cyclic uses edge is
    skipped with a warning.
    """

    strict_kinds: bool = False
    fail_on_cycles: bool = False
    logger_prefix: str = "modkit"

    def logger_name(self, name: str | None) -> str:
        """Name of the logger injected into the named container."""
        return f"{self.logger_prefix}.{name}" if name else self.logger_prefix
