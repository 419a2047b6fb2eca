"""
Errors raised while composing and bootstrapping modules.
"""

from __future__ import annotations


class ModuleError(Exception):
    """Base class for all module composition errors."""


class UnknownModuleError(ModuleError):
    """Raised when a used module does not exist or is an app."""

    def __init__(self, name: str, required_by: str | None = None, is_app: bool = False):
        self.name = name
        self.required_by = required_by
        self.is_app = is_app
        if is_app:
            msg = f"Cannot use app '{name}' as a module dependency"
        else:
            msg = f"Cannot find module: {name}"
        if required_by:
            msg += f" (used by {required_by})"
        super().__init__(msg)


class UnresolvedDependencyError(ModuleError, LookupError):
    """Raised when an injectable names a dependency that is not registered."""

    def __init__(self, dependency: str, requested_by: str | None = None, container: str | None = None):
        self.dependency = dependency
        self.requested_by = requested_by
        self.container = container
        msg = f"No service registered for '{dependency}'"
        if requested_by:
            msg += f" (required by {requested_by})"
        if container:
            msg += f" in {container}"
        super().__init__(msg)


class ConstructContractError(ModuleError):
    """Raised when a construct does not produce something registerable."""

    def __init__(self, construct_name: str, name: str, reason: str):
        self.construct_name = construct_name
        self.name = name
        self.reason = reason
        super().__init__(f"Construct '{construct_name}' failed for '{name}': {reason}")


class ModuleKindError(ModuleError):
    """Raised in strict mode when a name is requested as the other kind."""

    def __init__(self, name: str, is_app: bool):
        self.name = name
        self.is_app = is_app
        existing = "an app" if is_app else "a module"
        requested = "a module" if is_app else "an app"
        super().__init__(f"'{name}' was created as {existing} and cannot be requested as {requested}")


class CyclicModuleError(ModuleError):
    """Raised in strict mode when the uses graph contains a cycle."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        cycle_str = " -> ".join(cycle)
        super().__init__(f"Circular module dependency detected: {cycle_str}")


class CircularServiceError(ModuleError):
    """Raised when a factory service depends on itself while being created."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        chain_str = " -> ".join(chain)
        super().__init__(f"Circular service dependency detected: {chain_str}")
