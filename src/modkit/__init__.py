"""
modkit - named modules and apps composed over a shared injection container.

Modules register services and constructs and queue config callables; apps
additionally queue start callables and bootstrap the whole uses graph once:
- registries of used modules are merged into the app, consumer first
- config callables run dependencies first, each module exactly once
- start callables of the app run last
"""

from .constructs import enhance
from .context import Context
from .errors import (
    CircularServiceError,
    ConstructContractError,
    CyclicModuleError,
    ModuleError,
    ModuleKindError,
    UnknownModuleError,
    UnresolvedDependencyError,
)
from .facade import App, Module
from .injectable import Injectable, inject
from .registry import ModuleRegistry
from .settings import RegistrySettings

__all__ = [
    "App",
    "CircularServiceError",
    "ConstructContractError",
    "Context",
    "CyclicModuleError",
    "Injectable",
    "Module",
    "ModuleError",
    "ModuleKindError",
    "ModuleRegistry",
    "RegistrySettings",
    "UnknownModuleError",
    "UnresolvedDependencyError",
    "enhance",
    "inject",
]
