"""
Reserved container keys.

These names are registered by the framework itself and are never copied
between containers by the registry merger.
"""

from __future__ import annotations

CONTEXT_KEY = "context"
"""The app's own container, registered on app containers only."""

APP_NAME_KEY = "app_name"
"""The app's name, registered on app containers only."""

GLOBALS_KEY = "globals"
"""The cache shared by every module and app of one registry."""

SELF_KEY = "self"
"""Resolves to the façade a callable is being run on behalf of."""

LOGGER_KEY = "logger"
"""Resolves to a container-specific logger unless registered explicitly."""

UNMERGED_KEYS = frozenset({CONTEXT_KEY, GLOBALS_KEY})
