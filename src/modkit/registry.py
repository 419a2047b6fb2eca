"""
ModuleRegistry - the composition root owning every module and app.
"""

from __future__ import annotations

import logging

from .constructs import SERVICE_CONSTRUCT, service_creator
from .context import Context
from .errors import ModuleKindError, UnknownModuleError
from .facade import App, Module
from .keys import APP_NAME_KEY, CONTEXT_KEY, GLOBALS_KEY
from .record import ModuleRecord
from .settings import RegistrySettings

logger = logging.getLogger(__name__)


class ModuleRegistry:
    """
    Owns the records of all modules and apps created through it.

    A name denotes exactly one record for the lifetime of the registry:
    asking for the same name again returns the same façade. Records are
    never removed.

    Each registry also owns the ``globals`` dict shared by all of its
    modules and apps. Separate registries share nothing, which keeps tests
    isolated from each other.

    Example:
        ```python
        registry = ModuleRegistry()
        registry.module("greetings").register("greeting", "hello")

        app = registry.app("main").use("greetings")
        app.start(lambda greeting: print(greeting))
        app.start()
        ```
    """

    def __init__(self, settings: RegistrySettings | None = None):
        self.settings = settings or RegistrySettings()
        self.globals: dict[str, object] = {}
        self._records: dict[str, ModuleRecord] = {}

    def module(self, name: str) -> Module:
        """Get or create the module called ``name``."""
        return self.get_or_create(name, is_app=False).facade

    def app(self, name: str) -> App:
        """Get or create the app called ``name``."""
        # Permissive mode hands back a Module if one was created first
        return self.get_or_create(name, is_app=True).facade  # type: ignore[return-value]

    def get_or_create(self, name: str, is_app: bool) -> ModuleRecord:
        """
        Return the record for ``name``, creating it on first request.

        The ``is_app`` flag only matters on creation.

        Raises:
            ModuleKindError: If ``strict_kinds`` is set and the existing
                record is of the other kind
        """
        record = self._records.get(name)
        if record is None:
            record = self._create(name, is_app)
            self._records[name] = record
            return record

        if record.is_app != is_app:
            if self.settings.strict_kinds:
                raise ModuleKindError(name, record.is_app)
            logger.warning(
                "'%s' was created as %s; returning it where %s was requested",
                name,
                "an app" if record.is_app else "a module",
                "a module" if record.is_app else "an app",
            )
        return record

    def find(self, name: str) -> ModuleRecord | None:
        return self._records.get(name)

    def record(self, name: str) -> ModuleRecord:
        """
        Get an existing record.

        Raises:
            UnknownModuleError: If nothing was created under ``name``
        """
        record = self._records.get(name)
        if record is None:
            raise UnknownModuleError(name)
        return record

    def names(self) -> list[str]:
        return list(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def _create(self, name: str, is_app: bool) -> ModuleRecord:
        context = Context(name, self.settings.logger_name(name))
        record = ModuleRecord(name=name, is_app=is_app, context=context)

        if is_app:
            context.register(CONTEXT_KEY, context)
            context.register(APP_NAME_KEY, name)
        context.register(GLOBALS_KEY, self.globals)

        record.instance = App(record, self) if is_app else Module(record, self)
        record.instance.construct(SERVICE_CONSTRUCT, service_creator)

        logger.debug("Created %s", record)
        return record
