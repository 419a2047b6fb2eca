"""
One-time bootstrap of an app: merge, configure, start.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .graph import UsesGraph
from .mixin import merge_registry
from .record import ModuleRecord

if TYPE_CHECKING:
    from .registry import ModuleRegistry

logger = logging.getLogger(__name__)


class Bootstrapper:
    """
    Runs the bootstrap sequence of an app record.

    1. merge the registries of the whole uses closure into the app context
    2. run every config callable of the closure, dependencies first
    3. run the app's own start callables
    4. mark the app started

    Config and start callables are invoked through the app's context, with
    the façade of the module that queued them as ``self``. If any step
    raises, the app stays unstarted and nothing already run is undone.
    """

    def __init__(self, registry: ModuleRegistry):
        self._registry = registry
        self._graph = UsesGraph(registry)

    def run(self, app: ModuleRecord) -> bool:
        """
        Bootstrap the app unless it was already started.

        Returns:
            True if the app was bootstrapped by this call
        """
        if app.started:
            logger.debug("%s already started", app)
            return False

        logger.info("Bootstrapping app '%s'", app.name)
        closure = self._graph.order(app.name)
        for record in closure:
            if record is not app:
                merge_registry(app.context, record.context)
        for record in closure:
            self._run_queues(app, record)
        app.started = True
        logger.info("App '%s' started", app.name)
        return True

    def _run_queues(self, app: ModuleRecord, record: ModuleRecord) -> None:
        context = app.context
        logger.debug("Configuring %s (%d config callables)", record, len(record.config_queue))
        for fn in record.config_queue:
            context.call(fn, (), record.facade)

        if record.is_app:
            logger.debug("Starting %s (%d start callables)", record, len(record.start_queue))
            for fn in record.start_queue:
                context.call(fn, (), record.facade)
