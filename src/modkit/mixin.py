"""
Merging of registries and construct tables between modules.

The consumer always wins: nothing already present in the destination is
overwritten, and the framework's reserved keys are never copied.
"""

from __future__ import annotations

import logging

from .context import Context
from .keys import UNMERGED_KEYS
from .record import ModuleRecord

logger = logging.getLogger(__name__)


def merge_registry(dest: Context, src: Context) -> list[str]:
    """
    Copy the registrations of ``src`` into ``dest``.

    Instances already created from factories in ``src`` are not carried
    over, so each consumer creates its own. Plain values are shared by
    reference.

    Returns:
        The names that were copied
    """
    copied = []
    for name, registration in src.registry.items():
        if name in UNMERGED_KEYS or dest.has(name):
            continue
        dest.adopt(name, registration.fresh())
        copied.append(name)

    if copied:
        logger.debug("Merged %s from %s into %s", copied, src, dest)
    return copied


def merge_constructs(dest: ModuleRecord, src: ModuleRecord) -> list[str]:
    """
    Copy the constructs of ``src`` into ``dest`` and expose them on its façade.

    Returns:
        The construct names that were copied
    """
    copied = []
    for name, construct in src.constructs.items():
        if name in dest.constructs:
            continue
        dest.constructs[name] = construct
        copied.append(name)

    if copied:
        logger.debug("Merged constructs %s from %s into %s", copied, src, dest)
    return copied
