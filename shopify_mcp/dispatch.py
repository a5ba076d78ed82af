from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Mapping, Optional

from .categories import CategoryConfig, get_category_config

logger = logging.getLogger(__name__)

Registrar = Callable[[object, object], None]


def register_enabled_categories(
    server,
    client,
    enabled_categories: Iterable[str],
    *,
    registrars: Optional[Mapping[str, Registrar]] = None,
    lookup: Callable[[str], Optional[CategoryConfig]] = get_category_config,
) -> List[str]:
    """Run the module registrars of every enabled category, in order.

    A registrar runs once per occurrence: a category listed twice, or a module
    shared by two enabled categories, is registered twice. Returns the module
    ids in the order their registrars ran.
    """
    if registrars is None:
        from handlers import MODULE_REGISTRARS as registrars

    invoked: List[str] = []
    for name in enabled_categories:
        category = lookup(name)
        if category is None:
            logger.warning("Skipping unknown tool category %r", name)
            continue
        for module in category.modules:
            registrar = registrars.get(module)
            if registrar is None:
                logger.warning("No registrar for module %r in category %r", module, name)
                continue
            logger.debug("Registering %s tools (category=%s)", module, name)
            registrar(server, client)
            invoked.append(module)
    return invoked
