"""Entry point applying a context's Map to one source/destination pair."""

from __future__ import annotations

import logging
from typing import Any

from .pipeline.context import Context

logger = logging.getLogger(__name__)


class Mapper:
    """Stateless; one instance can serve any number of contexts and threads."""

    def map(self, destination: Any, source: Any, context: Context) -> Any:
        """Apply ``context.get_map()`` and return the updated destination.

        Dict destinations are never mutated, the returned value holds the
        result. Object destinations are updated in place and returned.
        """
        get_map = getattr(context, "get_map", None)
        if not callable(get_map):
            raise TypeError(f"{type(context).__name__} does not provide get_map()")

        active_map = get_map()
        logger.debug(
            "Mapping %s -> %s with %s",
            type(source).__name__,
            type(destination).__name__,
            getattr(context, "name", type(context).__name__),
        )
        return active_map.apply(destination, source)
