from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class BestEffort:
    """Awaitable callable whose failure is logged, never raised.

    Handed to ``BackgroundTasks`` so a side effect runs after the response
    is prepared without being able to alter it.
    """

    def __init__(
        self,
        func: Callable[..., Awaitable[Any]],
        *args: Any,
        description: str,
        **kwargs: Any,
    ) -> None:
        self._func = func
        self._args = args
        self._kwargs = kwargs
        self.description = description

    async def __call__(self) -> bool:
        try:
            await self._func(*self._args, **self._kwargs)
        except Exception:  # noqa: BLE001
            logger.warning("Best-effort task failed: %s", self.description, exc_info=True)
            return False
        return True
