"""
Guard against duplicate destructive actions.

A second trigger of the same action on the same brand while the first is
still awaiting the backend is skipped instead of issuing another request.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog

logger = structlog.get_logger(__name__)


class InFlightGuard:
    def __init__(self) -> None:
        self._in_flight: set[tuple[str, str]] = set()

    def is_in_flight(self, action: str, key: str) -> bool:
        return (action, key) in self._in_flight

    @asynccontextmanager
    async def acquire(self, action: str, key: str) -> AsyncIterator[bool]:
        """
        Yield True when the caller should proceed, False when the same
        action is already running. The slot is released on exit.
        """
        token = (action, key)
        # No await between the check and the add, so this is atomic on one loop.
        if token in self._in_flight:
            logger.info("Skipping duplicate in-flight action", action=action, key=key)
            yield False
            return
        self._in_flight.add(token)
        try:
            yield True
        finally:
            self._in_flight.discard(token)


_guard = InFlightGuard()


def get_action_guard() -> InFlightGuard:
    return _guard
