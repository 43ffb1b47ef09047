"""Service Handle — lazily-built, process-wide engine client shared by the POST path.

Invariants:
    - The engine client is built on the first get(), never at import or startup
    - Concurrent first calls build exactly one instance (lock + double check)
    - A failed build leaves the handle empty; the next get() tries again
    - aclose() releases the instance; a later get() builds a fresh one

Design Decisions:
    - threading.Lock over asyncio.Lock: the critical section never awaits, and the
      handle stays correct if reached from worker threads
    - Explicit handle object over closure state: one accessor, one teardown, testable
    - The listing path does NOT use this handle (it builds its own client per request)
"""

import logging
import threading
from collections.abc import Callable

from agent_gateway.core.engine_protocols import MultiAgentEngine
from agent_gateway.infrastructure.multi_agent_client import build_multi_agent_service

logger = logging.getLogger(__name__)


class ServiceHandle:
    """Owns at most one engine client for the life of the process."""

    def __init__(self, factory: Callable[[], MultiAgentEngine]):
        self._factory = factory
        self._instance: MultiAgentEngine | None = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._instance is not None

    def get(self) -> MultiAgentEngine:
        """Return the shared engine client, building it on first use."""
        instance = self._instance
        if instance is not None:
            return instance
        with self._lock:
            if self._instance is None:
                self._instance = self._factory()
                logger.info("Multi-agent service client initialized")
            return self._instance

    async def aclose(self) -> None:
        """Release the shared client, if one was built."""
        with self._lock:
            instance, self._instance = self._instance, None
        if instance is not None:
            await instance.aclose()
            logger.info("Multi-agent service client closed")


# Singleton handle: holds nothing until the first agent request
agent_service_handle = ServiceHandle(build_multi_agent_service)


def get_service_handle() -> ServiceHandle:
    """FastAPI dependency for the shared engine handle."""
    return agent_service_handle
