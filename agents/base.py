import time
import structlog
from abc import ABC, abstractmethod
from utils.logger import get_logger
from typing import Any

class BaseAgent(ABC):
    """Base class for the dashboard's orchestration agents."""

    def __init__(self, name: str):
        """
        Initialize base agent.

        Args:
            name: Agent name for logging
        """
        self.name = name
        self.logger = get_logger(f"agent.{name}")
        self.logger.debug("agent_initialized", agent=name)

    @abstractmethod
    async def execute(self, *args, **kwargs) -> Any:
        """Run the agent's task. Must be implemented by subclasses."""

    async def __call__(self, *args, **kwargs) -> Any:
        """
        Run execute() with start/finish logging.

        Provider events logged during the run carry the agent name.
        Failures are logged and re-raised.
        """
        with structlog.contextvars.bound_contextvars(agent=self.name):
            self.logger.info("agent_execution_started")
            started = time.perf_counter()
            try:
                result = await self.execute(*args, **kwargs)
            except Exception as e:
                self.logger.error("agent_execution_failed", error=str(e), exc_info=True)
                raise
            self.logger.info(
                "agent_execution_completed",
                duration_ms=round((time.perf_counter() - started) * 1000, 1)
            )
            return result

    def _log_event(self, event: str, **kwargs):
        """Helper method to log agent events."""
        self.logger.info(event, agent=self.name, **kwargs)
