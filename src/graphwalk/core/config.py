"""
Engine configuration.

Settings are grouped in a single dataclass validated on construction. Values
can also be read from the environment:

    GRAPHWALK_DIJKSTRA_SELECTION   "scan" (default) or "heap"
    GRAPHWALK_LOG_LEVEL            level name used by LoggingObserver (default "INFO")
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError

# Constants
DIJKSTRA_SELECTIONS = ("scan", "heap")
DEFAULT_DIJKSTRA_SELECTION = "scan"
DEFAULT_LOG_LEVEL = "INFO"
ENV_PREFIX = "GRAPHWALK_"


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for the graph engine.

    Attributes:
        dijkstra_selection: How Dijkstra picks the next vertex to finish.
            "scan" walks every unfinished vertex; "heap" uses a binary heap.
            Both break ties towards the earliest inserted vertex.
        log_level: Level name LoggingObserver writes its records at.
    """

    dijkstra_selection: str = DEFAULT_DIJKSTRA_SELECTION
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        """Validate configuration values."""
        if self.dijkstra_selection not in DIJKSTRA_SELECTIONS:
            raise ConfigurationError(
                f"Unknown Dijkstra selection '{self.dijkstra_selection}'. "
                f"Must be one of: {', '.join(DIJKSTRA_SELECTIONS)}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown log level '{self.log_level}'")

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for ``log_level``."""
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Build a configuration from ``GRAPHWALK_*`` environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            dijkstra_selection=env.get(
                f"{ENV_PREFIX}DIJKSTRA_SELECTION", DEFAULT_DIJKSTRA_SELECTION
            ).strip().lower(),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper(),
        )
