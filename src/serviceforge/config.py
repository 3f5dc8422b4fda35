"""Runtime configuration for the serviceforge CLI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field


@dataclass
class ServiceConfig:
    """CLI configuration.

    Attributes:
        log_level: Name of the root logging level (DEBUG, INFO, ...)
        service_path: Extra directories searched when importing services
    """

    log_level: str = "WARNING"
    service_path: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> ServiceConfig:
        """Create config from environment variables.

        - SERVICEFORGE_LOG_LEVEL: logging level name (default WARNING)
        - SERVICEFORGE_SERVICE_PATH: os.pathsep-separated directories
        """
        level = os.environ.get("SERVICEFORGE_LOG_LEVEL", "WARNING").upper()
        raw_path = os.environ.get("SERVICEFORGE_SERVICE_PATH", "")
        paths = [p for p in raw_path.split(os.pathsep) if p]
        return cls(log_level=level, service_path=paths)

    @property
    def level(self) -> int:
        """Numeric logging level. Unknown names raise ValueError."""
        value = logging.getLevelName(self.log_level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return value

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=self.level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
