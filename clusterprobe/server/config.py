"""Configuration management for the clusterprobe agent.

Supports YAML-based configuration with per-check settings.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass
class CheckConfig:
    """Configuration for a single check."""

    enabled: bool = True
    interval: int = 60  # seconds
    timeout: int = 10
    extra: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a check-specific setting."""
        return self.extra.get(key, default)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class Config:
    """Main configuration container."""

    agent_name: str = "clusterprobe"
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    checks: Dict[str, CheckConfig] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        agent = data.get("agent", {})

        log_data = data.get("logging", {})
        logging_config = LoggingConfig(
            level=str(log_data.get("level", "INFO")).upper(),
            format=log_data.get("format", DEFAULT_LOG_FORMAT),
        )

        checks_data = data.get("checks", {})
        checks = {}
        for name, check_data in checks_data.items():
            if isinstance(check_data, dict):
                checks[name] = CheckConfig(
                    enabled=check_data.get("enabled", True),
                    interval=check_data.get("interval", 60),
                    timeout=check_data.get("timeout", 10),
                    extra={k: v for k, v in check_data.items() if k not in ("enabled", "interval", "timeout")},
                )

        return cls(
            agent_name=agent.get("name", "clusterprobe"),
            logging=logging_config,
            checks=checks,
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "Config":
        """Load config from YAML file."""
        if not path.exists():
            return cls()
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """Load config from path or defaults.

        Checks in order:
        1. Provided path
        2. CLUSTERPROBE_CONFIG env var
        3. ./configs/config.yaml
        4. ./config.yaml
        5. ~/.clusterprobe/config.yaml
        6. Default config
        """
        paths_to_try = []

        if config_path:
            paths_to_try.append(Path(config_path))

        if env_path := os.environ.get("CLUSTERPROBE_CONFIG"):
            paths_to_try.append(Path(env_path))

        paths_to_try.extend([
            Path("./configs/config.yaml"),
            Path("./config.yaml"),
            Path.home() / ".clusterprobe" / "config.yaml",
        ])

        for path in paths_to_try:
            if path.exists():
                return cls.from_yaml(path)

        return cls()

    def get_check_config(self, name: str) -> CheckConfig:
        """Get config for a specific check."""
        return self.checks.get(name, CheckConfig())

    def is_check_enabled(self, name: str) -> bool:
        """Check if a check is enabled."""
        return self.get_check_config(name).enabled

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "agent": {"name": self.agent_name},
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
            },
            "checks": {
                name: {
                    "enabled": check.enabled,
                    "interval": check.interval,
                    "timeout": check.timeout,
                    **check.extra,
                }
                for name, check in self.checks.items()
            },
        }


def configure_logging(config: LoggingConfig) -> None:
    """Set up root logging from config."""
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=config.format)
