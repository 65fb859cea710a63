"""Configuration management for the Route Planner."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class PlannerConfig:
    """
    Planning behavior.

    Controls how definitions are read and validated.
    """

    # Reject dependencies on destinations that were never declared
    # (default: register them on demand)
    strict_references: bool = False

    # Definition file handling
    skip_comments: bool = True
    skip_blank_lines: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "console"  # "console" or "json"
    file: Path | None = None

    @property
    def json_logs(self) -> bool:
        """Whether logs are rendered as JSON."""
        return self.format.lower() == "json"


@dataclass
class RoutePlannerConfig:
    """
    Complete configuration for the Route Planner.

    This combines all configuration sections.
    """

    planner: PlannerConfig = field(default_factory=PlannerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, config_path: Path) -> "RoutePlannerConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file

        Returns:
            RoutePlannerConfig instance

        Raises:
            ValueError: If the file is not valid YAML or not a mapping
        """
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}") from e

        # An empty file means "all defaults"
        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid configuration file structure in {config_path}: "
                f"expected dictionary, got {type(data).__name__}"
            )

        planner_data = data.get("planner") or {}
        planner = PlannerConfig(**planner_data)

        logging_data = dict(data.get("logging") or {})
        if logging_data.get("file"):
            logging_data["file"] = Path(logging_data["file"])
        logging = LoggingConfig(**logging_data)

        return cls(planner=planner, logging=logging)

    def to_file(self, config_path: Path) -> None:
        """
        Save configuration to YAML file.

        Args:
            config_path: Path to save config file
        """
        data = {
            "planner": dict(self.planner.__dict__),
            "logging": {
                k: str(v) if isinstance(v, Path) else v
                for k, v in self.logging.__dict__.items()
                if v is not None
            },
        }

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_env(cls) -> "RoutePlannerConfig":
        """
        Create configuration from environment variables.

        Environment variables:
            ROUTEPLANNER_STRICT_REFERENCES: Reject undeclared dependencies (default: false)
            LOG_LEVEL: Logging level (default: INFO)
            LOG_FORMAT: console or json (default: console)
            LOG_FILE: Optional log file path

        Returns:
            RoutePlannerConfig instance
        """
        strict_str = os.environ.get("ROUTEPLANNER_STRICT_REFERENCES", "false").lower()
        strict_references = strict_str in ("true", "1", "yes", "on")

        log_file = os.environ.get("LOG_FILE")

        return cls(
            planner=PlannerConfig(strict_references=strict_references),
            logging=LoggingConfig(
                level=os.environ.get("LOG_LEVEL", "INFO"),
                format=os.environ.get("LOG_FORMAT", "console"),
                file=Path(log_file) if log_file else None,
            ),
        )


def load_config(config_file: Path | None = None) -> RoutePlannerConfig:
    """
    Load configuration from file or environment variables.

    Args:
        config_file: Optional path to YAML config file

    Returns:
        RoutePlannerConfig instance

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist
    """
    if config_file:
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")
        return RoutePlannerConfig.from_file(config_file)
    return RoutePlannerConfig.from_env()
