"""
Configuration management for the Firestore decoder.
Handles environment variables, YAML files and default settings.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .model.schemas import DEFAULT_DATABASE_NAME, DatabaseId, ServerTimestampBehavior

# Load environment variables
load_dotenv()

FLAVORS = ("classic", "exp", "lite")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(name: str, default: Optional[str] = None):
    return field(default_factory=lambda: os.getenv(name, default))


@dataclass
class Config:
    """Configuration class for the Firestore decoder."""

    # Database the client is bound to
    project_id: str = _env("FIRESTORE_PROJECT_ID", "")
    database: str = _env("FIRESTORE_DATABASE", DEFAULT_DATABASE_NAME)

    # Which client flavor decoded values are built for
    flavor: str = _env("FIRESTORE_FLAVOR", "classic")

    # Server timestamp policy used when none is passed to decode()
    server_timestamps: str = _env("FIRESTORE_SERVER_TIMESTAMPS", ServerTimestampBehavior.NONE.value)

    # Logging
    log_level: str = _env("LOG_LEVEL", "INFO")
    log_file: Optional[str] = _env("LOG_FILE")

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        return cls()

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "Config":
        """Create configuration from dictionary."""
        return cls(**config_dict)

    @classmethod
    def from_yaml(cls, config_path: str = "config.yaml") -> "Config":
        """
        Load configuration from the `database` block of a YAML file.

        Args:
            config_path (str): Path to the configuration file

        Returns:
            Config: Configuration; keys missing from the file keep their
            environment defaults.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file or its `database` block is not a mapping.
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r') as file:
            raw = yaml.safe_load(file) or {}

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration file {config_path} must contain a mapping at the top level")

        database_block = raw.get("database", {}) or {}
        if not isinstance(database_block, dict):
            raise ValueError(f"The 'database' block of {config_path} must be a mapping")
        known = {name for name in cls.__dataclass_fields__}
        return cls(**{key: value for key, value in database_block.items() if key in known})

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "project_id": self.project_id,
            "database": self.database,
            "flavor": self.flavor,
            "server_timestamps": self.server_timestamps,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    def validate(self) -> bool:
        """Validate configuration."""
        required_fields = ["project_id", "database"]

        for name in required_fields:
            if not getattr(self, name):
                raise ValueError(f"Configuration field '{name}' is required")

        if self.flavor not in FLAVORS:
            raise ValueError(f"Unknown flavor '{self.flavor}', expected one of {FLAVORS}")

        ServerTimestampBehavior.coerce(self.server_timestamps)

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}', expected one of {LOG_LEVELS}")
        return True

    def database_id(self) -> DatabaseId:
        return DatabaseId(project_id=self.project_id, database=self.database)
