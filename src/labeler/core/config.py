#!/usr/bin/env python3
"""
Configuration Management for the YNAB Labeler

Handles environment-based configuration with secure defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class YNABConfig:
    """YNAB API configuration."""

    api_token: str | None = None
    base_url: str = "https://api.ynab.com/v1"
    timeout: float = 30.0
    rate_limit_delay: float = 0.5  # Seconds between API calls
    budget_id: str | None = None
    account_id: str | None = None


@dataclass
class Config:
    """
    Main configuration class for the labeler.

    Loads configuration from environment variables with secure defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    cache_dir: Path
    output_dir: Path

    ynab: YNABConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("LABELER_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_labeler"
            base_dir = Path(os.getenv("LABELER_DATA_DIR", str(default_test_dir)))
        else:
            base_dir = Path(os.getenv("LABELER_DATA_DIR", "./data")).expanduser().resolve()

        data_dir = base_dir
        cache_dir = data_dir / "ynab" / "cache"
        output_dir = data_dir / "runs"

        for directory in [data_dir, cache_dir, output_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        ynab = YNABConfig(
            api_token=os.getenv("YNAB_API_TOKEN"),
            base_url=os.getenv("YNAB_BASE_URL", "https://api.ynab.com/v1"),
            timeout=float(os.getenv("YNAB_TIMEOUT", "30")),
            rate_limit_delay=float(os.getenv("YNAB_RATE_LIMIT_DELAY", "0.5")),
            budget_id=os.getenv("YNAB_BUDGET_ID") or None,
            account_id=os.getenv("YNAB_ACCOUNT_ID") or None,
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            cache_dir=cache_dir,
            output_dir=output_dir,
            ynab=ynab,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for name, path in [
            ("data_dir", self.data_dir),
            ("cache_dir", self.cache_dir),
            ("output_dir", self.output_dir),
        ]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        if self.environment == Environment.PRODUCTION and not self.ynab.api_token:
            errors.append("YNAB_API_TOKEN is required in production")

        if self.ynab.timeout <= 0:
            errors.append("YNAB timeout must be positive")
        if self.ynab.rate_limit_delay < 0:
            errors.append("YNAB rate limit delay must be non-negative")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # Reduce noise from the HTTP stack in production
        if self.environment == Environment.PRODUCTION:
            logging.getLogger("httpx").setLevel(logging.WARNING)
            logging.getLogger("httpcore").setLevel(logging.WARNING)

    def get_sensitive_fields(self) -> list:
        """Get list of field names that contain sensitive data."""
        return ["ynab.api_token"]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    full_field_name = f"{field_name}.{nested_name}"

                    if not include_sensitive and full_field_name in self.get_sensitive_fields():
                        nested_dict[nested_name] = "***REDACTED***"
                    elif isinstance(nested_value, Path):
                        nested_dict[nested_name] = str(nested_value)
                    else:
                        nested_dict[nested_name] = nested_value

                result[field_name] = nested_dict
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()

