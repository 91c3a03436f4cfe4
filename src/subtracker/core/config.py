#!/usr/bin/env python3
"""
Configuration Management for Subscription Tracker

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).

The extraction and statistics functions never read configuration on their
own; callers (the CLI) pull values from here and pass them in explicitly.
"""

import logging
import os
import tempfile
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .currency import DEFAULT_CURRENCY, SUPPORTED_CURRENCIES

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class ExtractionConfig:
    """Mail extraction settings."""

    # 1 means sequential extraction
    workers: int = 1


@dataclass
class StatisticsConfig:
    """Statistics engine settings."""

    renewal_horizon_days: int = 30
    top_subscriptions: int = 5
    default_currency: str = DEFAULT_CURRENCY


@dataclass
class Config:
    """
    Main configuration class for the subscription tracker.

    Loads configuration from environment variables with defaults and
    validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    output_dir: Path

    # Component configurations
    extraction: ExtractionConfig
    statistics: StatisticsConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("SUBTRACKER_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_subtracker"
            data_dir = Path(os.getenv("SUBTRACKER_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("SUBTRACKER_DATA_DIR", "./data")).expanduser().resolve()

        output_dir = data_dir / "exports"

        extraction = ExtractionConfig(
            workers=int(os.getenv("EXTRACT_WORKERS", "1")),
        )

        statistics = StatisticsConfig(
            renewal_horizon_days=int(os.getenv("RENEWAL_HORIZON_DAYS", "30")),
            top_subscriptions=int(os.getenv("TOP_SUBSCRIPTIONS", "5")),
            default_currency=os.getenv("DEFAULT_CURRENCY", DEFAULT_CURRENCY).upper(),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            output_dir=output_dir,
            extraction=extraction,
            statistics=statistics,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.extraction.workers < 1:
            errors.append("EXTRACT_WORKERS must be at least 1")
        if self.statistics.renewal_horizon_days <= 0:
            errors.append("RENEWAL_HORIZON_DAYS must be positive")
        if self.statistics.top_subscriptions <= 0:
            errors.append("TOP_SUBSCRIPTIONS must be positive")
        if self.statistics.default_currency not in SUPPORTED_CURRENCIES:
            errors.append(
                f"DEFAULT_CURRENCY must be one of {', '.join(SUPPORTED_CURRENCIES)}, "
                f"got {self.statistics.default_currency}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        return {
            "environment": self.environment.value,
            "data_dir": str(self.data_dir),
            "output_dir": str(self.output_dir),
            "extraction": asdict(self.extraction),
            "statistics": asdict(self.statistics),
            "debug": self.debug,
            "log_level": self.log_level,
        }


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
