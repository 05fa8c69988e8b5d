# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - ScoringConfig (dataclass)
#     accept_percent: float   (default 80.0)
#     update_divisor: int     (default 20)
#
# - OutputConfig (dataclass)
#     searchable_order: str   (default "discovery", or "sorted")
#     indent: int             (default 2)
#
# - SourceConfig (dataclass)
#     http_timeout_seconds: float (default 10.0)
#
# - AppConfig (dataclass)
#     scoring: ScoringConfig
#     output: OutputConfig
#     source: SourceConfig
#     log_level: str          (default "WARNING")
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Forget the singleton so the next get_config() re-reads the environment.
#
# USAGE:
# ------
#   from settings_guessr.config import get_config
#   config = get_config()
#   print(config.scoring.accept_percent)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


SEARCHABLE_ORDERS = ("discovery", "sorted")


@dataclass
class ScoringConfig:
    """Knobs of the scoring pass."""
    accept_percent: float = 80.0
    update_divisor: int = 20


@dataclass
class OutputConfig:
    """How the final settings are rendered."""
    searchable_order: str = "discovery"
    indent: int = 2

    def __post_init__(self):
        if self.searchable_order not in SEARCHABLE_ORDERS:
            raise ValueError(
                f"searchable_order must be one of {SEARCHABLE_ORDERS}, "
                f"got {self.searchable_order!r}"
            )


@dataclass
class SourceConfig:
    """Input source configuration."""
    http_timeout_seconds: float = 10.0


@dataclass
class AppConfig:
    """Main application configuration."""
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    source: SourceConfig = field(default_factory=SourceConfig)
    log_level: str = "WARNING"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    scoring_config = ScoringConfig(
        accept_percent=float(os.getenv("SETTINGS_GUESSR_ACCEPT_PERCENT", "80.0")),
        update_divisor=int(os.getenv("SETTINGS_GUESSR_UPDATE_DIVISOR", "20"))
    )

    output_config = OutputConfig(
        searchable_order=os.getenv("SETTINGS_GUESSR_SEARCHABLE_ORDER", "discovery").lower(),
        indent=int(os.getenv("SETTINGS_GUESSR_INDENT", "2"))
    )

    source_config = SourceConfig(
        http_timeout_seconds=float(os.getenv("SETTINGS_GUESSR_HTTP_TIMEOUT", "10.0"))
    )

    _config_instance = AppConfig(
        scoring=scoring_config,
        output=output_config,
        source=source_config,
        log_level=os.getenv("SETTINGS_GUESSR_LOG_LEVEL", "WARNING").upper()
    )

    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration."""
    global _config_instance
    _config_instance = None
