"""
Central configuration for paths and tunables.
Pydantic models for type-safe configuration management.
"""
from __future__ import annotations

import os
import logging
import json
from typing import Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class UISettings(BaseModel):
    """Console display settings."""

    model_config = ConfigDict(validate_assignment=True)

    use_unicode: bool = Field(default=True, description="Draw knights as chess glyphs instead of letters")
    show_coordinates: bool = Field(default=True, description="Show row/column labels around the board")

    @field_validator('use_unicode', 'show_coordinates', mode='before')
    @classmethod
    def validate_bool_fields(cls, v):
        return bool(v)


class SearchSettings(BaseModel):
    """Solver configuration settings."""

    model_config = ConfigDict(validate_assignment=True)

    max_nodes: Optional[int] = Field(default=None, ge=1, description="Stop the search after expanding this many nodes")
    log_progress_every: int = Field(default=1000, ge=1, description="Emit a debug line every N expanded nodes")

    @field_validator('max_nodes', mode='before')
    @classmethod
    def validate_max_nodes(cls, v):
        if v is None or v == "" or v == 0:
            return None
        return int(v)


class ScoreSettings(BaseModel):
    """Score board persistence settings."""

    model_config = ConfigDict(validate_assignment=True)

    score_file: str = Field(default="scores.json", description="Path to the JSON score file")
    leaderboard_size: int = Field(default=10, ge=1, le=100, description="Number of entries shown on the leaderboard")
    default_player_name: str = Field(default="Guest", description="Name used when no player name is given")

    @field_validator('default_player_name', mode='before')
    @classmethod
    def validate_player_name(cls, v):
        v = str(v).strip()
        return v or "Guest"


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(validate_assignment=True)

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class KnightSwapConfig(BaseModel):
    """Main configuration model for the Knight Swap project."""

    ui: UISettings = Field(default_factory=UISettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    scores: ScoreSettings = Field(default_factory=ScoreSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Metadata
    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> 'KnightSwapConfig':
        """Create configuration from environment variables."""
        return cls(
            ui=UISettings(
                use_unicode=os.getenv('KNIGHTSWAP_UNICODE', 'true').lower() == 'true',
                show_coordinates=os.getenv('KNIGHTSWAP_COORDINATES', 'true').lower() == 'true',
            ),
            search=SearchSettings(
                max_nodes=os.getenv('KNIGHTSWAP_MAX_NODES') or None,
            ),
            scores=ScoreSettings(
                score_file=os.getenv('KNIGHTSWAP_SCORE_FILE', 'scores.json'),
                leaderboard_size=int(os.getenv('KNIGHTSWAP_LEADERBOARD_SIZE', '10')),
                default_player_name=os.getenv('KNIGHTSWAP_PLAYER', 'Guest'),
            ),
            logging=LoggingSettings(
                log_level=os.getenv('KNIGHTSWAP_LOG_LEVEL', 'INFO'),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'ui': self.ui.model_dump(),
            'search': self.search.model_dump(),
            'scores': self.scores.model_dump(),
            'logging': self.logging.model_dump(),
            'version': self.version,
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'KnightSwapConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            ui=UISettings(**data.get('ui', {})),
            search=SearchSettings(**data.get('search', {})),
            scores=ScoreSettings(**data.get('scores', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )

    def update_from_dict(self, updates: Dict[str, Any]) -> None:
        """Update configuration from dictionary."""
        for section, settings in updates.items():
            if hasattr(self, section) and isinstance(settings, dict):
                section_model = getattr(self, section)
                for key, value in settings.items():
                    if hasattr(section_model, key):
                        setattr(section_model, key, value)


# Global configuration instance
_config: Optional[KnightSwapConfig] = None


def get_config() -> KnightSwapConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = KnightSwapConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> KnightSwapConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = KnightSwapConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


def ensure_dirs(config: Optional[KnightSwapConfig] = None) -> None:
    """Ensure the directory holding the score file exists."""
    cfg = config or get_config()
    d = os.path.dirname(cfg.scores.score_file)
    if d and not os.path.exists(d):
        os.makedirs(d, exist_ok=True)


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging once, controlled by env var KNIGHTSWAP_LOG_LEVEL."""
    if getattr(setup_logging, "_configured", False):
        return
    name = (level or os.environ.get("KNIGHTSWAP_LOG_LEVEL", "INFO")).upper()
    numeric: int = getattr(logging, name, logging.INFO)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
