"""Configuration management for PyZorkParser.

Configuration is loaded from (in order of precedence):
1. Environment variables (PYZORKPARSER_*)
2. User config file (~/.pyzorkparser/config.json)
3. Default values

Environment variables:
    PYZORKPARSER_INVENTORY_ORDER - Order "drop all" walks the inventory (forward/reverse)
    PYZORKPARSER_MAX_INPUT_LENGTH - Longest accepted command line
    PYZORKPARSER_MAX_WORD_REPEAT - Longest run of one repeated word
    PYZORKPARSER_DARK_ALLOWED - Comma-separated actions allowed in the dark
    PYZORKPARSER_BRIEF - Start in brief mode (true/false)
    PYZORKPARSER_LOG_LEVEL - Logging level name (DEBUG, INFO, ...)
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path

from pyzorkparser.engine.errors import ConfigError
from pyzorkparser.engine.grammar import DARK_ALLOWED_ACTIONS
from pyzorkparser.engine.lexer import DEFAULT_MAX_LENGTH, DEFAULT_MAX_REPEAT
from pyzorkparser.engine.resolver import InventoryOrder

logger = logging.getLogger(__name__)

# Default config directory
CONFIG_DIR = Path.home() / ".pyzorkparser"
CONFIG_FILE = CONFIG_DIR / "config.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ParserConfig:
    """Parser policy configuration."""

    inventory_order: str = InventoryOrder.FORWARD.value
    max_input_length: int = DEFAULT_MAX_LENGTH
    max_word_repeat: int = DEFAULT_MAX_REPEAT
    dark_allowed_actions: list[str] = field(
        default_factory=lambda: sorted(DARK_ALLOWED_ACTIONS)
    )

    def validate(self) -> None:
        """Raise ConfigError for values the parser cannot use."""
        valid_orders = [order.value for order in InventoryOrder]
        if self.inventory_order not in valid_orders:
            raise ConfigError(
                f"inventory_order must be one of {valid_orders}, "
                f"not {self.inventory_order!r}"
            )
        if self.max_input_length < 1:
            raise ConfigError(f"max_input_length must be positive, not {self.max_input_length}")
        if self.max_word_repeat < 1:
            raise ConfigError(f"max_word_repeat must be positive, not {self.max_word_repeat}")


@dataclass
class GameConfig:
    """Game configuration."""

    brief_mode: bool = False
    log_level: str = "WARNING"

    def validate(self) -> None:
        """Raise ConfigError for an unknown log level."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {list(LOG_LEVELS)}, not {self.log_level!r}")


@dataclass
class Config:
    """Main configuration container."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    game: GameConfig = field(default_factory=GameConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary for saving."""
        return {
            "parser": asdict(self.parser),
            "game": asdict(self.game),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create from dictionary."""
        config = cls()
        try:
            if "parser" in data:
                config.parser = ParserConfig(**data["parser"])
            if "game" in data:
                config.game = GameConfig(**data["game"])
        except TypeError as e:
            raise ConfigError(f"Unknown configuration key: {e}") from e
        return config

    def validate(self) -> None:
        """Validate every section."""
        self.parser.validate()
        self.game.validate()


def _get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    if value in ("false", "0", "no", "off"):
        return False
    return default


def _get_env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    value = os.environ.get(key, "")
    try:
        return int(value)
    except ValueError:
        return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from environment and/or file.

    Environment variables take precedence over file config. Raises
    ConfigError if the merged configuration is invalid.
    """
    config_file = path or CONFIG_FILE
    config = Config()

    # Try to load from file first
    if config_file.exists():
        try:
            with open(config_file) as f:
                data = json.load(f)
            config = Config.from_dict(data)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable config file {config_file}: {e}")

    # Override with environment variables
    if "PYZORKPARSER_INVENTORY_ORDER" in os.environ:
        config.parser.inventory_order = os.environ["PYZORKPARSER_INVENTORY_ORDER"].lower()
    if "PYZORKPARSER_MAX_INPUT_LENGTH" in os.environ:
        config.parser.max_input_length = _get_env_int(
            "PYZORKPARSER_MAX_INPUT_LENGTH", DEFAULT_MAX_LENGTH
        )
    if "PYZORKPARSER_MAX_WORD_REPEAT" in os.environ:
        config.parser.max_word_repeat = _get_env_int(
            "PYZORKPARSER_MAX_WORD_REPEAT", DEFAULT_MAX_REPEAT
        )
    if "PYZORKPARSER_DARK_ALLOWED" in os.environ:
        config.parser.dark_allowed_actions = [
            action.strip().lower()
            for action in os.environ["PYZORKPARSER_DARK_ALLOWED"].split(",")
            if action.strip()
        ]
    if "PYZORKPARSER_BRIEF" in os.environ:
        config.game.brief_mode = _get_env_bool("PYZORKPARSER_BRIEF")
    if "PYZORKPARSER_LOG_LEVEL" in os.environ:
        config.game.log_level = os.environ["PYZORKPARSER_LOG_LEVEL"].upper()

    config.validate()
    return config


def save_config(config: Config, path: Path | None = None) -> None:
    """Save configuration to file."""
    config_file = path or CONFIG_FILE
    config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(config_file, "w") as f:
        json.dump(config.to_dict(), f, indent=2)


# Global config instance (lazy loaded)
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from sources."""
    global _config
    _config = load_config()
    return _config
