"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from setgame_server.logging.replay_logger import ReplayLogConfig
from setgame_server.models.event import GameMode


class GameConfig(BaseModel):
    """Game configuration."""

    mode: GameMode = GameMode.NORMAL
    seed: int | None = None  # Deck shuffle seed (random if None)


class RulesConfig(BaseModel):
    """Rules configuration."""

    # Setchain claims are checked structurally only unless this is set
    chain_requires_set: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_deck: bool = False


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    rules: RulesConfig = RulesConfig()
    logging: LoggingConfig = LoggingConfig()
    replay_log: ReplayLogConfig = ReplayLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
