"""
Configuration loader
"""
import yaml
from pathlib import Path

from quote_quiz.models import GameConfig


DEFAULT_CONFIG_PATH = "config/game.yaml"


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> GameConfig:
    """
    Load game parameters from YAML file

    Keys missing from the file keep their defaults.

    Args:
        config_path: Path to config file

    Returns:
        GameConfig object

    Raises:
        FileNotFoundError: If config file not found
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)
