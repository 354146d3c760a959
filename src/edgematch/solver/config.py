"""Edge-matching solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the edge-matching solver."""

    log_dir: str = "logs"
    """Directory where one log file per solved puzzle is written. Default: "logs"."""

    show_labels: bool = True
    """Render edges with their color labels instead of raw hex bytes. Default: True."""

    print_boards: bool = False
    """Echo each parsed piece while loading a piece file. Default: False."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
