"""Centralized configuration management using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defines application settings, loaded from environment variables or .env file.

    Attributes
    ----------
    log_level : str
        Level name of the program's logger (INFO, VERBOSE, DEBUG, SPAM...).
    sort_discovered_files : bool
        Whether discovered log files are processed in lexical order.
    default_config_path : str
        Parser config used when none is given on the command line.
    """

    log_level: str = "INFO"
    sort_discovered_files: bool = True
    default_config_path: str = "parser.yml"

    model_config = SettingsConfigDict(
        env_prefix="LOG_PARSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
