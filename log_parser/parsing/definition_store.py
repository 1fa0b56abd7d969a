from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError
from verboselogs import VerboseLogger

from log_parser.exceptions import ConfigurationError

from .definitions import ParserConfig


class ConfigStore:
    """Reads parser configs from, and writes templates to, YAML/JSON files."""

    def __init__(self, logger: Optional[VerboseLogger] = None) -> None:
        self.logger = logger or VerboseLogger(__name__)

    def load(self, path: str | Path) -> ParserConfig:
        """Load a parser config document.

        Parameters
        ----------
        path : str or pathlib.Path
            A ``.yml``/``.yaml`` or ``.json`` file.

        Returns
        -------
        log_parser.parsing.definitions.ParserConfig

        Raises
        ------
        log_parser.exceptions.ConfigurationError
            If the file is missing, unreadable, malformed or does not
            describe a parser config.

        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as err:
            raise ConfigurationError(
                f"Could not read parser config '{path}': {err}",
                operation="read parser config",
                value=str(path),
            ) from err

        try:
            if path.suffix.lower() == ".json":
                document = json.loads(text)
            else:
                document = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as err:
            raise ConfigurationError(
                f"Error while reading parser config '{path}': {err}",
                operation="parse parser config",
                value=str(path),
            ) from err

        if not isinstance(document, dict):
            raise ConfigurationError(
                f"Parser config '{path}' must be a mapping, got {type(document).__name__}",
                operation="parse parser config",
                value=str(path),
            )

        try:
            config = ParserConfig.model_validate(document)
        except ValidationError as err:
            raise ConfigurationError(
                f"Invalid parser config '{path}': {err}",
                operation="validate parser config",
                value=str(path),
            ) from err

        self.logger.debug(f"Loaded parser config from {path}")
        return config

    def generate_template(self, path: str | Path) -> Path:
        """Write a default parser config to ``path`` and return it."""
        path = Path(path)
        self.logger.info(f"Generating new parser configuration file to path {path}")
        try:
            if not path.parent.exists():
                path.parent.mkdir(parents=True)
            path.write_text(
                yaml.safe_dump(ParserConfig().model_dump(mode="json"), sort_keys=False),
                encoding="utf-8",
            )
        except OSError as err:
            raise ConfigurationError(
                f"Could not write parser config template '{path}': {err}",
                operation="write parser config",
                value=str(path),
            ) from err
        return path
