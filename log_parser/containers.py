"""Dependency injection containers for the log-parser application."""

from __future__ import annotations

from dependency_injector import containers, providers

from log_parser.config import Settings
from log_parser.decompression import default_registry
from log_parser.helpers import init_logger
from log_parser.parsing.definition_store import ConfigStore
from log_parser.parsing.discovery import FileDiscoverer
from log_parser.parsing.parser import LogParser


class AppContainer(containers.DeclarativeContainer):
    """Main application container.

    ``log_parser`` is a factory: call it with ``root=`` and ``config=``.
    """

    config = providers.Singleton(Settings)
    logger = providers.Singleton(
        init_logger,
        "log_parser",
        config.provided.log_level,
    )

    decoder_registry = providers.Singleton(default_registry)

    discoverer = providers.Factory(
        FileDiscoverer,
        logger=logger,
        sort=config.provided.sort_discovered_files,
    )

    config_store = providers.Singleton(ConfigStore, logger=logger)

    log_parser = providers.Factory(
        LogParser,
        logger=logger,
        decoders=decoder_registry,
        discoverer=discoverer,
    )
