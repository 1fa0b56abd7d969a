"""Log files parser."""
import sys
from argparse import Namespace
from typing import Optional, Sequence

from dependency_injector import providers
from dependency_injector.wiring import Provide, inject
from verboselogs import VerboseLogger

from log_parser.config import Settings
from log_parser.containers import AppContainer
from log_parser.exceptions import LogParserError
from log_parser.helpers import dump_to_file, parse_options, verbosity_to_level
from log_parser.parsing.definition_store import ConfigStore
from log_parser.parsing.parser import LogParser

DESCRIPTION = "Extract structured events from log files."


@inject
def main(
    args: Namespace,
    logger: VerboseLogger = Provide[AppContainer.logger],
    config_store: ConfigStore = Provide[AppContainer.config_store],
    parser_factory: providers.Factory = Provide[AppContainer.log_parser.provider],
    settings: Settings = Provide[AppContainer.config],
) -> int:
    """Program's entrypoint, returns the exit status."""
    config_path = args.config or settings.default_config_path

    if args.generate_config:
        try:
            config_store.generate_template(config_path)
        except LogParserError as err:
            logger.error(f"Failed generating {config_path}: {err}")
            return 1
        return 0

    try:
        config = config_store.load(config_path)
        logger.info(f"Using parser config {config}")

        parser: LogParser = parser_factory(root=args.logfile_path, config=config)
        parser.parse()

    except LogParserError as err:
        logger.error(f"Failed to {err.operation} ({err.value!r}): {err}")
        return 1

    logger.info(f"Parsed {parser.event_count()} events")
    for event in parser.events():
        logger.info(f"Event: {event.to_json()}")

    if args.dump_json:
        if not dump_to_file(logger, args.dump_json, list(parser.events())):
            return 1

    return 0


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line, wire the container and run ``main``."""
    args = parse_options(DESCRIPTION, argv)

    app_container = AppContainer()
    if args.verbose:
        app_container.config.override(
            Settings(log_level=verbosity_to_level(args.verbose))
        )

    app_container.wire(modules=[__name__])
    try:
        return main(args)
    finally:
        app_container.unwire()
        app_container.config.reset_override()


def cli() -> None:
    sys.exit(run())


if __name__ == "__main__":
    cli()
