"""Helper functions."""
from argparse import ArgumentParser, Namespace
from json import JSONEncoder, dumps
from pathlib import Path
from typing import Any, Optional, Sequence

import coloredlogs
from verboselogs import VerboseLogger

VERBOSITY_LEVELS: list[str] = ["INFO", "VERBOSE", "DEBUG", "SPAM"]


class EnhancedJSONEncoder(JSONEncoder):
    """Enhanced JSON encoder for specific classes."""

    def default(self, o: Any) -> Any:  # type: ignore[override]
        """Handle custom types JSON serialization."""
        if hasattr(o, "to_dict"):
            return o.to_dict()
        return super().default(o)


def dump_to_file(
    logger: VerboseLogger, filename: str, content: str | Any
) -> bool:
    """Save data to local file.

    Parameters
    ----------
    logger : verboselogs.VerboseLogger
        The program's logger.
    filename : str
        The file to write to.
    content : str or Any
        The data to write.

    Returns
    -------
    bool
        Whether the file was written.

    """
    filepath = Path(filename)

    try:
        if not filepath.parent.exists():
            filepath.parent.mkdir(parents=True)

        if not isinstance(content, str):
            filepath.write_text(
                dumps(
                    content,
                    ensure_ascii=False,
                    cls=EnhancedJSONEncoder,
                    indent=4,
                ),
                encoding="utf-8",
            )
        else:
            filepath.write_text(content, encoding="utf-8")

    except (FileNotFoundError, OSError, PermissionError, ValueError) as err:
        logger.error(f"Failed to write file to '{str(filepath)}': {err}")
        return False

    logger.info(f"Successfully wrote '{str(filepath)}'.")
    return True


def parse_options(
    description: str, argv: Optional[Sequence[str]] = None
) -> Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    description : str
        The program's description.
    argv : list of str, optional
        Arguments to parse instead of ``sys.argv[1:]``.

    Returns
    -------
    argparse.Namespace
        Parsed command-line arguments as an object.

    """
    parser = ArgumentParser(description=description)

    parser.add_argument(
        "logfile_path",
        metavar="LOGFILES",
        type=str,
        nargs="?",
        default=None,
        help="path to the directory holding the log file(s)",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="CONFIG",
        type=str,
        default=None,
        help="path to parser configuration file",
    )
    parser.add_argument(
        "-g",
        "--generate-config",
        action="store_true",
        help="generate a new parser configuration file at CONFIG and exit",
    )
    parser.add_argument(
        "--dump-json",
        metavar="FILENAME.json",
        type=str,
        default=None,
        help="also write parsed events to a JSON file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase logs output verbosity (default: info, -v: verbose, "
        "-vv: debug, -vvv: spam)",
    )

    args: Namespace = parser.parse_args(argv)

    if not args.generate_config and not args.logfile_path:
        parser.error("LOGFILES is required unless --generate-config is given")

    return args


def verbosity_to_level(verbosity: int) -> str:
    """Map a ``-v`` count to a log level name."""
    return VERBOSITY_LEVELS[max(0, min(verbosity, len(VERBOSITY_LEVELS) - 1))]


def init_logger(
    name: str,
    verbosity_level: str = "INFO",
    formatting: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> VerboseLogger:
    """Initialize the program's logger.

    Parameters
    ----------
    name : str
        The logger's name.
    verbosity_level : str
        Verbosity log level name.
    formatting : str, optional
        The log format.

    Returns
    -------
    verboselogs.VerboseLogger
        The logger.

    """
    logger = VerboseLogger(name)

    coloredlogs.install(
        logger=logger,
        level=verbosity_level,
        fmt=formatting,
        isatty=True,
    )

    return logger
