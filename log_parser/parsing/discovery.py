from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import Optional

from verboselogs import VerboseLogger


class FileDiscoverer:
    """Expands a root directory and a glob pattern into regular files.

    Directories matched by the pattern are skipped. With ``sort`` the result
    is in lexical order; otherwise it follows the filesystem listing.
    """

    def __init__(self, logger: Optional[VerboseLogger] = None, sort: bool = True) -> None:
        self.logger = logger or VerboseLogger(__name__)
        self.sort = sort

    def discover(self, root: str | Path, pattern: str) -> list[Path]:
        root_path = Path(root)
        if not root_path.exists():
            self.logger.warning(f"Provided path {root} does not exist")
            return []

        # Path() would normalize the root; only a single trailing separator goes
        prefix = os.fspath(root)
        if prefix.endswith("/"):
            prefix = prefix[:-1]

        matches = glob.glob(f"{glob.escape(prefix)}/{pattern}", recursive=True)
        if self.sort:
            matches.sort()

        files: list[Path] = []
        for match in matches:
            path = Path(match)
            if path.is_dir():
                self.logger.warning(f"File {path} is a directory, ignoring")
                continue
            files.append(path)

        self.logger.debug(f"Discovered {len(files)} file(s) under {root} matching '{pattern}'")
        return files
