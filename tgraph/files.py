"""Workspace files."""

import logging
import os.path
from pathlib import Path
from typing import Any, Mapping, Optional

from tgraph import defaults
from tgraph.config import CONFIG_NAME
from tgraph.logs import fatal


def create_workspace(root: Path, name: str):
    """Create the default workspace files and directories in root.

    Exits with a fatal log if the workspace already exists.
    """

    def create(root: Path, structure: Mapping[str, Any]):
        for name, val in structure.items():
            path = root / name
            if isinstance(val, dict):
                path.mkdir()
                create(path, val)
            elif isinstance(val, str):
                with open(path, "w") as f:
                    f.write(val)
            else:
                raise Exception(f"unexpected type: {type(val)}")

    try:
        create(root, defaults.structure(name))
    except FileExistsError as ex:
        fatal("%s already exists", ex.filename)


def find_config(start: Optional[Path] = None) -> Optional[Path]:
    """Find a tgraph.yml file in start (default cwd) or its parents.

    Returns None if there is none. The path is relative to the current
    directory to keep log messages short.
    """
    path = (start or Path.cwd()).resolve()
    while True:
        config = path / CONFIG_NAME
        if config.is_file():
            # Path.relative_to does not go up directories, os.path.relpath does.
            relative = Path(os.path.relpath(config, Path.cwd()))
            logging.debug("found config %s", relative)
            return relative
        if path == path.parent:
            return None
        path = path.parent
