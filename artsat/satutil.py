"""Small file helpers shared by the command-line tools."""

from __future__ import annotations

import os
from typing import IO

CONFIG_DIR_NAME = ".find_orb"


def trim_line(line: str) -> str:
    """Cut a line at its first CR or LF, then drop trailing spaces."""
    for i, char in enumerate(line):
        if char in "\r\n":
            line = line[:i]
            break
    return line.rstrip(" ")


def make_config_dir_name(name: str) -> str:
    """Return the path of ``name`` inside the user's configuration directory."""
    home = os.environ.get("HOME")
    if home:
        return f"{home}/{CONFIG_DIR_NAME}/{name}"
    return name


def local_then_config_open(filename: str, mode: str = "rb") -> IO:
    """Open ``filename`` locally, falling back to the configuration directory.

    Raises the fallback's ``OSError`` if neither location can be opened.
    """
    try:
        return open(filename, mode)
    except OSError:
        return open(make_config_dir_name(filename), mode)