# -*- coding: utf-8 -*-
"""
src/emojied/utils/file_sink.py

File-save capabilities for exported images.

A sink is any callable taking `(data, filename)`. `DirectorySink` writes into
a folder (the user's Downloads folder by default); `RecordingSink` keeps the
files in memory.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

logger = logging.getLogger(__name__)


def get_downloads_dir() -> Path:
    """The user's Downloads folder, or the home directory if there is none."""
    downloads = Path.home() / "Downloads"
    return downloads if downloads.is_dir() else Path.home()


class DirectorySink:
    """Writes exported files into a directory, replacing same-named files."""

    def __init__(self, directory: Optional[Union[str, Path]] = None):
        self.directory = Path(directory) if directory else get_downloads_dir()

    def __call__(self, data: bytes, filename: str) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / Path(filename).name
        target.write_bytes(data)
        logger.info(f"Saved {len(data)} bytes to '{target}'.")
        return target


class RecordingSink:
    """Keeps every saved file in memory, in call order."""

    def __init__(self):
        self.saved: List[Tuple[str, bytes]] = []

    def __call__(self, data: bytes, filename: str) -> str:
        self.saved.append((filename, data))
        return filename

    @property
    def filenames(self) -> List[str]:
        return [name for name, _ in self.saved]
