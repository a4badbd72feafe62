# src/bashpy/largefiles.py
"""
List regular files over a size threshold, the Python side of
``find . -maxdepth 1 -type f -size +1M``.
"""

import logging
import os
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_MIN_SIZE = 1_048_576  # 1 MiB


@dataclass
class FileEntry:
    """A regular file and its size in bytes."""
    name: str
    size: int


def find_large_files(directory=".", min_size: int = DEFAULT_MIN_SIZE) -> List[FileEntry]:
    """Return regular files directly in ``directory`` larger than ``min_size``.

    Subdirectories are not descended into and symlinks are not followed.
    Results are sorted by name.
    """
    entries = []
    with os.scandir(directory) as it:
        for entry in it:
            if not entry.is_file(follow_symlinks=False):
                continue
            size = entry.stat(follow_symlinks=False).st_size
            if size > min_size:
                entries.append(FileEntry(name=entry.name, size=size))

    logger.info(f"{len(entries)} file(s) in {directory} over {min_size} bytes")
    return sorted(entries, key=lambda e: e.name)


def format_bytes(bytes_value):
    """Format bytes to human-readable string."""
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if bytes_value < 1024.0:
            return f"{bytes_value:.2f} {unit}"
        bytes_value /= 1024.0
    return f"{bytes_value:.2f} PB"
