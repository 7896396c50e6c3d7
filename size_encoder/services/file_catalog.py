"""
Lists the files available for compression in the input folder.

Every regular file in the folder is a candidate, whatever its extension; an
unsupported file is only detected later, when ffprobe rejects it. The listing
keeps the order returned by the operating system and numbers the entries from
1, so the indices are only meaningful for the listing they came from.
"""

import os
from typing import List

from loguru import logger

from ..domain.models import CatalogEntry


def list_input_files(directory: str) -> List[CatalogEntry]:
    """
    Builds the catalog of candidate files in `directory`.

    Args:
        directory: The input folder, e.g. "./input".

    Returns:
        Entries numbered `1..N` in directory-listing order. Empty when the
        folder has no regular files.

    Raises:
        OSError: If the folder does not exist or cannot be read.
    """
    file_names = [name for name in os.listdir(directory) if os.path.isfile(os.path.join(directory, name))]
    entries = [
        CatalogEntry(index=i, file_name=name, path=os.path.join(directory, name))
        for i, name in enumerate(file_names, start=1)
    ]
    logger.debug(f"Found {len(entries)} file(s) in {directory}")
    return entries


def find_entry(entries: List[CatalogEntry], index: int) -> CatalogEntry | None:
    """Returns the entry with the given display index, or None."""
    for entry in entries:
        if entry.index == index:
            return entry
    return None
