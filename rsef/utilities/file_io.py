"""File utilities for listings stored on disk."""

import bz2
import gzip
import logging
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)


def open_listing(filepath: Path | str) -> BinaryIO:
    """Open a listing file for binary reading.

    Files ending in .gz or .bz2 are decompressed on the fly. The caller
    owns the returned file object and should close it.

    Args:
        filepath: Path to the listing

    Returns:
        Binary file object positioned at the start of the listing

    Raises:
        OSError: If the file cannot be opened
    """
    filepath = Path(filepath)
    logger.debug("Opening listing %s", filepath)

    if filepath.suffix == ".gz":
        return gzip.open(filepath, "rb")
    if filepath.suffix == ".bz2":
        return bz2.open(filepath, "rb")
    return open(filepath, "rb")
