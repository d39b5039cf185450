"""
Lookup list loader for LoginSentry.

Loads whitespace-delimited word lists such as banned_ips.txt and
authorized_users.txt into immutable sets.
"""

import logging
import os
from typing import FrozenSet

logger = logging.getLogger(__name__)


def load_lookup(file_path: str) -> FrozenSet[str]:
    """
    Load every whitespace-delimited token of a file into a set.

    Args:
        file_path: Path to the lookup file

    Returns:
        frozenset: the distinct tokens found in the file

    Raises:
        FileNotFoundError: if the file does not exist
        OSError: if the file cannot be read
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Lookup file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        entries = frozenset(f.read().split())

    logger.info(f"Loaded {len(entries)} entries from {file_path}")
    return entries
