"""Login Sentry - Lookup file loading"""

import logging
from pathlib import Path
from typing import FrozenSet, Union

from .errors import LookupFileUnavailable

logger = logging.getLogger(__name__)


def load_lookup(path: Union[str, Path]) -> FrozenSet[str]:
    """Read a whitespace separated token file (banned IPs, authorized users)."""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            entries = frozenset(f.read().split())
    except (OSError, UnicodeDecodeError) as e:
        raise LookupFileUnavailable(path, e) from e

    logger.debug("Loaded %d entries from %s", len(entries), path)
    return entries
