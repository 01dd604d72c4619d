"""Login Sentry - Syslog timestamp normalization"""

from datetime import datetime

from .errors import MalformedTimestamp
from .patterns import DEFAULT_YEAR, TIMESTAMP_FORMATS


def to_seconds(timestamp: str, year: int = DEFAULT_YEAR) -> int:
    """Convert "Jun 10 03:32:36" to seconds since the epoch.

    Syslog timestamps carry no year, so ``year`` is used for every date.
    The instant is read as local time.
    """
    text = ' '.join(timestamp.split())
    for fmt in TIMESTAMP_FORMATS:
        try:
            moment = datetime.strptime(f"{year} {text}", fmt)
        except ValueError:
            continue
        return int(moment.timestamp())
    raise MalformedTimestamp(timestamp)
