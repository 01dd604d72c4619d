"""Login Sentry - Auth log line extraction"""

from .errors import MalformedLogLine
from .models import LogFields
from .patterns import FIELD_POSITIONS, MIN_TOKENS


def extract_fields(line: str) -> LogFields:
    """Pick month, day, time, user and source address out of an auth log line.

    The layout is positional; tokens past the source address are ignored.
    Field contents are not validated here.
    """
    raw = line.rstrip('\r\n')
    tokens = raw.split()
    if len(tokens) < MIN_TOKENS:
        raise MalformedLogLine(raw, f"expected at least {MIN_TOKENS} fields, got {len(tokens)}")

    return LogFields(
        raw=raw,
        **{name: tokens[pos] for name, pos in FIELD_POSITIONS.items()}
    )
