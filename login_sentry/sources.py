"""Login Sentry - Log line sources

Every source is a lazy, forward-only iterator of raw lines.
"""

import http.client
import logging
import urllib.error
import urllib.request
from pathlib import Path
from typing import Iterator, Tuple, Union
from urllib.parse import urlsplit

from .errors import LogSourceUnavailable
from .patterns import DEFAULT_PORTS, FETCH_TIMEOUT_SECONDS, URL_SCHEMES

logger = logging.getLogger(__name__)


def is_url(location: str) -> bool:
    return urlsplit(location).scheme.lower() in URL_SCHEMES


def split_url(url: str) -> Tuple[str, str, str]:
    """Break a URL into (host, port, path).

    >>> split_url("http://ceclnx01.cec.miamioh.edu:8080/logs/auth.log")
    ('ceclnx01.cec.miamioh.edu', '8080', '/logs/auth.log')
    """
    parts = urlsplit(url)
    if not parts.hostname:
        raise ValueError(f"No host in URL: {url!r}")

    port = parts.port  # raises ValueError on a non-numeric port
    port = str(port) if port else DEFAULT_PORTS.get(parts.scheme.lower(), '80')
    path = parts.path or '/'
    if parts.query:
        path += '?' + parts.query
    return parts.hostname, port, path


def read_file_lines(path: Union[str, Path]) -> Iterator[str]:
    path = Path(path)
    try:
        f = open(path, 'r', encoding='utf-8', errors='replace')
    except OSError as e:
        raise LogSourceUnavailable(str(path), e) from e

    logger.info("Reading log lines from %s", path)
    with f:
        for line in f:
            yield line.rstrip('\r\n')


def fetch_url_lines(url: str, timeout: float = FETCH_TIMEOUT_SECONDS) -> Iterator[str]:
    """Download a log over HTTP and yield its body line by line."""
    try:
        host, port, path = split_url(url)
        logger.info("Fetching log lines from %s:%s%s", host, port, path)
        response = urllib.request.urlopen(url, timeout=timeout)
    except (urllib.error.URLError, OSError, ValueError) as e:
        raise LogSourceUnavailable(url, e) from e

    with response:
        try:
            for raw in response:
                yield raw.decode('utf-8', errors='replace').rstrip('\r\n')
        except (OSError, http.client.HTTPException) as e:
            raise LogSourceUnavailable(url, e) from e


def open_source(location: str) -> Iterator[str]:
    """Pick a URL or file source for ``location``."""
    if is_url(location):
        return fetch_url_lines(location)
    return read_file_lines(location)
