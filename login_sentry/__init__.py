"""Login Sentry package"""

from .patterns import VERSION, DEFAULT_YEAR, FREQUENCY_MAX_EVENTS, FREQUENCY_WINDOW_SECONDS
from .errors import (
    LoginSentryError, MalformedTimestamp, MalformedLogLine,
    LookupFileUnavailable, LogSourceUnavailable,
)
from .models import LogFields, LoginEvent, Reason, DetectionResult, ScanSummary, ScanReport
from .timestamps import to_seconds
from .extractor import extract_fields
from .tracker import FrequencyTracker
from .rules import is_banned
from .engine import DetectionEngine
from .lookups import load_lookup
from .sources import open_source, split_url
from .output import build_report, print_report

__all__ = [
    'VERSION', 'DEFAULT_YEAR', 'FREQUENCY_MAX_EVENTS', 'FREQUENCY_WINDOW_SECONDS',
    'LoginSentryError', 'MalformedTimestamp', 'MalformedLogLine',
    'LookupFileUnavailable', 'LogSourceUnavailable',
    'LogFields', 'LoginEvent', 'Reason', 'DetectionResult', 'ScanSummary', 'ScanReport',
    'to_seconds', 'extract_fields', 'FrequencyTracker', 'is_banned', 'DetectionEngine',
    'load_lookup', 'open_source', 'split_url', 'build_report', 'print_report',
]
