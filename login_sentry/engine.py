"""Login Sentry - Detection engine"""

import logging
from typing import AbstractSet, Iterable, Iterator

from .errors import MalformedLogLine, MalformedTimestamp
from .extractor import extract_fields
from .models import DetectionResult, LoginEvent, Reason, ScanReport, ScanSummary
from .patterns import DEFAULT_YEAR
from .rules import is_banned
from .timestamps import to_seconds
from .tracker import FrequencyTracker

logger = logging.getLogger(__name__)


class DetectionEngine:
    """Flags break-in attempts in a batch of auth log lines.

    A line from a banned address is flagged outright and never reaches the
    frequency tracker. Any other line is recorded for its user and flagged
    when that user logged in more than 3 times within 20 seconds, unless the
    user is authorized.

    The lookup sets are only read. Each scan gets its own tracker, so one
    engine can be reused and gives the same answer for the same input.
    """

    def __init__(self, banned: AbstractSet[str], authorized: AbstractSet[str],
                 year: int = DEFAULT_YEAR, strict: bool = False):
        self.banned = banned
        self.authorized = authorized
        self.year = year
        self.strict = strict

    def process_line(self, line: str, line_num: int, tracker: FrequencyTracker) -> DetectionResult:
        try:
            fields = extract_fields(line)
        except MalformedLogLine as e:
            return self._malformed(e.line, line_num, e)

        if is_banned(fields.address, self.banned):
            logger.info("Banned address %s on line %d", fields.address, line_num)
            return DetectionResult(line_num, True, Reason.BANNED_ADDRESS, fields.raw)

        try:
            seconds = to_seconds(fields.timestamp_text, self.year)
        except MalformedTimestamp as e:
            return self._malformed(fields.raw, line_num, e)

        event = LoginEvent(user=fields.user, address=fields.address, timestamp=seconds)
        tracker.record_event(event)
        if tracker.is_frequency_violation(event.user, self.authorized):
            logger.info("Login frequency exceeded by %s on line %d", event.user, line_num)
            return DetectionResult(line_num, True, Reason.FREQUENCY, fields.raw)

        return DetectionResult(line_num, False, Reason.NONE, fields.raw)

    def _malformed(self, raw: str, line_num: int, error: Exception) -> DetectionResult:
        if self.strict:
            raise error
        logger.warning("Skipping line %d: %s", line_num, error)
        return DetectionResult(line_num, False, Reason.NONE, raw, error=str(error))

    def iter_results(self, lines: Iterable[str]) -> Iterator[DetectionResult]:
        tracker = FrequencyTracker()
        for i, line in enumerate(lines, 1):
            yield self.process_line(line, i, tracker)
        logger.debug("Tracked logins for %d users", len(tracker))

    def scan(self, lines: Iterable[str]) -> ScanReport:
        logger.info("Scan started (year=%d, strict=%s)", self.year, self.strict)
        results = list(self.iter_results(lines))
        summary = ScanSummary.from_results(results)
        logger.info(
            "Scan finished: %d lines, %d possible hacking attempts, %d malformed",
            summary.lines_processed, summary.hacking_attempts_found, summary.malformed_lines,
        )
        return ScanReport(results=results, summary=summary)
