"""Login Sentry - Data models"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional


class Reason(Enum):
    """Why a line was flagged"""
    NONE = 'none'
    BANNED_ADDRESS = 'banned_address'
    FREQUENCY = 'frequency'


@dataclass(frozen=True)
class LogFields:
    """Fields extracted from one auth log line"""
    month: str
    day: str
    time: str
    user: str
    address: str
    raw: str

    @property
    def timestamp_text(self) -> str:
        return f"{self.month} {self.day} {self.time}"


@dataclass(frozen=True)
class LoginEvent:
    """A login that went through the frequency rule"""
    user: str
    address: str
    timestamp: int


@dataclass(frozen=True)
class DetectionResult:
    """Classification of one input line"""
    line_number: int
    flagged: bool
    reason: Reason
    raw_line: str
    error: Optional[str] = None

    @property
    def malformed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class ScanSummary:
    """Totals for one scan"""
    lines_processed: int = 0
    hacking_attempts_found: int = 0
    malformed_lines: int = 0

    @classmethod
    def from_results(cls, results: Iterable[DetectionResult]) -> 'ScanSummary':
        lines = attempts = malformed = 0
        for result in results:
            lines += 1
            if result.flagged:
                attempts += 1
            if result.malformed:
                malformed += 1
        return cls(lines, attempts, malformed)


@dataclass
class ScanReport:
    """Per-line results of a scan plus its summary"""
    results: List[DetectionResult] = field(default_factory=list)
    summary: ScanSummary = field(default_factory=ScanSummary)

    @property
    def flagged(self) -> List[DetectionResult]:
        return [r for r in self.results if r.flagged]

    @property
    def malformed(self) -> List[DetectionResult]:
        return [r for r in self.results if r.malformed]
