"""LoginSentry - Data models"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class LogLine:
    """Parsed view of one authentication log line"""
    month: str
    day: str
    time: str
    user: str
    ip: str
    raw: str

    @property
    def timestamp(self) -> str:
        return f"{self.month} {self.day} {self.time}"


class Verdict(Enum):
    NOT_FLAGGED = "not_flagged"
    BANNED_IP = "banned_ip"
    FREQUENCY = "frequency"


REASONS = {
    Verdict.BANNED_IP: "banned IP",
    Verdict.FREQUENCY: "frequency",
}


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of running the detection rules on one line"""
    verdict: Verdict
    line: str
    user: str = ""
    ip: str = ""
    timestamp: str = ""

    @property
    def flagged(self) -> bool:
        return self.verdict is not Verdict.NOT_FLAGGED

    @property
    def message(self) -> str:
        return f"Hacking due to {REASONS[self.verdict]}. Line: {self.line}"


@dataclass
class RunSummary:
    """Counters accumulated over a whole run"""
    lines: int = 0
    hacks: int = 0
    banned_ip_hits: int = 0
    frequency_hits: int = 0
    skipped_timestamps: int = 0

    @property
    def message(self) -> str:
        return f"Processed {self.lines} lines. Found {self.hacks} possible hacking attempts."
