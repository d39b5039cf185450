"""
Log processing for LoginSentry.

Runs the two intrusion rules over a stream of authentication log lines:

    1. Any line whose source IP is in the banned list is flagged.
    2. Otherwise the login is recorded for its user, and unless the user is
       authorized, more than 3 logins within 20 seconds is flagged.

A banned-IP line is never recorded in the login history, so no line can be
flagged by both rules.
"""

import logging
from typing import AbstractSet, Iterable, Optional

from .alert_manager import AlertManager
from .log_parser import LogParser
from .login_history import LoginHistory
from .models import DetectionResult, RunSummary, Verdict
from .timestamp_converter import DEFAULT_YEAR, TimestampError, to_ordinal

logger = logging.getLogger(__name__)


class LogProcessor:
    """
    Single forward pass over log lines with per-user login tracking.
    """

    def __init__(
        self,
        banned_ips: AbstractSet[str],
        authorized_users: AbstractSet[str],
        year: int = DEFAULT_YEAR,
        history: Optional[LoginHistory] = None,
        alert_manager: Optional[AlertManager] = None,
        parser: Optional[LogParser] = None,
    ):
        """
        Initialize the processor.

        Args:
            banned_ips: IP addresses whose logins are always flagged
            authorized_users: users exempt from the frequency rule
            year: year assumed for every log timestamp
            history: login history to update (a fresh one by default)
            alert_manager: receives flagged results; None disables reporting
            parser: log line parser
        """
        self.banned_ips = frozenset(banned_ips)
        self.authorized_users = frozenset(authorized_users)
        self.year = year
        self.history = history if history is not None else LoginHistory()
        self.alert_manager = alert_manager
        self.parser = parser or LogParser()
        self.summary = RunSummary()
        self._last_timestamp: Optional[int] = None
        self._out_of_order_warned = False

    def process_line(self, line: str) -> DetectionResult:
        """
        Apply both rules to one line and update the running summary.

        Returns:
            DetectionResult: the verdict for this line
        """
        entry = self.parser.parse_line(line)
        verdict = Verdict.NOT_FLAGGED

        if entry.ip in self.banned_ips:
            verdict = Verdict.BANNED_IP
            self.summary.banned_ip_hits += 1
        elif not entry.user:
            logger.debug(f"Skipping frequency check, no user field: {line!r}")
        else:
            try:
                timestamp = to_ordinal(entry.timestamp, self.year)
            except TimestampError as e:
                logger.debug(f"Skipping frequency check: {e}")
                self.summary.skipped_timestamps += 1
            else:
                self._check_order(timestamp, line)
                self.history.record(entry.user, timestamp)
                if self.history.is_frequency_violation(entry.user, self.authorized_users):
                    verdict = Verdict.FREQUENCY
                    self.summary.frequency_hits += 1

        result = DetectionResult(
            verdict=verdict,
            line=line,
            user=entry.user,
            ip=entry.ip,
            timestamp=entry.timestamp,
        )
        if result.flagged:
            self.summary.hacks += 1
            if self.alert_manager is not None:
                self.alert_manager.send_alert(result)

        self.summary.lines += 1
        return result

    def process(self, lines: Iterable[str]) -> RunSummary:
        """
        Process every line of ``lines`` and report the summary.

        Returns:
            RunSummary: counters for the whole run
        """
        for line in lines:
            self.process_line(line)

        logger.info(
            f"Processed {self.summary.lines} lines: "
            f"{self.summary.banned_ip_hits} banned IP, "
            f"{self.summary.frequency_hits} frequency"
        )
        if self.alert_manager is not None:
            self.alert_manager.report_summary(self.summary)
        return self.summary

    def _check_order(self, timestamp: int, line: str) -> None:
        # Timestamps going backwards usually mean the log crosses a year boundary
        if (
            self._last_timestamp is not None
            and timestamp < self._last_timestamp
            and not self._out_of_order_warned
        ):
            logger.warning(
                f"Timestamp earlier than a previous line (log may span a year "
                f"boundary; assumed year is {self.year}): {line!r}"
            )
            self._out_of_order_warned = True
        self._last_timestamp = timestamp
