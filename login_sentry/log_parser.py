import logging
from typing import Optional

from .models import LogLine

logger = logging.getLogger(__name__)


class LogParser:
    """
    Best-effort field extraction for syslog-style authentication lines.

    Fields are taken by whitespace position: month, day and time come first,
    the user is token 8 and the source IP is token 10, e.g.

        Jun 10 03:32:36 host sshd[31]: Accepted password for bob from 10.0.0.9

    Missing tokens become empty strings, so a malformed line never fails.
    """

    USER_FIELD = 8
    IP_FIELD = 10

    def __init__(self, user_field: int = USER_FIELD, ip_field: int = IP_FIELD):
        self.user_field = user_field
        self.ip_field = ip_field

    @staticmethod
    def _field(tokens, index: int) -> str:
        return tokens[index] if index < len(tokens) else ""

    def parse_line(self, line: Optional[str]) -> LogLine:
        line = line or ""
        tokens = line.split()
        entry = LogLine(
            month=self._field(tokens, 0),
            day=self._field(tokens, 1),
            time=self._field(tokens, 2),
            user=self._field(tokens, self.user_field),
            ip=self._field(tokens, self.ip_field),
            raw=line,
        )
        if len(tokens) <= self.ip_field:
            logger.debug(f"Short log line ({len(tokens)} fields): {line!r}")
        return entry
