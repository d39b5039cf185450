from collections import defaultdict
from typing import AbstractSet, Dict, List


class LoginHistory:
    """
    Per-user login timestamps (epoch seconds), in the order they were seen.

    A user violates the frequency rule when more than ``max_logins`` logins
    have been recorded and the most recent ``max_logins + 1`` of them span at
    most ``window_seconds``. Only the trailing window is inspected, so a burst
    is reported on every line for which the trailing window still qualifies.
    Checking every window in the history would be a stricter alternative.
    """

    def __init__(self, max_logins: int = 3, window_seconds: int = 20):
        self.max_logins = max_logins
        self.window_seconds = window_seconds
        self._logins: Dict[str, List[int]] = defaultdict(list)

    def record(self, user: str, timestamp: int) -> None:
        # Append only; log lines are assumed to be chronological
        self._logins[user].append(timestamp)

    def is_frequency_violation(self, user: str, authorized_users: AbstractSet[str]) -> bool:
        if user in authorized_users:
            return False
        logins = self._logins.get(user, [])
        if len(logins) <= self.max_logins:
            return False
        return logins[-1] - logins[-1 - self.max_logins] <= self.window_seconds

    def timestamps(self, user: str) -> List[int]:
        return list(self._logins.get(user, []))

    def __contains__(self, user: str) -> bool:
        return user in self._logins

    def __len__(self) -> int:
        return len(self._logins)
