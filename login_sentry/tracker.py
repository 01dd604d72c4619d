"""Login Sentry - Per-user login frequency tracking"""

from typing import AbstractSet, Dict, List

from .models import LoginEvent
from .patterns import FREQUENCY_MAX_EVENTS, FREQUENCY_WINDOW_SECONDS


class FrequencyTracker:
    """Login timestamps per user, in arrival order, for one scan"""

    def __init__(self):
        self.history: Dict[str, List[int]] = {}

    def history_for(self, user: str) -> List[int]:
        """Return the user's timestamp list, creating an empty one if needed."""
        if user not in self.history:
            self.history[user] = []
        return self.history[user]

    def record(self, user: str, timestamp: int):
        self.history_for(user).append(timestamp)

    def record_event(self, event: LoginEvent):
        self.record(event.user, event.timestamp)

    def is_frequency_violation(self, user: str, authorized: AbstractSet[str]) -> bool:
        """True when the user's four newest logins fall within the window.

        Authorized users are exempt. Only the newest four timestamps are
        compared; older bursts are not re-examined.
        """
        if user in authorized:
            return False

        times = self.history.get(user, [])
        if len(times) <= FREQUENCY_MAX_EVENTS:
            return False
        return times[-1] - times[-1 - FREQUENCY_MAX_EVENTS] <= FREQUENCY_WINDOW_SECONDS

    def __len__(self):
        return len(self.history)
