"""
Tracking of the request quota reported by DNSME.

Every response carries ``x-dnsme-requestsRemaining``; the last value seen is
kept in a RateLimitState. The value is advisory: concurrent callers each
overwrite it with whatever their own response reported, last writer wins.
"""

import threading
from typing import Mapping, Optional

from .constants import HEADER_REQUESTS_REMAINING


def parse_remaining(value) -> Optional[int]:
    """Parse a quota header value, returning None if missing or not an integer."""
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class RateLimitState:
    """Most recently reported remaining request quota."""

    def __init__(self, remaining: int = 0):
        # 0 until the first response: unknown is treated as exhausted
        self._remaining = remaining
        self._lock = threading.Lock()

    @property
    def remaining(self) -> int:
        with self._lock:
            return self._remaining

    def observe(self, headers: Mapping[str, str], missing_as_exhausted: bool = True) -> Optional[int]:
        """
        Record the quota reported by a response.

        Args:
            headers: Response headers (case-insensitive mapping)
            missing_as_exhausted: Record 0 when the header is missing or
                unparsable; otherwise leave the state untouched

        Returns:
            The recorded value, or None when nothing was recorded
        """
        value = parse_remaining(headers.get(HEADER_REQUESTS_REMAINING))
        if value is None:
            if not missing_as_exhausted:
                return None
            value = 0
        with self._lock:
            self._remaining = value
        return value

    def reset(self, remaining: int = 0):
        with self._lock:
            self._remaining = remaining


# Shared by every executor that is not given its own state
DEFAULT_RATE_LIMIT_STATE = RateLimitState()
