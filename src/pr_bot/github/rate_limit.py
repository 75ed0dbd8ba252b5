"""
Rate Limit Monitor

Reads GitHub's ``x-ratelimit-*`` response headers and reports the
remaining budget in the log, at most once per throttle window.
"""

import threading
import time
import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Union

REMAINING_HEADER = 'x-ratelimit-remaining'
LIMIT_HEADER = 'x-ratelimit-limit'
DEFAULT_INTERVAL_SECONDS = 10.0


@dataclass(frozen=True)
class RateLimitSnapshot:
    """Rate limit budget as reported by one response"""
    remaining: float
    total: float

    @classmethod
    def from_headers(cls, headers: Optional[Mapping[str, str]]) -> Optional["RateLimitSnapshot"]:
        """
        Build a snapshot from response headers.

        Returns None unless both headers are present and numeric; not every
        endpoint reports a rate limit.
        """
        if not headers:
            return None

        remaining = _get_header(headers, REMAINING_HEADER)
        total = _get_header(headers, LIMIT_HEADER)
        if not remaining or not total:
            return None

        try:
            return cls(remaining=float(remaining), total=float(total))
        except ValueError:
            return None


def _get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    # httpx.Headers is case-insensitive, plain dicts are not
    value = headers.get(name)
    if value is None:
        for key, candidate in headers.items():
            if key.lower() == name:
                return candidate
    return value


class RateLimitMonitor:
    """
    Throttled rate limit logger.

    The first snapshot seen in a window is logged immediately and opens a
    window of ``interval`` seconds; snapshots arriving while the window is
    open only replace ``latest`` and are never logged. Shared by every
    request made through one client, so the window state is lock-guarded.
    """

    def __init__(
        self,
        log: Union[logging.Logger, logging.LoggerAdapter],
        interval: float = DEFAULT_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.log = log
        self.interval = interval
        self._clock = clock
        self._lock = threading.Lock()
        self._last_emitted_at: Optional[float] = None
        self.latest: Optional[RateLimitSnapshot] = None

    def check(self, headers: Optional[Mapping[str, str]]) -> None:
        """Inspect response headers and log the rate limit if due."""
        snapshot = RateLimitSnapshot.from_headers(headers)
        if snapshot is None:
            return

        with self._lock:
            self.latest = snapshot
            now = self._clock()
            if self._last_emitted_at is not None and now - self._last_emitted_at < self.interval:
                return
            self._last_emitted_at = now

        self._emit(snapshot)

    def _emit(self, snapshot: RateLimitSnapshot) -> None:
        self.log.info(
            f"rate limit {_format_number(snapshot.remaining)}/{_format_number(snapshot.total)}",
            extra={
                'type': 'githubRateLimit',
                'rate_limit': {
                    'remaining': snapshot.remaining,
                    'total': snapshot.total,
                },
            },
        )


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)
