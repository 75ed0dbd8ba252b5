"""
Property-based tests for commit dates and rate limit throttling.

Property: the date of a commit is the later of its author and committer dates
Property: the rate limit monitor logs at most once per throttle window
"""

import logging
from datetime import timezone

from hypothesis import given, strategies as st

from pr_bot.github.rate_limit import RateLimitMonitor
from pr_bot.models.commit import Commit, CommitActor, get_commit_date

aware_datetimes = st.datetimes(timezones=st.just(timezone.utc))


class CountingLogger:
    def __init__(self):
        self.messages = []

    def info(self, msg, extra=None):
        self.messages.append((msg, extra))


class TestCommitDateProperties:

    @given(author_date=aware_datetimes, committer_date=aware_datetimes)
    def test_commit_date_is_max(self, author_date, committer_date):
        """
        Given: Any author and committer timestamps
        When: The commit date is computed
        Then: It equals the later of the two, in either order
        """
        commit = Commit(
            author=CommitActor(date=author_date),
            committer=CommitActor(date=committer_date),
        )
        swapped = Commit(
            author=CommitActor(date=committer_date),
            committer=CommitActor(date=author_date),
        )

        assert get_commit_date(commit) == max(author_date, committer_date)
        assert get_commit_date(swapped) == get_commit_date(commit)


class TestRateLimitThrottleProperties:

    @given(
        gaps=st.lists(st.floats(min_value=0, max_value=30, allow_nan=False), min_size=1, max_size=50),
        remaining=st.integers(min_value=0, max_value=5000),
    )
    def test_at_most_one_log_per_window(self, gaps, remaining):
        """
        Given: Responses carrying rate limit headers at arbitrary times
        When: They are fed to one monitor
        Then: Logged entries are at least one window apart and always
              carry the values of the response that triggered them
        """
        now = [0.0]
        log = CountingLogger()
        monitor = RateLimitMonitor(log, interval=10, clock=lambda: now[0])

        emitted_at = []
        for i, gap in enumerate(gaps):
            now[0] += gap
            before = len(log.messages)
            monitor.check({"x-ratelimit-remaining": str(remaining + i), "x-ratelimit-limit": "10000"})
            if len(log.messages) > before:
                emitted_at.append(now[0])
                assert log.messages[-1][1]["rate_limit"]["remaining"] == float(remaining + i)

        assert emitted_at[0] == gaps[0]
        assert all(later - earlier >= 10 for earlier, later in zip(emitted_at, emitted_at[1:]))
        assert monitor.latest.remaining == float(remaining + len(gaps) - 1)
