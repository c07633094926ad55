"""Retry configuration and pure retry decisions for outgoing requests.

``RetryPolicy`` never sleeps and never performs I/O: it only answers "should
this failed attempt be retried, and after how long". The transport client owns
the loop and the sleep hook.

Backoff follows ``backoff_factor * 2**attempt`` seconds, with the first retry
immediate. A ``Retry-After`` header on a retryable response overrides the
computed backoff.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Collection
from dataclasses import dataclass
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from numbers import Real
from typing import Union

from ..errors import AppError, AppErrorCode
from .response import HttpResponse

ECONNRESET = "ECONNRESET"
ETIMEDOUT = "ETIMEDOUT"


def _invalid(message: str) -> AppError:
    return AppError(AppErrorCode.INVALID_ARGUMENT.value, message)


def _is_non_negative_number(value: object) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value >= 0
    )


def _is_collection(value: object) -> bool:
    return isinstance(value, Collection) and not isinstance(value, (str, bytes))


@dataclass(frozen=True)
class RetryConfig:
    """Immutable retry settings shared read-only by every request.

    Args:
        max_retries: Retries after the first attempt; 0 disables retries.
        io_error_codes: Transport error codes (``ECONNRESET``...) worth retrying.
        status_codes: HTTP statuses worth retrying.
        max_delay_in_millis: Upper bound for any single wait.
        backoff_factor: Exponential backoff multiplier; 0 or ``None`` means
            retry without waiting.
    """

    max_retries: int
    io_error_codes: frozenset[str] = frozenset()
    status_codes: frozenset[int] = frozenset()
    max_delay_in_millis: int = 60_000
    backoff_factor: float | None = None

    def __post_init__(self) -> None:
        if (
            not isinstance(self.max_retries, int)
            or isinstance(self.max_retries, bool)
            or self.max_retries < 0
        ):
            raise _invalid("max_retries must be a non-negative integer")
        if self.backoff_factor is not None and not _is_non_negative_number(
            self.backoff_factor
        ):
            raise _invalid("backoff_factor must be a non-negative number")
        if not _is_non_negative_number(self.max_delay_in_millis):
            raise _invalid("max_delay_in_millis must be a non-negative number")
        if not _is_collection(self.status_codes):
            raise _invalid("status_codes must be a collection of HTTP statuses")
        if not _is_collection(self.io_error_codes):
            raise _invalid("io_error_codes must be a collection of error codes")
        object.__setattr__(self, "status_codes", frozenset(self.status_codes))
        object.__setattr__(self, "io_error_codes", frozenset(self.io_error_codes))


def default_retry_config() -> RetryConfig:
    """Return the standard policy: 4 retries on resets, timeouts and 503."""
    return RetryConfig(
        max_retries=4,
        io_error_codes=frozenset({ECONNRESET, ETIMEDOUT}),
        status_codes=frozenset({503}),
        max_delay_in_millis=60_000,
        backoff_factor=0.5,
    )


@dataclass(frozen=True)
class IoFailure:
    """Transport-level failure with no HTTP response attached."""

    code: str
    message: str
    cause: BaseException | None = None


@dataclass(frozen=True)
class RetryDecision:
    """Outcome of one retry consultation."""

    should_retry: bool
    delay_millis: int = 0


NO_RETRY = RetryDecision(should_retry=False)

Outcome = Union[IoFailure, HttpResponse]


def parse_retry_after(value: str, *, now: datetime | None = None) -> int:
    """Return the wait in milliseconds requested by a ``Retry-After`` value.

    Accepts delta-seconds or an HTTP-date. Dates in the past and unparsable
    values yield 0.
    """
    text = value.strip()
    if text.isdigit():
        return int(text) * 1000
    try:
        when = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return 0
    if when is None:
        return 0
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    current = now or datetime.now(UTC)
    return max(0, math.ceil((when - current).total_seconds() * 1000))


class RetryPolicy:
    """Decide whether and when a failed attempt is retried."""

    def __init__(
        self,
        config: RetryConfig | None,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config
        self._clock = clock or (lambda: datetime.now(UTC))

    def is_retry_eligible(self, outcome: Outcome, attempt: int) -> bool:
        """Return whether ``outcome`` of attempt number ``attempt`` may be retried."""
        config = self.config
        if config is None or attempt >= config.max_retries:
            return False
        if isinstance(outcome, IoFailure):
            return outcome.code in config.io_error_codes
        return outcome.status in config.status_codes

    def backoff_delay_millis(self, attempt: int) -> int:
        """Return the exponential backoff wait before retry ``attempt``."""
        config = self.config
        if config is None or attempt == 0 or not config.backoff_factor:
            return 0
        delay = config.backoff_factor * (2**attempt) * 1000
        return int(min(delay, config.max_delay_in_millis))

    def decide(self, outcome: Outcome, attempt: int) -> RetryDecision:
        """Return the retry decision for one failed attempt."""
        config = self.config
        if config is None or not self.is_retry_eligible(outcome, attempt):
            return NO_RETRY
        if isinstance(outcome, HttpResponse):
            retry_after = outcome.headers.get("retry-after")
            if retry_after is not None:
                delay = parse_retry_after(retry_after, now=self._clock())
                return RetryDecision(
                    should_retry=True,
                    delay_millis=int(min(delay, config.max_delay_in_millis)),
                )
        return RetryDecision(
            should_retry=True, delay_millis=self.backoff_delay_millis(attempt)
        )
