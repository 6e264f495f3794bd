"""Propagation waits between swap steps.

The account API applies license changes eventually. Two strategies are
available: a fixed pause (the historical behaviour, 4 s then 3 s) and bounded
polling with exponential backoff. Both block the calling thread.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Protocol

from loguru import logger

from core.config import AppSettings, WaitMode

Sleep = Callable[[float], None]
Condition = Callable[[], bool]


class PropagationWait(Protocol):
    def wait(self, until: Condition, *, label: str) -> None:
        ...


@dataclass
class FixedDelay:
    """Sleep for a set duration; `until` is never evaluated."""

    seconds: float
    sleep: Sleep = time.sleep

    def wait(self, until: Condition, *, label: str) -> None:
        logger.debug("Waiting {:.1f}s for {}", self.seconds, label)
        self.sleep(self.seconds)


@dataclass
class PollUntil:
    """Re-check `until` with growing intervals until it holds or time runs out.

    Timing out is not an error here: the caller's verification step decides
    whether the swap succeeded.
    """

    initial_seconds: float
    backoff_factor: float
    max_interval_seconds: float
    timeout_seconds: float
    sleep: Sleep = time.sleep

    def wait(self, until: Condition, *, label: str) -> None:
        interval = self.initial_seconds
        waited = 0.0
        attempts = 0
        while waited < self.timeout_seconds:
            step = min(interval, self.timeout_seconds - waited)
            self.sleep(step)
            waited += step
            attempts += 1
            if until():
                logger.debug("{} observed after {} poll(s), {:.1f}s", label, attempts, waited)
                return
            interval = min(interval * self.backoff_factor, self.max_interval_seconds)
        logger.warning("Gave up waiting for {} after {:.1f}s", label, waited)


@dataclass
class SwapWaits:
    """The two waits of a swap: after the donor demotion and before verifying."""

    after_donor: PropagationWait
    before_verify: PropagationWait


def build_waits(settings: AppSettings, *, sleep: Sleep = time.sleep) -> SwapWaits:
    if settings.wait_mode is WaitMode.POLL:
        def poller() -> PollUntil:
            return PollUntil(
                initial_seconds=settings.poll_initial_seconds,
                backoff_factor=settings.poll_backoff_factor,
                max_interval_seconds=settings.poll_max_interval_seconds,
                timeout_seconds=settings.poll_timeout_seconds,
                sleep=sleep,
            )

        return SwapWaits(after_donor=poller(), before_verify=poller())

    return SwapWaits(
        after_donor=FixedDelay(settings.donor_delay_seconds, sleep=sleep),
        before_verify=FixedDelay(settings.verify_delay_seconds, sleep=sleep),
    )
