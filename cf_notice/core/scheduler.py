"""
Scheduler - Runs the check cycle once or at a fixed interval.
"""

import logging
import time
from typing import Callable, Optional

from .check_cycle import CheckCycle
from .config import CheckerConfig

logger = logging.getLogger(__name__)


class Scheduler:
    """
    Drives check cycles sequentially.

    With a polling interval of zero or less a single cycle runs. Otherwise a
    cycle runs immediately and then once per interval. Cycles never overlap;
    ticks missed while a cycle was still running are skipped, not queued.
    """

    def __init__(
        self,
        config: CheckerConfig,
        cycle: CheckCycle,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.cycle = cycle
        self._clock = clock
        self._sleep = sleep

    def run(self, max_cycles: Optional[int] = None) -> int:
        """
        Run check cycles.

        Args:
            max_cycles: Stop after this many cycles in periodic mode,
                run indefinitely when None

        Returns:
            Number of cycles executed
        """
        if not self.config.periodic:
            logger.debug("Disable running interval")
            self.cycle.run()
            return 1

        interval = self.config.polling_interval
        logger.debug(f"Set interval is {interval} s")

        executed = 0
        next_start = self._clock()
        while max_cycles is None or executed < max_cycles:
            delay = next_start - self._clock()
            if delay > 0:
                self._sleep(delay)

            started = self._clock()
            self.cycle.run()
            executed += 1

            next_start = started + interval
            finished = self._clock()
            if finished > next_start:
                skipped = int((finished - next_start) // interval) + 1
                logger.warning(
                    f"Check took {finished - started:.1f}s, longer than the "
                    f"{interval}s interval; skipping {skipped} tick(s)"
                )
                next_start += skipped * interval

        return executed
