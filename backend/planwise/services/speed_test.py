"""Simulated speed test. Animates toward random results on a fixed tick.

No network I/O happens. While testing, values creep toward the gauge
ceilings; once the test duration elapses the final random results replace
them. One asyncio task drives everything and is cancelled by close().
"""

import asyncio
import logging
import random
from dataclasses import asdict, dataclass

from planwise.config import settings

logger = logging.getLogger(__name__)


@dataclass
class SpeedReading:
    download: float = 0.0   # Mbps
    upload: float = 0.0     # Mbps
    latency: float = 0.0    # ms


@dataclass(frozen=True)
class SpeedTestParams:
    # Gauge ceilings while animating
    download_ceiling: float = 300.0
    upload_ceiling: float = 100.0
    latency_floor: float = 50.0
    latency_start: float = 150.0

    # Per-tick random step sizes
    download_step: float = 10.0
    upload_step: float = 5.0
    latency_step: float = 2.0

    # Final result ranges
    download_range: tuple[float, float] = (50.0, 300.0)
    upload_range: tuple[float, float] = (20.0, 100.0)
    latency_range: tuple[float, float] = (5.0, 45.0)


class SpeedTest:
    """State: idle → testing → complete. start() while testing is ignored."""

    def __init__(
        self,
        tick_seconds: float | None = None,
        duration_seconds: float | None = None,
        params: SpeedTestParams | None = None,
        rng: random.Random | None = None,
    ):
        self.tick_seconds = tick_seconds if tick_seconds is not None else settings.speed_test_tick_seconds
        self.duration_seconds = duration_seconds if duration_seconds is not None else settings.speed_test_duration_seconds
        self.params = params or SpeedTestParams()
        self._rng = rng or random.Random()
        self._task: asyncio.Task | None = None

        self.testing = False
        self.animated = SpeedReading()
        self.results: SpeedReading | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        """Kick off a test on the running loop. Returns the driving task."""
        if self.running:
            return self._task
        self.testing = True
        self.results = None
        self.animated = SpeedReading(latency=self.params.latency_start)
        self._task = asyncio.get_running_loop().create_task(self._run())
        return self._task

    async def close(self) -> None:
        """Stop ticking and release the task. Safe to call at any time."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
            logger.info("Speed test cancelled")
        self.testing = False

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.duration_seconds
        while loop.time() < deadline:
            await asyncio.sleep(self.tick_seconds)
            self._tick()
        self._finish()

    def _tick(self) -> None:
        p = self.params
        a = self.animated
        a.download = min(a.download + self._rng.random() * p.download_step, p.download_ceiling)
        a.upload = min(a.upload + self._rng.random() * p.upload_step, p.upload_ceiling)
        a.latency = max(a.latency - self._rng.random() * p.latency_step, p.latency_floor)

    def _finish(self) -> None:
        p = self.params
        self.results = SpeedReading(
            download=self._rng.uniform(*p.download_range),
            upload=self._rng.uniform(*p.upload_range),
            latency=self._rng.uniform(*p.latency_range),
        )
        self.animated = SpeedReading(**asdict(self.results))
        self.testing = False
        logger.info(
            f"Speed test complete: {self.results.download:.1f}/{self.results.upload:.1f} Mbps, "
            f"{self.results.latency:.0f} ms"
        )

    def to_dict(self) -> dict:
        return {
            "testing": self.testing,
            "animated": asdict(self.animated),
            "results": asdict(self.results) if self.results else None,
        }


# Singleton
speed_test = SpeedTest()
