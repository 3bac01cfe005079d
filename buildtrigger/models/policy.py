"""
Retry and polling policy.
"""

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PollPolicy:
    """Timing knobs for build discovery and the poll loop."""

    discovery_attempts: int = 5
    discovery_delay: float = 2.0
    poll_interval: float = 10.0
    max_wait: float | None = None
    backoff: Callable[[int], float] | None = field(default=None, compare=False)

    def discovery_wait(self, attempt: int) -> float:
        """Seconds to wait after the given 1-based discovery attempt."""
        if self.backoff is not None:
            return self.backoff(attempt)
        return self.discovery_delay
