"""
Data model for tracked CI builds.
"""

from dataclasses import dataclass


TERMINAL_STATUSES = frozenset({"success", "failed", "canceled"})


def format_duration(seconds: float) -> str:
    """Render seconds as e.g. ``1h2m3.5s``, ``1m23.456s`` or ``4s``."""
    seconds = round(max(0.0, seconds), 3)
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    text = f"{secs:.3f}".rstrip("0").rstrip(".") + "s"
    if hours:
        return f"{int(hours)}h{int(minutes)}m{text}"
    if minutes:
        return f"{int(minutes)}m{text}"
    return text


@dataclass
class BuildRecord:
    """A build discovered for the triggered ref."""

    id: str
    start: float
    done: bool = False
    name: str | None = None
    status: str | None = None
    finished: float | None = None

    @property
    def elapsed(self) -> float | None:
        if self.finished is None:
            return None
        return self.finished - self.start

    def mark_done(self, status: str, now: float) -> None:
        """Record the terminal status observed at ``now``."""
        self.status = status
        self.done = True
        self.finished = now
