# Services module - build discovery and polling
from .discovery import discover_builds
from .poller import poll_until_done

__all__ = ["discover_builds", "poll_until_done"]
