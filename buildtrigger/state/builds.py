"""
Storage for builds tracked during a single run.
"""

from buildtrigger.models.build import BuildRecord


def _id_order(build_id: str) -> tuple[int, str]:
    # Numeric ids sort by value when compared as (length, text).
    return len(build_id), build_id


class BuildsStore:
    """Builds discovered for the triggered ref, keyed by build id."""

    def __init__(self):
        self._builds: dict[str, BuildRecord] = {}

    def add(self, build: BuildRecord) -> None:
        """Track a build, replacing any earlier record with the same id."""
        self._builds[build.id] = build

    def get(self, build_id: str) -> BuildRecord | None:
        """Get a build by id."""
        return self._builds.get(build_id)

    def get_all_ids(self) -> list[str]:
        """Get all tracked build ids."""
        return sorted(self._builds, key=_id_order)

    def all(self) -> list[BuildRecord]:
        """All builds, ordered by id."""
        return [self._builds[i] for i in self.get_all_ids()]

    def pending(self) -> list[BuildRecord]:
        """Builds without a terminal status yet."""
        return [b for b in self.all() if not b.done]

    @property
    def all_done(self) -> bool:
        return all(b.done for b in self._builds.values())

    def __len__(self) -> int:
        return len(self._builds)

    def __contains__(self, build_id: str) -> bool:
        return build_id in self._builds
