"""
Discovery of builds started by a trigger.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Any

from buildtrigger.core.exceptions import CIAPIError, NoBuildsDetectedError
from buildtrigger.core.logging import get_logger
from buildtrigger.models.build import BuildRecord
from buildtrigger.models.policy import PollPolicy
from buildtrigger.services.gitlab.client import GitLabClient
from buildtrigger.state.builds import BuildsStore

logger = get_logger(__name__)

SCOPES = ("running", "pending")


async def fetch_scope(
    client: GitLabClient,
    scope: str,
    policy: PollPolicy,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> list[dict[str, Any]]:
    """
    Fetch the build list for a scope, retrying while it comes back empty.

    Errors are logged and count as an empty attempt.
    """
    for attempt in range(1, policy.discovery_attempts + 1):
        logger.info("Contacting repository...")
        try:
            builds = await client.list_builds(scope)
        except CIAPIError as e:
            logger.warning(f"{e}")
            builds = []

        if builds:
            return builds

        if attempt < policy.discovery_attempts:
            await sleep(policy.discovery_wait(attempt))

    return []


async def discover_builds(
    client: GitLabClient,
    ref: str,
    policy: PollPolicy,
    *,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> BuildsStore:
    """
    Find the running and pending builds for ``ref``.

    Returns:
        A store holding one record per matching build id

    Raises:
        NoBuildsDetectedError: If no build matches the ref
    """
    store = BuildsStore()

    for scope in SCOPES:
        for item in await fetch_scope(client, scope, policy, sleep):
            if item.get("ref") != ref:
                continue
            build_id = item.get("id")
            if build_id is None:
                continue
            # Same id in both scopes: the later scope wins.
            store.add(BuildRecord(id=str(build_id), start=clock()))

    if not store:
        raise NoBuildsDetectedError(
            "Cannot detect if build has started. "
            "You can check the status manually in GitLab."
        )

    logger.info(f"Active builds: {', '.join(store.get_all_ids())}")
    return store
