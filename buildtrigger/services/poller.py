"""
Poll loop that follows discovered builds until they finish.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Any

from buildtrigger.core.exceptions import CIAPIError, PollTimeoutError
from buildtrigger.core.logging import get_logger
from buildtrigger.models.build import TERMINAL_STATUSES, BuildRecord, format_duration
from buildtrigger.models.policy import PollPolicy
from buildtrigger.services.gitlab.client import GitLabClient
from buildtrigger.state.builds import BuildsStore

logger = get_logger(__name__)


async def check_build(
    client: GitLabClient,
    build: BuildRecord,
    clock: Callable[[], float] = time.monotonic,
) -> None:
    """Fetch one build's status and mark it done when terminal."""
    try:
        info = await client.get_build(build.id)
    except CIAPIError as e:
        logger.warning(f"{e}")
        return

    if not info.complete:
        return

    logger.info(f"{info.ref} [{info.name}] build status: {info.status}")
    build.name = info.name
    build.status = info.status

    if info.status in TERMINAL_STATUSES:
        build.mark_done(info.status, clock())
        logger.info(f"The {info.name} build took {format_duration(build.elapsed)} to run.")


async def poll_until_done(
    client: GitLabClient,
    store: BuildsStore,
    policy: PollPolicy,
    *,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> BuildsStore:
    """
    Poll every pending build each round until all are terminal.

    Args:
        client: Client bound to the project API base URL
        store: Builds found by discovery, updated in place
        policy: Poll interval and optional maximum wait

    Returns:
        The same store, with every record done

    Raises:
        PollTimeoutError: If ``policy.max_wait`` elapses first
    """
    began = clock()

    while True:
        for build in store.pending():
            await check_build(client, build, clock)

        if store.all_done:
            return store

        if policy.max_wait is not None and clock() - began >= policy.max_wait:
            waiting = ", ".join(b.id for b in store.pending())
            raise PollTimeoutError(
                f"Builds still running after {format_duration(policy.max_wait)}: {waiting}"
            )

        await sleep(policy.poll_interval)


def log_summary(store: BuildsStore) -> None:
    """Log the final status and duration of every build."""
    for build in store.all():
        elapsed = "-" if build.elapsed is None else format_duration(build.elapsed)
        logger.info(f"{build.id} {build.name}: {build.status} in {elapsed}")
