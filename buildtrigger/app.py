"""
Application flow and main entry point.
"""

import asyncio
import logging
import sys
import time
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

import pydantic

from buildtrigger.cli import build_parser, resolve_options, settings_overrides
from buildtrigger.core.config import Settings
from buildtrigger.core.exceptions import BuildTriggerError, TriggerRejectedError
from buildtrigger.core.logging import get_logger, setup_logging
from buildtrigger.models.options import TriggerOptions
from buildtrigger.services.discovery import discover_builds
from buildtrigger.services.gitlab import GitLabClient, derive_base_url
from buildtrigger.services.poller import log_summary, poll_until_done

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


async def execute(
    options: TriggerOptions,
    settings: Settings,
    *,
    client: GitLabClient | None = None,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """
    Trigger the build and, when waiting, follow it to completion.

    Raises:
        BuildTriggerError: On any fatal condition
    """
    options.validate()

    base_url = None
    if options.wait:
        base_url = derive_base_url(options.url)
        logger.info(f"Base URL: {base_url}")

    if client is None:
        client = GitLabClient(options.private_token, base_url, settings.request_timeout)

    if options.tag:
        logger.info("Starting official build.")

    try:
        status = await client.trigger(options.url, options.form_data())
    except TriggerRejectedError as e:
        logger.info(f"Response status: {e.status}")
        raise

    logger.info(f"Response status: {status}")

    if not options.wait:
        return EXIT_OK

    logger.info("Press CTRL+C to terminate.")
    policy = settings.poll_policy()
    store = await discover_builds(client, options.ref, policy, sleep=sleep, clock=clock)
    await poll_until_done(client, store, policy, sleep=sleep, clock=clock)
    log_summary(store)
    return EXIT_OK


async def run(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, load settings and execute. Returns the exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = Settings(**settings_overrides(args))
    except pydantic.ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_FAILURE

    logging.getLogger().setLevel(settings.log_level)
    options = resolve_options(args, settings)

    try:
        return await execute(options, settings)
    except BuildTriggerError as e:
        logger.error(f"{e}")
        return EXIT_FAILURE


def main(argv: Sequence[str] | None = None) -> int:
    """Console entry point."""
    setup_logging()
    try:
        return asyncio.run(run(argv))
    except KeyboardInterrupt:
        logger.warning("Interrupted.")
        return EXIT_INTERRUPTED
