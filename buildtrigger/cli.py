"""
Command line parsing.

Flags use the single-dash long form (``-ref main -wait=false``); the
double-dash spelling is accepted as well.
"""

import argparse

from buildtrigger.core.config import Settings
from buildtrigger.models.options import TriggerOptions

_TRUE = {"1", "t", "true", "y", "yes", "on"}
_FALSE = {"0", "f", "false", "n", "no", "off"}


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="buildtrigger",
        description="Trigger a GitLab build and optionally wait for it to finish",
    )
    ap.add_argument(
        "-ref", "--ref",
        metavar="[branch]",
        help="The branch to build. Branch names, short commit SHAs, and full commit SHAs are also valid.",
    )
    ap.add_argument(
        "-tag", "--tag",
        type=parse_bool, nargs="?", const=True, default=False,
        help="Trigger a build with tag.",
    )
    ap.add_argument(
        "-version", "--version",
        metavar="[full-version]",
        help="The full version of the build in the format 'major.minor.build.revision'.",
    )
    ap.add_argument(
        "-token", "--token",
        metavar="[token]",
        help="The token for the trigger build authentication (env TRIGGER_TOKEN).",
    )
    ap.add_argument(
        "-url", "--url",
        metavar="[url]",
        help="The url to send the build trigger (env TRIGGER_URL).",
    )
    ap.add_argument(
        "-wait", "--wait",
        type=parse_bool, nargs="?", const=True, default=True,
        help="Wait for the result by polling the build status until done (default true).",
    )
    ap.add_argument(
        "-usrtoken", "--usrtoken",
        metavar="[token]",
        help="User's private token for accessing url's API (env GITLAB_PRIVATE_TOKEN).",
    )
    ap.add_argument(
        "-timeout", "--timeout",
        type=float, metavar="[seconds]",
        help="Give up waiting after this many seconds; 0 waits forever (env MAX_WAIT).",
    )
    ap.add_argument(
        "-interval", "--interval",
        type=float, metavar="[seconds]",
        help="Seconds between status polls (env POLL_INTERVAL).",
    )
    return ap


def resolve_options(args: argparse.Namespace, settings: Settings) -> TriggerOptions:
    """Layer command line flags over environment settings."""
    return TriggerOptions(
        ref=(args.ref or "").strip(),
        token=args.token or settings.trigger_token or "",
        url=args.url or settings.trigger_url or "",
        tag=bool(args.tag),
        version=(args.version or "").strip(),
        wait=bool(args.wait),
        private_token=args.usrtoken or settings.gitlab_private_token or "",
    )


def settings_overrides(args: argparse.Namespace) -> dict:
    """Settings fields given explicitly on the command line."""
    overrides = {}
    if args.timeout is not None:
        overrides["max_wait"] = args.timeout
    if args.interval is not None:
        overrides["poll_interval"] = args.interval
    return overrides
