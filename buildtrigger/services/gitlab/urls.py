"""
Helpers for GitLab API URLs.
"""

import re

from buildtrigger.core.exceptions import BaseUrlError

BASE_URL_PATTERN = re.compile(r"^http.+projects/\d+/")


def derive_base_url(trigger_url: str) -> str:
    """
    Extract the project API prefix from a trigger URL.

    ``http://host/api/v4/projects/42/trigger/pipeline`` gives
    ``http://host/api/v4/projects/42/``.

    Raises:
        BaseUrlError: If the URL has no ``projects/<id>/`` segment
    """
    match = BASE_URL_PATTERN.match(trigger_url or "")
    if match is None:
        raise BaseUrlError(
            "Unexpected URL format. Should be "
            "'http://<domain>/.../projects/<project-id>/...'."
        )
    return match.group(0)
