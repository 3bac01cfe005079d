"""
GitLab API client for triggering builds and reading their status.
"""

from __future__ import annotations

from typing import Any

import httpx

from buildtrigger.core.exceptions import CIAPIError, TriggerRejectedError, TriggerUnreachableError
from buildtrigger.core.logging import get_logger
from .schemas import BuildInfo

logger = get_logger(__name__)


def status_line(response: httpx.Response) -> str:
    """Format a response status as ``201 Created``."""
    return f"{response.status_code} {response.reason_phrase}".strip()


class GitLabClient:
    """HTTP client for the GitLab trigger endpoint and builds API."""

    def __init__(
        self,
        private_token: str | None = None,
        base_url: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._private_token = private_token
        self._base_url = base_url
        self._timeout = timeout
        self._headers = {"PRIVATE-TOKEN": private_token or ""}

    async def trigger(self, url: str, form: dict[str, str]) -> str:
        """
        POST a build trigger.

        Args:
            url: Trigger endpoint
            form: Form fields (``ref``, ``token``, optional variables)

        Returns:
            The response status line

        Raises:
            TriggerUnreachableError: If the request could not be sent
            TriggerRejectedError: If the endpoint answered 4xx/5xx
        """
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(url, data=form, headers=headers)
        except httpx.RequestError as exc:
            raise TriggerUnreachableError(f"Trigger request failed: {exc}") from exc

        status = status_line(response)
        if response.is_error:
            detail = response.text[:500]
            raise TriggerRejectedError(f"Trigger rejected with {status}: {detail}", status=status)
        return status

    async def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
        if not self._base_url:
            raise CIAPIError("Base URL is not configured")
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CIAPIError(
                f"GitLab API error {exc.response.status_code} for {path}"
            ) from exc
        except httpx.RequestError as exc:
            raise CIAPIError(f"GitLab API request failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise CIAPIError(f"GitLab API returned invalid JSON for {path}") from exc

    async def list_builds(self, scope: str) -> list[dict[str, Any]]:
        """
        List project builds in a scope such as ``running`` or ``pending``.

        Raises:
            CIAPIError: On transport, status or payload errors
        """
        data = await self._get("builds", params={"scope": scope})
        if not isinstance(data, list):
            raise CIAPIError(f"GitLab API returned unexpected payload for scope {scope}")
        return [item for item in data if isinstance(item, dict)]

    async def get_build(self, build_id: str) -> BuildInfo:
        """
        Fetch a single build's detail.

        Raises:
            CIAPIError: On transport, status or payload errors
        """
        data = await self._get(f"builds/{build_id}")
        if not isinstance(data, dict):
            raise CIAPIError(f"GitLab API returned unexpected payload for build {build_id}")
        return BuildInfo.from_payload(data)
