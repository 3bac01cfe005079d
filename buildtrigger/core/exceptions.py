"""
Custom application exceptions.
"""


class BuildTriggerError(Exception):
    """Base exception for build trigger errors."""
    pass


class ValidationError(BuildTriggerError):
    """Required input missing or malformed."""
    pass


class BaseUrlError(BuildTriggerError):
    """Trigger URL does not contain a project API prefix."""
    pass


class APIError(BuildTriggerError):
    """External API call failed."""
    pass


class TriggerUnreachableError(APIError):
    """Trigger endpoint could not be reached."""
    pass


class TriggerRejectedError(APIError):
    """Trigger endpoint answered with an error status."""

    def __init__(self, message: str, status: str = ""):
        super().__init__(message)
        self.status = status


class CIAPIError(APIError):
    """CI provider builds API call failed."""
    pass


class NoBuildsDetectedError(BuildTriggerError):
    """No build matching the ref was found after triggering."""
    pass


class PollTimeoutError(BuildTriggerError):
    """Builds did not finish within the allowed wait."""
    pass
