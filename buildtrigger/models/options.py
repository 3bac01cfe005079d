"""
Resolved trigger inputs and their validation.
"""

import re
from dataclasses import dataclass

from buildtrigger.core.exceptions import ValidationError

VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+\.\d+$")
HELP_HINT = "See -h option for more information."


@dataclass(frozen=True)
class TriggerOptions:
    """Everything needed to trigger, and optionally follow, a build."""

    ref: str
    token: str
    url: str
    tag: bool = False
    version: str = ""
    wait: bool = True
    private_token: str = ""

    def validate(self) -> None:
        """
        Check required inputs before any request is made.

        Raises:
            ValidationError: On the first missing or malformed input
        """
        if not self.ref:
            raise ValidationError(f"No ref/branch provided. {HELP_HINT}")
        if not self.token:
            raise ValidationError(f"No trigger token provided. {HELP_HINT}")
        if not self.url:
            raise ValidationError(f"No target url. {HELP_HINT}")
        if self.tag:
            if not self.version:
                raise ValidationError(f"No version provided. {HELP_HINT}")
            # Version should match 'major.minor.build.revision' format.
            if not VERSION_PATTERN.fullmatch(self.version):
                raise ValidationError(
                    "Invalid version format. Should be "
                    f"'major.minor.build.revision': {self.version}"
                )
        if self.wait and not self.private_token:
            raise ValidationError(f"No user private token provided. {HELP_HINT}")

    def form_data(self) -> dict[str, str]:
        """Form fields for the trigger POST."""
        data = {"ref": self.ref, "token": self.token}
        if self.tag:
            data["variables[FULL_VERSION]"] = self.version
        return data
