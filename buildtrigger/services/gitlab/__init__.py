# GitLab services - trigger endpoint and builds API
from .client import GitLabClient
from .schemas import BuildInfo
from .urls import derive_base_url

__all__ = ["GitLabClient", "BuildInfo", "derive_base_url"]
