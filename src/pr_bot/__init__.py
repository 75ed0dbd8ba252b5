"""
PR Bot GitHub Client

Request/response layer used by the pull request status bot to talk to the
GitHub REST API.
"""

__version__ = "1.0.0"

from .github.client import GitHubApi
from .github.cache import ContextCache, get_github_api, assign_github_api, close_github_api

__all__ = ["GitHubApi", "ContextCache", "get_github_api", "assign_github_api", "close_github_api"]
