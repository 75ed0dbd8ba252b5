"""
GitHub Integration Layer

Request dispatch, pagination, rate limit reporting and the per-context
client cache for the GitHub REST API.
"""

from .client import (
    GitHubApi,
    GitHubProtocolError,
    LinkHeaderParseError,
    MissingLinkHeaderError,
    UnexpectedCompareResponseError,
)
from .cache import ContextCache, get_github_api, assign_github_api, close_github_api
from .parser import LinkHeaderParser
from .rate_limit import RateLimitMonitor, RateLimitSnapshot

__all__ = [
    'GitHubApi',
    'GitHubProtocolError',
    'LinkHeaderParseError',
    'MissingLinkHeaderError',
    'UnexpectedCompareResponseError',
    'ContextCache',
    'get_github_api',
    'assign_github_api',
    'close_github_api',
    'LinkHeaderParser',
    'RateLimitMonitor',
    'RateLimitSnapshot',
]
