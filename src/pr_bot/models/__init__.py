"""
Data Models

Payload shapes consumed and produced by the GitHub client.
"""

from .pull_request import (
    AuthorAssociation,
    GitHubLabel,
    GitHubRepo,
    GitHubUser,
    PullRequest,
    PullRequestEvent,
    PullRequestTip,
)
from .commit import Commit, CommitActor, CompareCommit, CompareResponse, CompareResult, get_commit_date
from .status import CommitStatusOptions, COMMIT_STATUS_STATES

__all__ = [
    "AuthorAssociation",
    "GitHubLabel",
    "GitHubRepo",
    "GitHubUser",
    "PullRequest",
    "PullRequestEvent",
    "PullRequestTip",
    "Commit",
    "CommitActor",
    "CompareCommit",
    "CompareResponse",
    "CompareResult",
    "get_commit_date",
    "CommitStatusOptions",
    "COMMIT_STATUS_STATES",
]
