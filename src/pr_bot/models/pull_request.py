"""
Pull Request Data Models

Shapes of the pull request payloads returned by the GitHub API and
delivered by pull request webhooks.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class AuthorAssociation(str, Enum):
    """Relationship between a PR author and the repository."""
    MEMBER = "MEMBER"
    OWNER = "OWNER"
    COLLABORATOR = "COLLABORATOR"
    CONTRIBUTOR = "CONTRIBUTOR"
    FIRST_TIME_CONTRIBUTOR = "FIRST_TIME_CONTRIBUTOR"
    FIRST_TIMER = "FIRST_TIMER"
    MANNEQUIN = "MANNEQUIN"
    NONE = "NONE"


PULL_REQUEST_ACTIONS = {
    'assigned',
    'unassigned',
    'labeled',
    'unlabeled',
    'opened',
    'edited',
    'closed',
    'reopened',
    'synchronize',
    'ready_for_review',
    'locked',
    'unlocked',
    'converted_to_draft',
    'review_requested',
    'review_request_removed',
    'auto_merge_enabled',
    'auto_merge_disabled',
    'enqueued',
    'dequeued',
    'milestoned',
    'demilestoned',
}


class GitHubUser(BaseModel):
    """GitHub user or organization"""
    model_config = ConfigDict(extra="allow")

    login: str
    id: Optional[int] = None
    type: Optional[str] = None


class GitHubRepo(BaseModel):
    """GitHub repository"""
    model_config = ConfigDict(extra="allow")

    name: str
    full_name: str
    owner: Optional[GitHubUser] = None
    private: bool = False


class GitHubLabel(BaseModel):
    """Issue/PR label"""
    model_config = ConfigDict(extra="allow")

    name: str
    color: Optional[str] = None
    description: Optional[str] = None


class PullRequestTip(BaseModel):
    """One end (head or base) of a pull request"""
    model_config = ConfigDict(extra="allow")

    label: str  # "org:branch"
    ref: str  # branch name
    sha: str  # commit sha
    user: Optional[GitHubUser] = None
    repo: Optional[GitHubRepo] = None


class PullRequest(BaseModel):
    """
    Pull request record.

    Only the fields the bot relies on are typed; everything else the API
    returns is kept as extra attributes.
    """
    model_config = ConfigDict(extra="allow")

    number: int
    title: str
    body: Optional[str] = None
    user: Optional[GitHubUser] = None
    labels: List[GitHubLabel] = []
    state: Optional[str] = None
    head: PullRequestTip
    base: PullRequestTip
    created_at: Optional[str] = None  # ISO8601
    updated_at: Optional[str] = None  # ISO8601
    # plain string so values GitHub adds later still load; compare against AuthorAssociation
    author_association: Optional[str] = None
    draft: bool = False
    merged: bool = False
    mergeable: Optional[bool] = None
    rebaseable: Optional[bool] = None
    comments: int = 0
    review_comments: int = 0
    maintainer_can_modify: bool = False
    commits: int = 0
    additions: int = 0
    deletions: int = 0
    changed_files: int = 0

    @field_validator('number')
    @classmethod
    def validate_number(cls, v):
        if v <= 0:
            raise ValueError('PR number must be positive')
        return v

    @field_validator('commits', 'additions', 'deletions', 'changed_files')
    @classmethod
    def validate_counts(cls, v):
        if v < 0:
            raise ValueError('Counts must be non-negative')
        return v

    @property
    def label_names(self) -> List[str]:
        return [label.name for label in self.labels]


class PullRequestEvent(BaseModel):
    """Payload of a `pull_request` webhook delivery"""
    model_config = ConfigDict(extra="allow")

    action: str
    number: int
    pull_request: PullRequest
    repository: GitHubRepo
    sender: GitHubUser
    organization: Optional[GitHubUser] = None
    before: Any = None
    after: Any = None

    @property
    def is_known_action(self) -> bool:
        """False for actions GitHub introduced after PULL_REQUEST_ACTIONS was written"""
        return self.action in PULL_REQUEST_ACTIONS
