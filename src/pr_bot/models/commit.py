"""
Commit Data Models

Commit and compare payloads plus the derived compare result.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class CommitActor(BaseModel):
    """Author or committer of a git commit"""
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    email: Optional[str] = None
    date: datetime


class Commit(BaseModel):
    """The git-level `commit` object of a GitHub commit response"""
    model_config = ConfigDict(extra="allow")

    author: CommitActor
    committer: CommitActor
    message: str = ""

    @property
    def date(self) -> datetime:
        return get_commit_date(self)


class CompareCommit(BaseModel):
    """Entry of the `commits` list of a compare response"""
    model_config = ConfigDict(extra="allow")

    sha: str
    commit: Commit
    html_url: Optional[str] = None


class CompareResponse(BaseModel):
    """Body of `GET /repos/{owner}/{repo}/compare/{head}...{base}`"""
    model_config = ConfigDict(extra="allow")

    ahead_by: int
    behind_by: int = 0
    status: Optional[str] = None
    total_commits: Optional[int] = None
    commits: List[CompareCommit] = []

    @field_validator('ahead_by', 'behind_by')
    @classmethod
    def validate_counts(cls, v):
        if v < 0:
            raise ValueError('Commit counts must be non-negative')
        return v


@dataclass
class CompareResult:
    """Commits a head ref is missing from its base ref"""
    total_missing_commits: int
    missing_commits: List[CompareCommit]  # oldest first

    def __post_init__(self):
        if self.total_missing_commits < 0:
            raise ValueError("total_missing_commits must be non-negative")

    @property
    def oldest_missing_commit(self) -> Optional[CompareCommit]:
        return self.missing_commits[0] if self.missing_commits else None


def get_commit_date(commit: Commit) -> datetime:
    """
    Date of a commit: the later of its author and committer dates.

    Amended or rebased commits can be committed long after they were
    authored, cherry-picks the other way round.
    """
    committer_date = commit.committer.date
    author_date = commit.author.date
    return committer_date if committer_date > author_date else author_date
