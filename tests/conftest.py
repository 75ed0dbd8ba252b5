"""
Shared fixtures for the GitHub client tests.
"""

import logging

import pytest

from pr_bot.config import GitHubConfig
from pr_bot.github.client import GitHubApi

BASE_URL = "https://api.github.com"
REPO_PATH = "/repos/elastic/kibana"
TEST_LOGGER = "tests.github"


def make_tip(ref: str, sha: str) -> dict:
    return {
        "label": f"elastic:{ref}",
        "ref": ref,
        "sha": sha,
        "user": {"login": "elastic", "id": 6764390, "type": "Organization"},
        "repo": {"name": "kibana", "full_name": "elastic/kibana", "private": False},
    }


def make_pr(number: int, **overrides) -> dict:
    pr = {
        "number": number,
        "title": f"PR #{number}",
        "body": "",
        "state": "open",
        "user": {"login": "contributor", "id": 1},
        "labels": [{"name": "release_note:skip"}],
        "head": make_tip(f"feature-{number}", f"{number:040x}"),
        "base": make_tip("main", "f" * 40),
        "commits": 1,
        "additions": 10,
        "deletions": 2,
        "changed_files": 1,
    }
    pr.update(overrides)
    return pr


def make_commit(author_date: str, committer_date: str) -> dict:
    return {
        "author": {"name": "A. Author", "email": "author@example.com", "date": author_date},
        "committer": {"name": "C. Committer", "email": "committer@example.com", "date": committer_date},
        "message": "fix things",
    }


@pytest.fixture
def github_config():
    return GitHubConfig(token="test_token")


@pytest.fixture
def api(github_config):
    """GitHubApi logging to the test logger."""
    return GitHubApi(logging.getLogger(TEST_LOGGER), "test_token", github_config)


@pytest.fixture
def debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger=TEST_LOGGER)
    return caplog


@pytest.fixture
def pr_factory():
    return make_pr


@pytest.fixture
def commit_factory():
    return make_commit
