#!/usr/bin/env python3
"""
GitHub API Demo

Lists the open pull requests of the configured repository together with
the commit date of each PR head and how far each PR is behind its base.

Usage:
    GITHUB_SECRET=<token> python examples/github_api_demo.py [limit]

Example:
    GITHUB_SECRET=ghp_xxx GITHUB_REPO_OWNER=elastic GITHUB_REPO_NAME=kibana \
        python examples/github_api_demo.py 10
"""

import asyncio
import sys

import httpx

from pr_bot.config import AppConfig, set_config
from pr_bot.context import RequestContext
from pr_bot.github.cache import close_github_api, get_github_api
from pr_bot.github.client import GitHubProtocolError


async def show_open_prs(ctx: RequestContext, limit: int) -> None:
    api = get_github_api(ctx)
    try:
        count = 0
        async for pr in api.iter_all_open_prs():
            head_date = await api.get_commit_date(pr.head.sha)
            compare = await api.compare(pr.head.sha, pr.base.ref)
            print(f"#{pr.number} {pr.title}")
            print(f"   head: {pr.head.label} @ {pr.head.sha[:8]} ({head_date.isoformat()})")
            print(f"   behind {pr.base.ref} by {compare.total_missing_commits} commit(s)")

            count += 1
            if count >= limit:
                break
    finally:
        await close_github_api(ctx)


def main():
    """Main demo function."""
    limit = 5
    if len(sys.argv) > 1:
        try:
            limit = int(sys.argv[1])
        except ValueError:
            print("Error: limit must be an integer")
            sys.exit(1)

    try:
        set_config(AppConfig.from_env())
    except ValueError as e:
        print(f"Error: {e}")
        print("Set GITHUB_SECRET to a GitHub access token")
        sys.exit(1)

    ctx = RequestContext()
    try:
        asyncio.run(show_open_prs(ctx, limit))
    except httpx.HTTPError as e:
        print(f"GitHub request failed: {e}")
        sys.exit(1)
    except GitHubProtocolError as e:
        print(f"Unexpected GitHub response: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
