"""
GitHub API Client

Handles GitHub API authentication, request dispatch, error logging and
pagination for the pull request bot. Provides the compare, commit,
commit status and pull request operations the bot relies on.
"""

import logging
from collections import deque
from datetime import datetime
from typing import Any, AsyncIterator, Deque, Dict, Optional, Union
from urllib.parse import quote

import httpx

from .parser import LinkHeaderParser
from .rate_limit import RateLimitMonitor
from ..config import GitHubConfig
from ..models.commit import Commit, CompareResponse, CompareResult, get_commit_date
from ..models.pull_request import PullRequest
from ..models.status import CommitStatusOptions

Logger = Union[logging.Logger, logging.LoggerAdapter]


class GitHubProtocolError(Exception):
    """GitHub answered successfully but the response breaks an API contract"""
    def __init__(self, message: str, response_data: Optional[Any] = None):
        super().__init__(message)
        self.response_data = response_data


class MissingLinkHeaderError(GitHubProtocolError):
    """A paginated listing came back without a Link header"""


class LinkHeaderParseError(GitHubProtocolError):
    """A paginated listing came back with a Link header we cannot parse"""


class UnexpectedCompareResponseError(GitHubProtocolError):
    """A compare response reports missing commits but lists none"""


def is_request_error(error: BaseException) -> bool:
    """The request was attempted but no response arrived"""
    return isinstance(error, httpx.RequestError)


def is_response_error(error: BaseException) -> bool:
    """A response arrived with an error status"""
    return isinstance(error, httpx.HTTPStatusError)


def _quote(value: Any) -> str:
    return quote(str(value), safe='')


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class GitHubApi:
    """
    GitHub API client for a single repository.

    Every call goes through ``_request``, which logs transport failures with
    enough context to diagnose them and reports the rate limit budget.
    Nothing is retried: errors propagate to the caller unchanged.
    """

    def __init__(
        self,
        log: Logger,
        secret: str,
        config: Optional[GitHubConfig] = None,
    ):
        """
        Initialize GitHub client.

        Args:
            log: Logger receiving the client's diagnostics
            secret: GitHub access token
            config: API endpoint and repository settings
        """
        if not secret:
            raise ValueError("GitHub secret is required")

        self.log = log
        self.config = config or GitHubConfig()
        self.repo_path = self.config.repo_path
        self.rate_limit = RateLimitMonitor(log)
        self.link_parser = LinkHeaderParser()
        self.client = self._create_client(secret)

    def _create_client(self, secret: str) -> httpx.AsyncClient:
        """Create the HTTP client with base URL and authentication headers."""
        return httpx.AsyncClient(
            base_url=self.config.api_base_url,
            headers={
                'User-Agent': self.config.user_agent,
                'Authorization': f'token {secret}',
                'Accept': self.config.accept,
            },
            timeout=self.config.timeout_seconds,
            # renamed or transferred repositories answer with 301 to /repositories/{id}
            follow_redirects=True,
        )

    @property
    def headers(self) -> httpx.Headers:
        return self.client.headers

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "GitHubApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def compare(self, head_ref: str, base_ref: str) -> CompareResult:
        """
        Find the commits on ``base_ref`` that ``head_ref`` is missing.

        GitHub compares ``{head_ref}...{base_ref}``, so ``ahead_by`` counts
        the commits ``base_ref`` has gained since ``head_ref`` branched off.

        Args:
            head_ref: Branch name or sha
            base_ref: Branch name or sha

        Returns:
            CompareResult with the missing commits, oldest first

        Raises:
            UnexpectedCompareResponseError: When GitHub reports missing
                commits but returns none of them
        """
        url = f"{self.repo_path}/compare/{_quote(head_ref)}...{_quote(base_ref)}"
        resp = await self._get(url)
        data = resp.json()
        compare = CompareResponse.model_validate(data)

        if compare.ahead_by > 0 and not compare.commits:
            self.log.error(
                'unexpected github response, expected oldest missing commit',
                extra={
                    'total_missing_commits': compare.ahead_by,
                    'resp_body': data,
                },
            )
            raise UnexpectedCompareResponseError('Unexpected github response', response_data=data)

        return CompareResult(
            total_missing_commits=compare.ahead_by,
            missing_commits=compare.commits,
        )

    async def get_commit_date(self, ref: str) -> datetime:
        """Later of the author and committer dates of ``ref``."""
        resp = await self._get(f"{self.repo_path}/commits/{_quote(ref)}")
        commit = Commit.model_validate(resp.json()['commit'])
        return get_commit_date(commit)

    async def set_commit_status(self, ref: str, options: CommitStatusOptions) -> None:
        """Attach a commit status to the sha ``ref``."""
        url = f"{self.repo_path}/statuses/{_quote(ref)}"
        await self._post(url, {}, options.to_payload())

    async def get_pr(self, pr_id: int) -> PullRequest:
        """Fetch a single pull request."""
        resp = await self._get(f"{self.repo_path}/pulls/{_quote(pr_id)}")
        return PullRequest.model_validate(resp.json())

    async def iter_all_open_prs(self) -> AsyncIterator[PullRequest]:
        """
        Iterate over every open pull request, one page at a time.

        The records of a page are yielded before the next page is requested.
        Every call starts over from the first page.

        Raises:
            MissingLinkHeaderError: When a page has no Link header
            LinkHeaderParseError: When a page's Link header is malformed
        """
        # None stands for the first page
        urls: Deque[Optional[str]] = deque([None])

        while urls:
            url = urls.popleft()
            if url is None:
                page = await self._fetch_initial_page()
            else:
                page = await self._fetch_next_page(url)

            for pr in page.json():
                yield PullRequest.model_validate(pr)

            link_header = page.headers.get('link')
            if not link_header:
                self.log.error(
                    'missing link header',
                    extra={'response_headers': dict(page.headers)},
                )
                raise MissingLinkHeaderError('missing link header', response_data=dict(page.headers))

            links = self.link_parser.parse(link_header)
            if links is None:
                self.log.error(
                    'unable to parse link header',
                    extra={'link_header': link_header},
                )
                raise LinkHeaderParseError('unable to parse link header', response_data=link_header)

            if 'next' in links:
                urls.append(links['next'].url)

    async def _fetch_initial_page(self) -> httpx.Response:
        self.log.info('fetching initial page of PRs')
        return await self._get(f"{self.repo_path}/pulls", {'state': 'open'})

    async def _fetch_next_page(self, url: str) -> httpx.Response:
        self.log.info('fetching page of PRs', extra={'url': url})
        return await self._get(url)

    async def _request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Make an authenticated request to the GitHub API.

        Args:
            method: HTTP method
            url: API path, or an absolute URL taken from a Link header
            params: Query parameters
            body: JSON request body

        Returns:
            Response object

        Raises:
            httpx.RequestError: No response was received
            httpx.HTTPStatusError: The response has an error status
        """
        try:
            response = await self.client.request(method, url, params=params, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as error:
            error_response = error.response
            self.rate_limit.check(error_response.headers)
            self.log.debug(
                'github api response error',
                extra={
                    'type': 'githubApiResponseError',
                    'status': error_response.status_code,
                    'data': {
                        'method': method,
                        'url': url,
                        'params': params,
                        'body': body,
                        'response': {
                            'headers': dict(error_response.headers),
                            'body': _response_body(error_response),
                            'status': error_response.status_code,
                            'status_text': error_response.reason_phrase,
                        },
                    },
                },
            )
            raise
        except httpx.RequestError as error:
            self.log.debug(
                'github api request error',
                extra={
                    'type': 'githubApiRequestError',
                    'error_message': str(error),
                    'data': {
                        'method': method,
                        'url': url,
                        'params': params,
                        'body': body,
                    },
                },
            )
            raise

        self.rate_limit.check(response.headers)
        return response

    async def _get(self, url: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        return await self._request('GET', url, params)

    async def _post(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        return await self._request('POST', url, params, body)
