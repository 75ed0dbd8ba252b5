"""
Context Cache

One lazily built value per request context. The GitHub client is cached
this way so every component handling a request shares one client, and
tests can swap in a stub for a given context.
"""

import logging
import weakref
from typing import Callable, Generic, TypeVar

from .client import GitHubApi
from ..context import RequestContext
from ..log import get_request_logger


logger = logging.getLogger(__name__)

T = TypeVar('T')


class ContextCache(Generic[T]):
    """
    Registry mapping request contexts to values built by ``factory``.

    Entries are held weakly and go away with their context. Dropping an
    entry does not release what the value holds: call ``aclose(ctx)`` (or
    use the value as an async context manager) when the request is done.
    """

    def __init__(self, name: str, factory: Callable[[RequestContext], T]):
        self.name = name
        self.factory = factory
        self._values: "weakref.WeakKeyDictionary[RequestContext, T]" = weakref.WeakKeyDictionary()

    def get(self, ctx: RequestContext) -> T:
        """Value for ``ctx``, built on first access."""
        if ctx not in self._values:
            logger.debug(f"Creating {self.name} for request {ctx.request_id}")
            self._values[ctx] = self.factory(ctx)
        return self._values[ctx]

    def assign(self, ctx: RequestContext, value: T) -> None:
        """Use ``value`` for ``ctx`` instead of building one."""
        self._values[ctx] = value

    def __contains__(self, ctx: RequestContext) -> bool:
        return ctx in self._values

    async def aclose(self, ctx: RequestContext) -> None:
        """Remove the entry for ``ctx`` and close its value if it can be closed."""
        value = self._values.pop(ctx, None)
        if value is None:
            return
        close = getattr(value, "aclose", None)
        if close is not None:
            logger.debug(f"Closing {self.name} for request {ctx.request_id}")
            await close()


def create_github_api(ctx: RequestContext) -> GitHubApi:
    config = ctx.get_config()
    return GitHubApi(get_request_logger(ctx), config.github.token, config.github)


github_api_cache: ContextCache[GitHubApi] = ContextCache('github api', create_github_api)

get_github_api = github_api_cache.get
assign_github_api = github_api_cache.assign
close_github_api = github_api_cache.aclose
