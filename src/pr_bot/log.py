"""
Request-scoped logging

Loggers that stamp every record with the id of the request or job that
produced it.
"""

import logging
from typing import Any, MutableMapping, Tuple

REQUEST_LOGGER_NAME = "pr_bot.request"


class RequestLoggerAdapter(logging.LoggerAdapter):
    """
    LoggerAdapter that merges per-call ``extra`` metadata with the bound
    context fields. The stock adapter replaces the call's ``extra``.
    """

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_request_logger(ctx) -> RequestLoggerAdapter:
    """Logger bound to the context's request id"""
    return RequestLoggerAdapter(
        logging.getLogger(REQUEST_LOGGER_NAME),
        {"request_id": ctx.request_id},
    )
