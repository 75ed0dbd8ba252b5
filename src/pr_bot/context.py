"""
Request Context

Opaque handle for one unit of work (a webhook delivery, a scheduled job).
Per-context resources such as the GitHub client are keyed on it.
"""

import uuid
from dataclasses import dataclass, field
from typing import Optional

from .config import AppConfig, get_config


@dataclass(eq=False)
class RequestContext:
    """Per-request handle; compared and hashed by identity"""
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    config: Optional[AppConfig] = None

    def get_config(self) -> AppConfig:
        """Context config, falling back to the process-wide one"""
        return self.config or get_config()
