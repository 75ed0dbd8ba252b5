"""
Commit Status Data Models
"""

from dataclasses import dataclass, asdict
from typing import Dict, Optional

COMMIT_STATUS_STATES = {'error', 'pending', 'success', 'failure'}


@dataclass
class CommitStatusOptions:
    """Commit status to attach to a sha"""
    state: str  # 'error', 'pending', 'success', 'failure'
    context: str
    description: Optional[str] = None
    target_url: Optional[str] = None

    def __post_init__(self):
        """Validate fields"""
        if self.state not in COMMIT_STATUS_STATES:
            raise ValueError(f"Invalid state: {self.state}")
        if not self.context.strip():
            raise ValueError("Context cannot be empty")

    def to_payload(self) -> Dict[str, str]:
        """Request body for the statuses endpoint, without unset fields"""
        return {key: value for key, value in asdict(self).items() if value is not None}
