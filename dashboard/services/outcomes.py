"""
Outcomes returned by dashboard form actions

Form actions never raise to signal a result. Callers match on the outcome
type and decide how to respond.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Redirect:
    """Successful action; continue at ``path``."""
    path: str
    access_token: Optional[str] = None


@dataclass(frozen=True)
class Ok:
    message: str

    def to_state(self):
        return {'message': self.message}


@dataclass(frozen=True)
class ValidationFailed:
    """Submission rejected by its schema; nothing was written."""
    errors: Dict[str, List[str]]
    message: str

    def to_state(self):
        return {'errors': self.errors, 'message': self.message}


@dataclass(frozen=True)
class PersistenceFailed:
    """The single storage statement failed; details are logged, not returned."""
    message: str

    def to_state(self):
        return {'message': self.message}
