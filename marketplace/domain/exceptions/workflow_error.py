"""
Workflow-related domain exceptions.
"""

from typing import Optional


class WorkflowError(Exception):
    """Base exception for rejected marketplace actions."""

    pass


class AuthorizationError(WorkflowError):
    """Raised when the acting role may not perform the action."""

    def __init__(self, message: str, actor: Optional[str] = None):
        self.actor = actor
        super().__init__(message)


class InvalidTransitionError(WorkflowError):
    """Raised when the record is in a state that does not allow the action."""

    def __init__(self, message: str, current_state: Optional[str] = None):
        self.current_state = current_state
        super().__init__(message)


class ConflictError(WorkflowError):
    """Raised when the action would duplicate an existing record."""

    pass
