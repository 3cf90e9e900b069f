"""Application layer: use-case orchestration across domain modules."""

from .dispatch import dispatch_notifications
from .relay import handle_relay_event
from .submit import handle_submission

__all__ = [
    "dispatch_notifications",
    "handle_relay_event",
    "handle_submission",
]
