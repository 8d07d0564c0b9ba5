"""Errors raised by the platform client."""

from typing import Optional


class RemoteOperationError(Exception):
    """A remote platform call failed.

    Covers transport failures, platform-side rejections, missing entities,
    conflicts and failed asynchronous jobs. The message is meant for humans
    and is surfaced verbatim in failure results.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EntityNotFoundError(RemoteOperationError):
    """A named platform entity does not exist in the target space/org."""

    def __init__(self, kind: str, name: str):
        super().__init__(f"{kind} '{name}' not found", status_code=404)
        self.kind = kind
        self.name = name
