"""Errors raised while reconciling against the remote catalog."""

from __future__ import annotations


class SyncError(RuntimeError):
    """Base class for reconciliation failures."""


class TransportError(SyncError):
    """Raised when the dashboard could not be reached."""


class RemoteError(SyncError):
    """Raised when the dashboard rejects a request or answers with an unusable body."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AlreadyExistsError(SyncError):
    """Raised when a create would collide with an existing remote record."""

    def __init__(self, label: str, *, key: str, value: str) -> None:
        super().__init__(
            f"API {label!r} seems to exist already (same {key} {value!r}), use update()"
        )
        self.key = key
        self.value = value


class NotFoundError(SyncError):
    """Raised when an update targets an id the dashboard does not know."""

    def __init__(self, definition_id: str) -> None:
        super().__init__(f"API {definition_id!r} does not exist, use create()")
        self.id = definition_id
