"""Ports the reconciler depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .model import APIDefinition, RemoteRecord


@runtime_checkable
class RemoteCatalog(Protocol):
    """Remote store of API definitions addressed by primary identifier."""

    def list_apis(self) -> list[RemoteRecord]: ...

    def create_api(self, definition: APIDefinition) -> str: ...

    def update_api(self, definition: APIDefinition) -> None: ...

    def delete_api(self, definition_id: str) -> None: ...


__all__ = ["RemoteCatalog"]
