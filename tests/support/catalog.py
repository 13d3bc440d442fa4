"""Reusable fakes and helpers for reconciliation tests."""

from __future__ import annotations

from dataclasses import replace

from dashsync.domain.errors import AlreadyExistsError, NotFoundError, RemoteError
from dashsync.domain.identity import find_by_id, resolve_identity
from dashsync.domain.model import APIDefinition, RemoteRecord


def make_definition(
    definition_id: str = "",
    *,
    api_id: str = "",
    name: str | None = None,
    slug: str | None = None,
    listen_path: str | None = None,
) -> APIDefinition:
    """Create a definition whose unset identity keys are derived from ``definition_id``."""

    stem = definition_id or "new"
    return APIDefinition(
        id=definition_id,
        api_id=api_id,
        name=name if name is not None else f"API {stem}",
        slug=slug if slug is not None else f"slug-{stem}",
        listen_path=listen_path if listen_path is not None else f"/{stem}/",
    )


def make_record(definition_id: str, **kwargs: str) -> RemoteRecord:
    return RemoteRecord(definition=make_definition(definition_id, **kwargs))


class FakeCatalog:
    """In-memory remote catalog that records every call it receives."""

    def __init__(
        self,
        records: list[RemoteRecord] | None = None,
        *,
        fail_on: set[tuple[str, str]] | None = None,
    ) -> None:
        self.records: list[RemoteRecord] = list(records or [])
        self.calls: list[tuple[str, str]] = []
        self.fail_on = fail_on or set()
        self._next_id = 0

    @property
    def ids(self) -> list[str]:
        return [record.id for record in self.records]

    def list_apis(self) -> list[RemoteRecord]:
        self.calls.append(("list", ""))
        return list(self.records)

    def create_api(self, definition: APIDefinition) -> str:
        self._maybe_fail("create", definition.id or definition.name)
        match = resolve_identity(definition, self.records)
        if match is not None:
            raise AlreadyExistsError(definition.label, key=match.key, value=match.value)
        self._next_id += 1
        new_id = definition.id or f"generated-{self._next_id}"
        stored = replace(definition, id=new_id, api_id=definition.api_id or f"api-{new_id}")
        self.records.append(RemoteRecord(definition=stored))
        self.calls.append(("create", new_id))
        return stored.api_id

    def update_api(self, definition: APIDefinition) -> None:
        self._maybe_fail("update", definition.id)
        existing = find_by_id(definition.id, self.records)
        if existing is None:
            raise NotFoundError(definition.id)
        if not definition.api_id:
            definition.api_id = existing.definition.api_id
        index = self.records.index(existing)
        self.records[index] = replace(existing, definition=replace(definition))
        self.calls.append(("update", definition.id))

    def delete_api(self, definition_id: str) -> None:
        self._maybe_fail("delete", definition_id)
        existing = find_by_id(definition_id, self.records)
        if existing is None:
            raise RemoteError(f"API {definition_id} not found", status_code=404)
        self.records.remove(existing)
        self.calls.append(("delete", definition_id))

    def _maybe_fail(self, operation: str, target: str) -> None:
        if (operation, target) in self.fail_on:
            raise RemoteError(f"{operation} {target} rejected", status_code=500)
