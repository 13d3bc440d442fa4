"""Identity resolution between desired definitions and remote records.

Two matching rules live here and are kept apart on purpose:

- ``resolve_identity`` is the broad four-key check used before a single
  create. A collision on any of ``id``, ``api_id``, ``slug`` or
  ``listen_path`` counts as "exists remotely".
- ``index_by_id`` backs the bulk reconciliation join, which only ever uses the
  primary identifier.

Empty key values never match; a definition that has not been created yet has
no ``id`` and should not collide with every other unsaved definition.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .model import IdentityKey

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .model import APIDefinition, RemoteRecord

MATCH_PRIORITY: tuple[str, ...] = IdentityKey._fields


@dataclass(slots=True, frozen=True)
class IdentityMatch:
    """Remote record matched for a definition and the key that matched it."""

    record: RemoteRecord
    key: str
    value: str


def resolve_identity(
    definition: APIDefinition,
    remote: Sequence[RemoteRecord],
) -> IdentityMatch | None:
    """Return the remote record sharing an identity key with ``definition``.

    Keys are tried in ``MATCH_PRIORITY`` order across the whole listing, so a
    record matching on ``id`` wins over another one that only shares a slug.
    """

    wanted = definition.key
    for key in MATCH_PRIORITY:
        value = getattr(wanted, key)
        if not value:
            continue
        for record in remote:
            if getattr(record.key, key) == value:
                return IdentityMatch(record=record, key=key, value=value)
    return None


def find_by_id(definition_id: str, remote: Iterable[RemoteRecord]) -> RemoteRecord | None:
    if not definition_id:
        return None
    for record in remote:
        if record.id == definition_id:
            return record
    return None


def index_by_id(remote: Iterable[RemoteRecord]) -> dict[str, RemoteRecord]:
    """Map remote primary identifiers to their records, keeping listing order."""

    return {record.id: record for record in remote if record.id}
