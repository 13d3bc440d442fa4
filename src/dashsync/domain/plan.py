"""Partition of a desired set against a remote listing.

The plan is computed once per reconciliation pass and discarded after the
apply phase. It joins on the primary identifier only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .identity import index_by_id

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .model import APIDefinition, RemoteRecord


@dataclass(slots=True)
class SyncPlan:
    """Operations that make the remote catalog match the desired set."""

    to_create: list[APIDefinition] = field(default_factory=list["APIDefinition"])
    to_update: list[APIDefinition] = field(default_factory=list["APIDefinition"])
    to_delete: list[str] = field(default_factory=list[str])

    @property
    def is_empty(self) -> bool:
        return not (self.to_create or self.to_update or self.to_delete)

    def summary(self) -> str:
        return (
            f"create={len(self.to_create)}, update={len(self.to_update)}, "
            f"delete={len(self.to_delete)}"
        )


def plan_sync(
    desired: Sequence[APIDefinition],
    remote: Sequence[RemoteRecord],
) -> SyncPlan:
    """Split ``desired`` into creates and updates and collect remote-only ids.

    Definitions without an ``id`` have never been stored and always become
    creates. Two desired definitions sharing a non-empty ``id`` are rejected.
    """

    remote_by_id = index_by_id(remote)

    desired_ids: set[str] = set()
    for definition in desired:
        if not definition.id:
            continue
        if definition.id in desired_ids:
            raise ValueError(f"Duplicate API id in desired set: {definition.id!r}")
        desired_ids.add(definition.id)

    plan = SyncPlan()
    for definition in desired:
        if definition.id and definition.id in remote_by_id:
            plan.to_update.append(definition)
        else:
            plan.to_create.append(definition)

    plan.to_delete.extend(
        remote_id for remote_id in remote_by_id if remote_id not in desired_ids
    )
    return plan
