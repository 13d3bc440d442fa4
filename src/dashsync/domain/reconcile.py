"""Drive a remote catalog towards a desired set of API definitions.

Operations are applied in a fixed order: every delete, then every update, then
every create. Deleting first frees slugs and listen paths that an updated or
newly created definition may claim in the same pass.

The first failing operation aborts the pass and its error propagates
unchanged. Operations applied before the failure are not rolled back; the
dashboard has no multi-record transaction to build on. Running the sync again
is the recovery path, since applied operations drop out of the next plan.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .plan import SyncPlan, plan_sync

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .model import APIDefinition
    from .ports import RemoteCatalog

log = getLogger(__name__)


@dataclass(slots=True)
class SyncResult:
    """Summary of a reconciliation pass."""

    plan: SyncPlan
    deleted: list[str] = field(default_factory=list[str])
    updated: list[str] = field(default_factory=list[str])
    created: list[tuple[str, str]] = field(default_factory=list[tuple[str, str]])
    dry_run: bool = False


@dataclass(slots=True)
class Reconciler:
    catalog: RemoteCatalog

    def plan(self, desired: Sequence[APIDefinition]) -> SyncPlan:
        """Fetch the remote listing once and partition ``desired`` against it."""

        remote = self.catalog.list_apis()
        plan = plan_sync(desired, remote)
        log.info("Sync plan against %s remote APIs: %s", len(remote), plan.summary())
        return plan

    def sync(self, desired: Sequence[APIDefinition], *, dry_run: bool = False) -> SyncResult:
        plan = self.plan(desired)
        result = SyncResult(plan=plan, dry_run=dry_run)
        if dry_run:
            log.info("Dry run requested, no changes applied")
            return result
        return self.apply(plan, result=result)

    def apply(self, plan: SyncPlan, *, result: SyncResult | None = None) -> SyncResult:
        result = result or SyncResult(plan=plan)

        for definition_id in plan.to_delete:
            log.info("Deleting API %s", definition_id)
            self.catalog.delete_api(definition_id)
            result.deleted.append(definition_id)

        for definition in plan.to_update:
            log.info("Updating API %s", definition.id)
            self.catalog.update_api(definition)
            result.updated.append(definition.id)

        for definition in plan.to_create:
            log.info("Creating API %s", definition.label)
            created_id = self.catalog.create_api(definition)
            log.info("Created API %s with id %s", definition.label, created_id)
            result.created.append((definition.label, created_id))

        return result
