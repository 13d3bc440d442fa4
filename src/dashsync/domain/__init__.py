"""Reconciliation core: identity rules, sync planning and the apply sequence."""

from __future__ import annotations

from .errors import AlreadyExistsError, NotFoundError, RemoteError, SyncError, TransportError
from .identity import IdentityMatch, find_by_id, index_by_id, resolve_identity
from .model import APIDefinition, IdentityKey, RemoteRecord
from .plan import SyncPlan, plan_sync
from .ports import RemoteCatalog
from .reconcile import Reconciler, SyncResult

__all__ = [
    "APIDefinition",
    "AlreadyExistsError",
    "IdentityKey",
    "IdentityMatch",
    "NotFoundError",
    "Reconciler",
    "RemoteCatalog",
    "RemoteError",
    "RemoteRecord",
    "SyncError",
    "SyncPlan",
    "SyncResult",
    "TransportError",
    "find_by_id",
    "index_by_id",
    "plan_sync",
    "resolve_identity",
]
