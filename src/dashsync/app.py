"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from dashsync.adapters.dashboard import DashboardClient
from dashsync.adapters.filesystem import load_definitions
from dashsync.config import get_dashboard_config
from dashsync.domain.reconcile import Reconciler

if TYPE_CHECKING:
    from dashsync.config import DashboardConfig
    from dashsync.domain.ports import RemoteCatalog
    from dashsync.domain.reconcile import SyncResult


log = getLogger(__name__)


def build_dashboard_catalog(config: DashboardConfig | None = None) -> DashboardClient:
    return DashboardClient(config=config or get_dashboard_config())


def sync_api_definitions(
    source: Path | str,
    *,
    config: DashboardConfig | None = None,
    catalog: RemoteCatalog | None = None,
    dry_run: bool = False,
) -> SyncResult:
    """Make the dashboard catalog match the definitions stored under ``source``."""

    source_dir = Path(source)
    desired = load_definitions(source_dir)
    effective_catalog = catalog or build_dashboard_catalog(config)
    log.info(
        "Starting dashboard sync: source=%s, definitions=%s, dry_run=%s",
        source_dir,
        len(desired),
        dry_run,
    )

    result = Reconciler(catalog=effective_catalog).sync(desired, dry_run=dry_run)

    log.info(
        "Finished dashboard sync: deleted=%s, updated=%s, created=%s",
        len(result.deleted),
        len(result.updated),
        len(result.created),
    )
    return result
