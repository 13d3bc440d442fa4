from __future__ import annotations

import json
from typing import TYPE_CHECKING

from dashsync import app as app_module
from dashsync.app import sync_api_definitions
from tests.support.catalog import FakeCatalog, make_record

if TYPE_CHECKING:
    from pathlib import Path

    import pytest

    from dashsync.config import DashboardConfig


def _write_definitions(directory: Path) -> None:
    for definition_id in ("a", "b"):
        document = {
            "id": definition_id,
            "name": f"API {definition_id}",
            "slug": f"slug-{definition_id}",
            "proxy": {"listen_path": f"/{definition_id}/"},
        }
        (directory / f"{definition_id}.json").write_text(json.dumps(document), encoding="utf-8")


def test_sync_api_definitions_reconciles_directory(tmp_path: Path) -> None:
    _write_definitions(tmp_path)
    catalog = FakeCatalog([make_record("a"), make_record("old")])

    result = sync_api_definitions(tmp_path, catalog=catalog)

    assert result.deleted == ["old"]
    assert result.updated == ["a"]
    assert [label for label, _ in result.created] == ["API b"]
    assert sorted(catalog.ids) == ["a", "b"]


def test_sync_api_definitions_dry_run(tmp_path: Path) -> None:
    _write_definitions(tmp_path)
    catalog = FakeCatalog([make_record("old")])

    result = sync_api_definitions(str(tmp_path), catalog=catalog, dry_run=True)

    assert result.dry_run
    assert catalog.ids == ["old"]
    assert result.plan.to_delete == ["old"]


def test_sync_api_definitions_builds_dashboard_client(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    dashboard_config: DashboardConfig,
) -> None:
    catalog = FakeCatalog()
    seen: list[DashboardConfig | None] = []

    def fake_build(config: DashboardConfig | None = None) -> FakeCatalog:
        seen.append(config)
        return catalog

    monkeypatch.setattr(app_module, "build_dashboard_catalog", fake_build)

    sync_api_definitions(tmp_path, config=dashboard_config)

    assert seen == [dashboard_config]
    assert catalog.calls == [("list", "")]
