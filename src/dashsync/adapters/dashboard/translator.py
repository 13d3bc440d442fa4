"""Translate between dashboard payloads and domain records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from dashsync.domain.model import APIDefinition, RemoteRecord

from .schema import APIDefinitionPayload, DashboardRecord

_SERVER_ASSIGNED_KEYS = ("id", "api_id")


def parse_definition(payload: APIDefinitionPayload | Mapping[str, object]) -> APIDefinition:
    model = (
        payload
        if isinstance(payload, APIDefinitionPayload)
        else APIDefinitionPayload.model_validate(payload)
    )
    return APIDefinition(
        id=model.id,
        api_id=model.api_id,
        name=model.name,
        slug=model.slug,
        listen_path=model.proxy.listen_path,
        payload=model.model_dump(mode="json"),
    )


def parse_record(payload: DashboardRecord | Mapping[str, object]) -> RemoteRecord:
    model = (
        payload if isinstance(payload, DashboardRecord) else DashboardRecord.model_validate(payload)
    )
    return RemoteRecord(
        definition=parse_definition(model.api_definition),
        hook_references=tuple(model.hook_references),
        is_site=model.is_site,
        sort_by=model.sort_by,
    )


def parse_document(document: Mapping[str, object]) -> APIDefinition:
    """Parse either a bare definition or a record wrapping one in ``api_definition``."""

    wrapped = document.get("api_definition")
    if isinstance(wrapped, Mapping):
        return parse_definition(cast(Mapping[str, object], wrapped))
    return parse_definition(document)


def build_record_payload(definition: APIDefinition) -> dict[str, object]:
    """Serialize ``definition`` into the record shape the dashboard accepts.

    Identity attributes on the dataclass take precedence over whatever the
    opaque payload carries. Server-managed collections are always present.
    """

    document: dict[str, object] = dict(definition.payload)
    proxy = document.get("proxy")
    proxy_document: dict[str, object] = (
        dict(cast(Mapping[str, object], proxy)) if isinstance(proxy, Mapping) else {}
    )
    proxy_document["listen_path"] = definition.listen_path
    document.update(
        id=definition.id,
        api_id=definition.api_id,
        name=definition.name,
        slug=definition.slug,
        proxy=proxy_document,
    )

    record = DashboardRecord(
        api_definition=APIDefinitionPayload.model_validate(document),
        hook_references=[],
    )
    payload = record.model_dump(mode="json")
    api_definition = cast(dict[str, object], payload["api_definition"])
    for key in _SERVER_ASSIGNED_KEYS:
        if not api_definition.get(key):
            api_definition.pop(key, None)
    return payload
