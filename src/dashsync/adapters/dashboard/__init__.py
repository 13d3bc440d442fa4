"""Public interface for the dashboard adapter."""

from __future__ import annotations

from .client import APIS_ENDPOINT, DashboardClient
from .schema import APIDefinitionPayload, APIListResponse, DashboardRecord, StatusResponse
from .translator import build_record_payload, parse_definition, parse_document, parse_record

__all__ = [
    "APIS_ENDPOINT",
    "APIDefinitionPayload",
    "APIListResponse",
    "DashboardClient",
    "DashboardRecord",
    "StatusResponse",
    "build_record_payload",
    "parse_definition",
    "parse_document",
    "parse_record",
]
