"""Pydantic models describing the dashboard API payloads."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _none_to_blank(value: object) -> object:
    return "" if value is None else value


def _none_to_empty_list(value: object) -> object:
    return [] if value is None else value


def _none_to_empty_dict(value: object) -> object:
    return {} if value is None else value


class DashboardBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class OpaqueModel(DashboardBaseModel):
    """Model that keeps fields it does not declare so they survive a round trip."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ProxyPayload(OpaqueModel):
    listen_path: str = ""

    _normalize_listen_path = field_validator("listen_path", mode="before")(_none_to_blank)


class APIDefinitionPayload(OpaqueModel):
    id: str = ""
    api_id: str = ""
    name: str = ""
    slug: str = ""
    proxy: ProxyPayload = Field(default_factory=ProxyPayload)

    _normalize_proxy = field_validator("proxy", mode="before")(_none_to_empty_dict)
    _normalize_identity = field_validator("id", "api_id", "name", "slug", mode="before")(
        _none_to_blank
    )


class DashboardRecord(OpaqueModel):
    api_definition: APIDefinitionPayload
    hook_references: list[object] = Field(default_factory=list[object])
    is_site: bool = False
    sort_by: int = 0

    _normalize_hooks = field_validator("hook_references", mode="before")(_none_to_empty_list)


class APIListResponse(DashboardBaseModel):
    apis: list[DashboardRecord] = Field(default_factory=list["DashboardRecord"])
    pages: int = 0

    _normalize_apis = field_validator("apis", mode="before")(_none_to_empty_list)


class StatusResponse(DashboardBaseModel):
    """Envelope returned by create, update and delete calls."""

    message: str = Field(default="", validation_alias=AliasChoices("message", "Message"))
    meta: str | None = Field(default=None, validation_alias=AliasChoices("meta", "Meta"))
    status: str = Field(default="", validation_alias=AliasChoices("status", "Status"))

    _normalize_message = field_validator("message", "status", mode="before")(_none_to_blank)

    @field_validator("meta", mode="before")
    @classmethod
    def _stringify_meta(cls, value: object) -> object:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @property
    def ok(self) -> bool:
        return self.status == "OK"
