"""Domain records exchanged between the desired set and the remote catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


class IdentityKey(NamedTuple):
    """Identity attributes of a definition, in matching priority order."""

    id: str
    api_id: str
    slug: str
    listen_path: str


@dataclass(slots=True, kw_only=True)
class APIDefinition:
    """Desired-state API definition.

    The identity attributes are lifted out of ``payload`` so the reconciler can
    match records without knowing the rest of the definition schema. Everything
    else in ``payload`` is carried to the dashboard untouched.
    """

    id: str = ""
    api_id: str = ""
    name: str = ""
    slug: str = ""
    listen_path: str = ""
    payload: dict[str, object] = field(default_factory=dict[str, object])

    @property
    def key(self) -> IdentityKey:
        return IdentityKey(
            id=self.id,
            api_id=self.api_id,
            slug=self.slug,
            listen_path=self.listen_path,
        )

    @property
    def label(self) -> str:
        return self.name or self.slug or self.id or "<unnamed>"


@dataclass(slots=True, frozen=True, kw_only=True)
class RemoteRecord:
    """A definition as stored by the dashboard, with server-managed metadata."""

    definition: APIDefinition
    hook_references: tuple[object, ...] = ()
    is_site: bool = False
    sort_by: int = 0

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def key(self) -> IdentityKey:
        return self.definition.key
