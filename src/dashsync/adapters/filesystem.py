"""Load the desired set of API definitions from a directory of JSON files."""

from __future__ import annotations

import json
from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING, cast

from pydantic import ValidationError

from dashsync.adapters.dashboard.translator import parse_document

if TYPE_CHECKING:
    from pathlib import Path

    from dashsync.domain.model import APIDefinition

log = getLogger(__name__)


class DefinitionLoadError(ValueError):
    """Raised when a definition file cannot be read as an API definition."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load API definition from {path}: {reason}")
        self.path = path


def load_definition(path: Path) -> APIDefinition:
    try:
        text = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as exc:
        raise DefinitionLoadError(path, f"unreadable file ({exc})") from exc

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DefinitionLoadError(path, f"invalid JSON ({exc})") from exc

    if not isinstance(document, Mapping):
        raise DefinitionLoadError(path, "expected a JSON object")

    try:
        return parse_document(cast(Mapping[str, object], document))
    except ValidationError as exc:
        raise DefinitionLoadError(path, str(exc)) from exc


def load_definitions(directory: Path) -> list[APIDefinition]:
    """Return every ``*.json`` definition directly inside ``directory``, sorted by file name."""

    if not directory.is_dir():
        raise NotADirectoryError(f"Definition source is not a directory: {directory}")

    paths = sorted(path for path in directory.glob("*.json") if path.is_file())
    definitions = [load_definition(path) for path in paths]
    log.info("Loaded %s API definitions from %s", len(definitions), directory)
    return definitions
