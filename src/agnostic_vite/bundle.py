"""Bundle output items as produced by a completed Vite/Rollup build."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from anyio import Path as APath

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class OutputChunk:
    file_name: str
    is_entry: bool = False
    facade_module_id: str | None = None
    imported_css: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class OutputAsset:
    file_name: str
    name: str | None = None
    names: tuple[str, ...] = ()


OutputItem = OutputChunk | OutputAsset
Bundle = Mapping[str, OutputItem]


def _parse_chunk(file_name: str, raw: Mapping[str, Any]) -> OutputChunk:
    metadata = raw.get("viteMetadata") or {}
    return OutputChunk(
        file_name=raw.get("fileName") or file_name,
        is_entry=bool(raw.get("isEntry")),
        facade_module_id=raw.get("facadeModuleId"),
        imported_css=tuple(metadata.get("importedCss") or ()),
    )


def _parse_asset(file_name: str, raw: Mapping[str, Any]) -> OutputAsset:
    return OutputAsset(
        file_name=raw.get("fileName") or file_name,
        name=raw.get("name"),
        names=tuple(raw.get("names") or ()),
    )


def parse_bundle(raw: Mapping[str, Mapping[str, Any]]) -> dict[str, OutputItem]:
    """Convert a Rollup-shaped bundle dump into output items.

    ``raw`` maps output file names to objects carrying the Rollup fields
    (``type``, ``fileName``, ``isEntry``, ``facadeModuleId``,
    ``viteMetadata.importedCss``, ``name``, ``names``). Items of any other
    ``type`` are skipped.
    """
    items: dict[str, OutputItem] = {}
    for file_name, item in raw.items():
        if not isinstance(item, Mapping):
            msg = f"The bundle item (i.e. {file_name}) must be an object, not {type(item).__name__}"
            raise ValueError(msg)
        match item.get("type"):
            case "chunk":
                items[file_name] = _parse_chunk(file_name, item)
            case "asset":
                items[file_name] = _parse_asset(file_name, item)
            case other:
                logger.debug("Skipping bundle item %s of type %r", file_name, other)
    return items


async def load_bundle(path: Path) -> dict[str, OutputItem]:
    """Read a JSON bundle dump from ``path`` and parse it."""
    source = await APath(path).read_text(encoding="utf-8")
    data = json.loads(source)
    if not isinstance(data, dict):
        msg = f"The bundle dump (i.e. {path}) must be a JSON object keyed by file name"
        raise ValueError(msg)
    return parse_bundle(data)
