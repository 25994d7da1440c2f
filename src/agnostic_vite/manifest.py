"""Index a completed bundle into a logical-key lookup table."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, NotRequired, TypedDict

from agnostic_vite.bundle import OutputAsset, OutputChunk

if TYPE_CHECKING:
    from collections.abc import Mapping

    from agnostic_vite.bundle import Bundle

logger = logging.getLogger(__name__)


class ManifestEntry(TypedDict):
    file: str
    css: NotRequired[list[str]]


Manifest = dict[str, ManifestEntry]


def root_prefix(assets_dir: str) -> str:
    return f"{assets_dir}/" if assets_dir else ""


def entry_key(module_id: str, *, prefix: str, cwd: Path) -> str:
    """Derive the logical key of an entry module.

    The module path is made relative to ``cwd``, separators are normalized
    to ``/`` and ``prefix`` is stripped from the front.
    """
    module_path = Path(module_id)
    if not module_path.is_absolute():
        module_path = cwd / module_path
    key = Path(os.path.relpath(module_path, cwd)).as_posix()
    return key.removeprefix(prefix)


def _put(manifest: Manifest, key: str, entry: ManifestEntry) -> None:
    previous = manifest.get(key)
    if previous is not None and previous["file"] != entry["file"]:
        logger.warning(
            "Manifest key %r maps to both %s and %s; keeping %s",
            key,
            previous["file"],
            entry["file"],
            entry["file"],
        )
    manifest[key] = entry


def build_manifest(bundle: Bundle, *, assets_dir: str, cwd: Path) -> Manifest:
    """Build the manifest for one completed bundle.

    Entry chunks are keyed by their source module path and carry the
    stylesheets they import. Stylesheet assets are keyed by each of their
    names, once bare and once under ``css/``. Items without a derivable
    key are skipped. Later writes to an existing key win.
    """
    prefix = root_prefix(assets_dir)
    manifest: Manifest = {}

    for item in bundle.values():
        if isinstance(item, OutputChunk):
            if not item.is_entry or not item.facade_module_id:
                continue
            key = entry_key(item.facade_module_id, prefix=prefix, cwd=cwd)
            _put(manifest, key, {"file": item.file_name, "css": list(item.imported_css)})

        elif isinstance(item, OutputAsset) and item.file_name.endswith(".css"):
            if item.names:
                for name in item.names:
                    _put(manifest, name, {"file": item.file_name})
                    _put(manifest, f"css/{name}", {"file": item.file_name})
            else:
                key = item.name or item.file_name
                if not key.endswith(".css"):
                    key = f"{key}.css"
                _put(manifest, key, {"file": item.file_name})

    return manifest


def resolve(manifest: Mapping[str, ManifestEntry], key: str) -> ManifestEntry | None:
    return manifest.get(key)


def dump_manifest(manifest: Mapping[str, ManifestEntry]) -> str:
    """Serialize ``manifest`` as the JSON literal embedded in the runtime."""
    return json.dumps(manifest, indent=2, sort_keys=True)
