"""Template environment for the generated browser runtimes."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Final

from minijinja import Environment

from agnostic_vite.manifest import dump_manifest

if TYPE_CHECKING:
    from collections.abc import Mapping

    from agnostic_vite.manifest import ManifestEntry

RUNTIME_FILE_NAME: Final = "agnostic-vite-runtime.js"
CLIENT_PATH: Final = "@vite/client"
GLOBAL_NAME: Final = "viteAsset"
DEFAULT_DEV_ORIGIN: Final = "http://localhost:5173"
WARNING_PREFIX: Final = "[agnostic-vite]"

ENV: Final[Environment] = Environment()

for file in Path(__file__).parent.glob("*.j2"):
    ENV.add_template(name=file.stem, source=file.read_text(encoding="utf-8"))


def render_dev_runtime(origin: str) -> str:
    """Render the runtime that forwards every request to the dev server at ``origin``."""
    return ENV.render_template(
        "runtime.dev",
        origin=json.dumps(origin.rstrip("/")),
        client_path=json.dumps(CLIENT_PATH),
        global_name=GLOBAL_NAME,
    )


def render_prod_runtime(manifest: Mapping[str, ManifestEntry], out_dir: str) -> str:
    """Render the runtime that resolves entries through the inlined ``manifest``."""
    return ENV.render_template(
        "runtime.prod",
        out_dir=json.dumps(out_dir),
        manifest=dump_manifest(manifest),
        warning=json.dumps(f"{WARNING_PREFIX} Asset not found:"),
        global_name=GLOBAL_NAME,
    )
