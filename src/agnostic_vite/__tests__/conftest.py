from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from agnostic_vite.config import ResolvedConfig
from agnostic_vite.plugin import AgnosticVite


@dataclass(slots=True)
class RecordingContext:
    emitted: dict[str, str] = field(default_factory=dict)

    def emit_file(self, *, file_name: str, source: str) -> None:
        self.emitted[file_name] = source


@pytest.fixture
def project_root(tmp_path):
    root = tmp_path.resolve() / "project"
    root.mkdir()
    return root


@pytest.fixture
def raw_bundle(project_root):
    return {
        "assets/app-abc123.js": {
            "type": "chunk",
            "fileName": "assets/app-abc123.js",
            "isEntry": True,
            "facadeModuleId": str(project_root / "public" / "js" / "app.js"),
            "viteMetadata": {"importedCss": ["assets/app-abc123.css"]},
        },
        "assets/vendor-def456.js": {
            "type": "chunk",
            "fileName": "assets/vendor-def456.js",
            "isEntry": False,
            "facadeModuleId": None,
            "viteMetadata": {"importedCss": []},
        },
        "assets/app-abc123.css": {
            "type": "asset",
            "fileName": "assets/app-abc123.css",
            "name": "app.css",
            "names": ["app.css"],
        },
        "assets/style-789abc.css": {
            "type": "asset",
            "fileName": "assets/style-789abc.css",
            "name": "style.css",
            "names": ["style.css"],
        },
        "assets/logo-000111.svg": {
            "type": "asset",
            "fileName": "assets/logo-000111.svg",
            "name": "logo.svg",
            "names": ["logo.svg"],
        },
    }


@pytest.fixture
def config(project_root):
    return ResolvedConfig(root=project_root, out_dir="public/dist")


@pytest.fixture
def plugin(config):
    plugin = AgnosticVite("public")
    plugin.config_resolved(config)
    return plugin


@pytest.fixture
def context():
    return RecordingContext()
