"""The agnostic-vite build plugin."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, ClassVar

from anyio import Path as APath

from agnostic_vite.manifest import build_manifest
from agnostic_vite.runtime import RUNTIME_FILE_NAME, render_dev_runtime, render_prod_runtime

if TYPE_CHECKING:
    from pathlib import Path

    from agnostic_vite.bundle import Bundle
    from agnostic_vite.config import ResolvedConfig
    from agnostic_vite.protocol import PluginContext


logger = logging.getLogger(__name__)


class AgnosticViteError(RuntimeError):
    pass


@dataclass(frozen=True, slots=True)
class AgnosticVite:
    """Publishes a ``viteAsset`` runtime for the development server and for production builds."""

    name: ClassVar[str] = "agnostic-vite"

    assets_dir: str
    _config: list[ResolvedConfig] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate and normalize the assets directory."""
        assets_dir = PurePosixPath(self.assets_dir.replace("\\", "/"))
        if assets_dir.is_absolute():
            msg = f"The assets directory (i.e. {self.assets_dir}) must be a relative path"
            raise ValueError(msg)

        object.__setattr__(self, "assets_dir", "" if assets_dir == PurePosixPath() else assets_dir.as_posix())

    @property
    def config(self) -> ResolvedConfig:
        if not self._config:
            msg = f"{self.name}: config_resolved must run before the other hooks"
            raise AgnosticViteError(msg)
        return self._config[-1]

    def config_resolved(self, config: ResolvedConfig) -> None:
        self._config[:] = [config]

    async def configure_server(self, *, host: str | None = None, port: int | None = None) -> Path:
        """Write the development runtime into the output directory and return its path."""
        config = self.config
        origin = config.dev_origin(host=host, port=port)
        path = config.dev_runtime_path.resolve()

        runtime_path = APath(path)
        await runtime_path.parent.mkdir(parents=True, exist_ok=True)
        await runtime_path.write_text(render_dev_runtime(origin), encoding="utf-8")

        logger.info("Dev runtime written to: %s", path)
        return path

    def generate_bundle(self, context: PluginContext, bundle: Bundle) -> None:
        """Index ``bundle`` and emit the production runtime with the manifest inlined."""
        config = self.config
        manifest = build_manifest(bundle, assets_dir=self.assets_dir, cwd=config.root.resolve())
        logger.debug("Indexed %d manifest entries", len(manifest))
        context.emit_file(
            file_name=RUNTIME_FILE_NAME,
            source=render_prod_runtime(manifest, config.out_dir_base),
        )
