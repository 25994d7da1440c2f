"""Resolved build configuration read from the host build or the environment."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from pydantic_settings import BaseSettings, SettingsConfigDict

from agnostic_vite.runtime import DEFAULT_DEV_ORIGIN, RUNTIME_FILE_NAME


class ResolvedConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AGNOSTIC_VITE_", frozen=True)

    root: Path = Path()
    out_dir: str = "dist"
    host: str | None = None
    port: int = 5173

    def dev_origin(self, *, host: str | None = None, port: int | None = None) -> str:
        """Return the dev-server origin, preferring the bound ``host``/``port`` over configured ones."""
        host = host or self.host
        if not host:
            return DEFAULT_DEV_ORIGIN
        return f"http://{host}:{port or self.port}"

    @property
    def out_dir_base(self) -> str:
        return PurePosixPath(self.out_dir.replace("\\", "/").rstrip("/")).name or "dist"

    @property
    def dev_runtime_path(self) -> Path:
        return self.root / self.out_dir / RUNTIME_FILE_NAME
