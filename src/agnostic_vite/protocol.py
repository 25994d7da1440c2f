"""Interfaces the host build tool exposes to agnostic-vite."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from agnostic_vite.bundle import Bundle
    from agnostic_vite.config import ResolvedConfig


class PluginContext(Protocol):
    """Build context available while the bundle is being generated."""

    def emit_file(self, *, file_name: str, source: str) -> None:
        """Add an asset named ``file_name`` to the build output."""


class Plugin(Protocol):
    """Lifecycle hooks invoked by the host build."""

    name: str

    def config_resolved(self, config: ResolvedConfig) -> None:
        """Receive the host's resolved configuration before any other hook."""

    async def configure_server(self, *, host: str | None = None, port: int | None = None) -> Path:
        """Prepare development outputs once the dev server is listening."""

    def generate_bundle(self, context: PluginContext, bundle: Bundle) -> None:
        """Emit extra outputs after bundling and before the output set is final."""
