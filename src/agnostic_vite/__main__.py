"""Command line entry point: ``python -m agnostic_vite``."""

from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from agnostic_vite.bundle import load_bundle
from agnostic_vite.config import ResolvedConfig
from agnostic_vite.plugin import AgnosticVite

if TYPE_CHECKING:
    from collections.abc import Sequence

    from agnostic_vite.protocol import Plugin

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DirectoryContext:
    """Plugin context that writes emitted files below ``output``."""

    output: Path
    emitted: list[Path] = field(default_factory=list)

    def emit_file(self, *, file_name: str, source: str) -> None:
        path = self.output / file_name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        self.emitted.append(path)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--assets-dir", required=True)
    parser.add_argument("--root", type=Path)
    parser.add_argument("--out-dir")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="agnostic-vite")
    commands = parser.add_subparsers(dest="command", required=True)

    build = commands.add_parser("build", help="Emit the production runtime from a bundle dump")
    _add_common_arguments(build)
    build.add_argument("--bundle", type=Path, required=True)

    dev = commands.add_parser("dev", help="Write the development runtime")
    _add_common_arguments(dev)
    dev.add_argument("--host")
    dev.add_argument("--port", type=int)

    return parser


def _resolve_config(args: argparse.Namespace) -> ResolvedConfig:
    overrides: dict[str, Any] = {"root": args.root, "out_dir": args.out_dir}
    if args.command == "dev":
        overrides |= {"host": args.host, "port": args.port}
    return ResolvedConfig(**{key: value for key, value in overrides.items() if value is not None})


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = _build_parser().parse_args(argv)

    plugin: Plugin = AgnosticVite(args.assets_dir)
    config = _resolve_config(args)
    plugin.config_resolved(config)

    if args.command == "dev":
        asyncio.run(plugin.configure_server())
        return 0

    bundle = asyncio.run(load_bundle(args.bundle))
    context = DirectoryContext(output=config.root / config.out_dir)
    plugin.generate_bundle(context, bundle)
    for path in context.emitted:
        logger.info("Emitted %s", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
