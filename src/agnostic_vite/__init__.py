from agnostic_vite.bundle import OutputAsset, OutputChunk, load_bundle, parse_bundle
from agnostic_vite.config import ResolvedConfig
from agnostic_vite.inject import Document, DevelopmentInjector, ProductionInjector, Tag
from agnostic_vite.manifest import ManifestEntry, build_manifest, dump_manifest, resolve
from agnostic_vite.plugin import AgnosticVite, AgnosticViteError
from agnostic_vite.runtime import RUNTIME_FILE_NAME, render_dev_runtime, render_prod_runtime

__all__ = [
    "RUNTIME_FILE_NAME",
    "AgnosticVite",
    "AgnosticViteError",
    "DevelopmentInjector",
    "Document",
    "ManifestEntry",
    "OutputAsset",
    "OutputChunk",
    "ProductionInjector",
    "ResolvedConfig",
    "Tag",
    "build_manifest",
    "dump_manifest",
    "load_bundle",
    "parse_bundle",
    "render_dev_runtime",
    "render_prod_runtime",
    "resolve",
]
