"""Injection primitives mirroring the generated browser runtimes.

The browser runtimes are plain JavaScript. This module models the same
behaviour against an in-memory document so it can be used to render tags
server-side and to check the runtime contract without a browser.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from html import escape
from typing import TYPE_CHECKING, Literal

from agnostic_vite.manifest import resolve as resolve_entry
from agnostic_vite.runtime import CLIENT_PATH, GLOBAL_NAME, WARNING_PREFIX

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from agnostic_vite.manifest import ManifestEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Tag:
    kind: Literal["script", "stylesheet"]
    url: str

    def html(self) -> str:
        if self.kind == "script":
            return f'<script type="module" src="{escape(self.url)}"></script>'
        return f'<link rel="stylesheet" href="{escape(self.url)}">'


def script(url: str) -> Tag:
    return Tag("script", url)


def stylesheet(url: str) -> Tag:
    return Tag("stylesheet", url)


@dataclass(slots=True)
class Document:
    """A live document: stylesheets land in ``head``, scripts in ``body``."""

    head: list[Tag] = field(default_factory=list)
    body: list[Tag] = field(default_factory=list)
    globals: dict[str, Callable[[str], None]] = field(default_factory=dict)

    def append(self, tag: Tag) -> None:
        (self.body if tag.kind == "script" else self.head).append(tag)


def _entry_tag(entry: str, url: str) -> Tag | None:
    if entry.endswith(".js"):
        return script(url)
    if entry.endswith(".css"):
        return stylesheet(url)
    return None


@dataclass(frozen=True, slots=True)
class DevelopmentInjector:
    """Forwards every entry to the dev server without consulting a manifest."""

    origin: str

    def tags(self, entry: str) -> list[Tag]:
        tag = _entry_tag(entry, f"{self.origin.rstrip('/')}/{entry}")
        return [] if tag is None else [tag]

    def inject(self, document: Document, entry: str) -> None:
        for tag in self.tags(entry):
            document.append(tag)

    def install(self, document: Document | None) -> None:
        if document is None:
            return
        document.globals[GLOBAL_NAME] = partial(self.inject, document)
        document.head.append(script(f"{self.origin.rstrip('/')}/{CLIENT_PATH}"))


@dataclass(frozen=True, slots=True)
class ProductionInjector:
    """Resolves entries through a manifest and injects files under ``out_dir``."""

    manifest: Mapping[str, ManifestEntry]
    out_dir: str

    def resolve(self, entry: str) -> ManifestEntry | None:
        return resolve_entry(self.manifest, entry)

    def tags(self, entry: str) -> list[Tag] | None:
        """Return the tags for ``entry`` in insertion order, or None when it is unknown.

        Dependency stylesheets always precede the entry's own tag.
        """
        asset = self.resolve(entry)
        if asset is None:
            return None

        tags = [stylesheet(f"{self.out_dir}/{css_file}") for css_file in asset.get("css", [])]
        own = _entry_tag(entry, f"{self.out_dir}/{asset['file']}")
        if own is not None:
            tags.append(own)
        return tags

    def inject(self, document: Document, entry: str) -> None:
        tags = self.tags(entry)
        if tags is None:
            logger.warning("%s Asset not found: %s", WARNING_PREFIX, entry)
            return
        for tag in tags:
            document.append(tag)

    def install(self, document: Document | None) -> None:
        if document is None:
            return
        document.globals[GLOBAL_NAME] = partial(self.inject, document)
