"""Resolve-then-assemble pipeline used by the preview API and the public pages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .assets import resolve_bundle
from .document import assemble_document
from .models import AssetRef, RenderMode, SourceBundle
from .sandbox import SandboxPolicy, sandbox_policy

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RenderedDocument:
    html: str
    mode: RenderMode
    sandbox: SandboxPolicy


class DocumentRenderer:
    """Stateless renderer; every call rebuilds the document from its inputs."""

    def render(
        self,
        bundle: SourceBundle,
        assets: Iterable[AssetRef] = (),
        *,
        mode: RenderMode,
        title: Optional[str] = None,
    ) -> RenderedDocument:
        resolved = resolve_bundle(bundle, assets)
        document = assemble_document(resolved, mode=mode, title=title)
        logger.debug("Rendered %s document (%d chars)", mode.value, len(document))
        return RenderedDocument(html=document, mode=mode, sandbox=sandbox_policy(mode))

    def preview(self, bundle: SourceBundle, assets: Iterable[AssetRef] = ()) -> RenderedDocument:
        return self.render(bundle, assets, mode=RenderMode.PREVIEW)

    def publish(
        self,
        bundle: SourceBundle,
        assets: Iterable[AssetRef],
        title: Optional[str] = None,
    ) -> RenderedDocument:
        return self.render(bundle, assets, mode=RenderMode.PUBLISHED, title=title)

    def card(self, bundle: SourceBundle, assets: Iterable[AssetRef] = ()) -> RenderedDocument:
        return self.render(bundle, assets, mode=RenderMode.CARD)


__all__ = ["DocumentRenderer", "RenderedDocument"]
