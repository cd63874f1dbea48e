"""Asset resolution and sandboxed document assembly."""

from .assets import resolve_assets, resolve_bundle
from .document import assemble_document, strip_document_wrappers
from .models import AssetRef, ContentKind, RenderMode, SourceBundle
from .sandbox import SandboxPolicy, sandbox_policy
from .service import DocumentRenderer, RenderedDocument

__all__ = [
    "AssetRef",
    "ContentKind",
    "DocumentRenderer",
    "RenderMode",
    "RenderedDocument",
    "SandboxPolicy",
    "SourceBundle",
    "assemble_document",
    "resolve_assets",
    "resolve_bundle",
    "sandbox_policy",
    "strip_document_wrappers",
]
