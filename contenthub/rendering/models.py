"""Value types shared by the asset resolver and the document assembler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True, slots=True)
class SourceBundle:
    """The three user-authored buffers of a code project."""

    markup: str = ""
    styles: str = ""
    script: str = ""

    @classmethod
    def of(
        cls,
        markup: Optional[str] = None,
        styles: Optional[str] = None,
        script: Optional[str] = None,
    ) -> "SourceBundle":
        """Build a bundle where missing fields mean "no content"."""
        return cls(markup=markup or "", styles=styles or "", script=script or "")

    def is_empty(self) -> bool:
        return not (self.markup or self.styles or self.script)


@dataclass(frozen=True, slots=True)
class AssetRef:
    name: str
    url: str


class ContentKind(str, Enum):
    CODE = "CODE"
    PDF = "PDF"
    DOCUMENT = "DOCUMENT"
    IMAGE = "IMAGE"

    @classmethod
    def for_mime_type(cls, mime_type: str | None) -> "ContentKind":
        if not mime_type:
            return cls.DOCUMENT
        mime_type = mime_type.lower()
        if mime_type == "application/pdf":
            return cls.PDF
        if mime_type.startswith("image/"):
            return cls.IMAGE
        return cls.DOCUMENT


class RenderMode(str, Enum):
    PREVIEW = "preview"
    PUBLISHED = "published"
    CARD = "card"
