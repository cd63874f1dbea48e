"""URL slug helpers for subject and title routes."""

from __future__ import annotations

import re
import time

FALLBACK_SLUG = "untitled"

# first path segments already taken by the API router and the media mount
RESERVED_SUBJECT_SLUGS = frozenset({"api", "media"})

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    slug = _NON_SLUG_CHARS.sub("-", (text or "").lower()).strip("-")
    return slug or FALLBACK_SLUG


def slugify_subject(subject: str) -> str:
    slug = slugify(subject)
    if slug in RESERVED_SUBJECT_SLUGS:
        return f"{slug}-subject"
    return slug


def disambiguate(slug: str, now_ms: int | None = None) -> str:
    """Suffix a clashing slug with the current epoch milliseconds."""
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{slug}-{stamp}"
