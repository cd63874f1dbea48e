"""Rewrite ``assets/<name>`` references into the uploaded files' absolute URLs.

Only the ``assets/`` directory convention is understood. A reference may be
written bare (``assets/logo.png``), rooted (``/assets/logo.png``) or
explicitly relative (``./assets/logo.png``). Asset names are matched
literally: there is no handling of ``..``, nested folders or URL encoding,
and references that name no known asset are left as they are.
"""

from __future__ import annotations

import re
from typing import Iterable, Pattern

from .models import AssetRef, SourceBundle

REFERENCE_PREFIX = r"\.?/?assets/"


def _asset_table(assets: Iterable[AssetRef]) -> dict[str, str]:
    # later entries overwrite earlier ones with the same name
    table: dict[str, str] = {}
    for asset in assets:
        if asset.name:
            table[asset.name] = asset.url
    return table


def _build_pattern(names: Iterable[str]) -> Pattern[str]:
    # longest names first so that "logo.png.bak" is tried before "logo.png"
    ordered = sorted(names, key=len, reverse=True)
    alternatives = "|".join(re.escape(name) for name in ordered)
    return re.compile(f"{REFERENCE_PREFIX}(?P<name>{alternatives})")


def resolve_assets(code: str, assets: Iterable[AssetRef]) -> str:
    """Return ``code`` with every recognised asset reference replaced by its URL.

    All references are substituted in a single left-to-right pass, so an
    inserted URL is never scanned again.
    """
    if not code:
        return code or ""

    table = _asset_table(assets)
    if not table or "assets/" not in code:
        return code

    pattern = _build_pattern(table)
    return pattern.sub(lambda match: table[match.group("name")], code)


def resolve_bundle(bundle: SourceBundle, assets: Iterable[AssetRef]) -> SourceBundle:
    """Resolve the markup, styles and script of ``bundle`` against one asset snapshot."""
    snapshot = list(assets)
    return SourceBundle(
        markup=resolve_assets(bundle.markup, snapshot),
        styles=resolve_assets(bundle.styles, snapshot),
        script=resolve_assets(bundle.script, snapshot),
    )


__all__ = ["resolve_assets", "resolve_bundle"]
