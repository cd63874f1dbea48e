import pytest

from contenthub.rendering import (
    AssetRef,
    ContentKind,
    DocumentRenderer,
    RenderMode,
    SourceBundle,
    sandbox_policy,
)


def test_source_bundle_treats_missing_fields_as_empty():
    bundle = SourceBundle.of(markup=None, styles=None, script=None)

    assert bundle == SourceBundle("", "", "")
    assert bundle.is_empty()
    assert not SourceBundle.of(script="x").is_empty()


@pytest.mark.parametrize(
    ("mime_type", "kind"),
    [
        ("application/pdf", ContentKind.PDF),
        ("image/png", ContentKind.IMAGE),
        ("IMAGE/JPEG", ContentKind.IMAGE),
        ("text/plain", ContentKind.DOCUMENT),
        ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", ContentKind.DOCUMENT),
        (None, ContentKind.DOCUMENT),
    ],
)
def test_content_kind_for_mime_type(mime_type, kind):
    assert ContentKind.for_mime_type(mime_type) is kind


def test_sandbox_policies_per_mode():
    assert sandbox_policy(RenderMode.PREVIEW).attribute == "allow-scripts"
    assert sandbox_policy(RenderMode.CARD).attribute == "allow-scripts"
    assert not sandbox_policy(RenderMode.CARD).interactive

    published = sandbox_policy(RenderMode.PUBLISHED)
    assert "allow-same-origin" in published.flags
    assert "allow-forms" in published.flags
    assert published.interactive
    for mode in (RenderMode.PREVIEW, RenderMode.CARD):
        assert "allow-same-origin" not in sandbox_policy(mode).flags
        assert "allow-top-navigation" not in sandbox_policy(mode).flags


def test_renderer_resolves_then_assembles():
    renderer = DocumentRenderer()
    bundle = SourceBundle(markup='<html><body><img src="assets/pic.png"></body></html>')
    assets = [AssetRef("pic.png", "https://cdn.example/pic.png")]

    preview = renderer.preview(bundle, assets)
    published = renderer.publish(bundle, assets, title="Pic")

    assert preview.mode is RenderMode.PREVIEW
    assert preview.html.count("<html") == 1
    assert '<img src="https://cdn.example/pic.png">' in preview.html
    assert preview.sandbox == sandbox_policy(RenderMode.PREVIEW)

    assert published.mode is RenderMode.PUBLISHED
    assert "<title>Pic</title>" in published.html
    assert '<img src="https://cdn.example/pic.png">' in published.html
    assert published.sandbox == sandbox_policy(RenderMode.PUBLISHED)


def test_renderer_output_is_recomputed_per_call():
    renderer = DocumentRenderer()
    bundle = SourceBundle(markup='<img src="assets/pic.png">')

    first = renderer.card(bundle, [AssetRef("pic.png", "https://cdn.example/1.png")])
    second = renderer.card(bundle, [AssetRef("pic.png", "https://cdn.example/2.png")])

    assert "https://cdn.example/1.png" in first.html
    assert "https://cdn.example/2.png" in second.html
