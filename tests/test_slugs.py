from contenthub.modules.assets import asset_slug, guess_mime_type
from contenthub.modules.contents.slugs import disambiguate, slugify, slugify_subject


def test_slugify_collapses_non_alphanumerics():
    assert slugify("Computer Science") == "computer-science"
    assert slugify("  Hello, World!  ") == "hello-world"
    assert slugify("C++ & Rust 101") == "c-rust-101"


def test_slugify_falls_back_when_nothing_is_left():
    assert slugify("!!!") == "untitled"
    assert slugify("") == "untitled"


def test_disambiguate_appends_timestamp():
    assert disambiguate("my-page", now_ms=1700000000000) == "my-page-1700000000000"


def test_asset_slug_keeps_dots():
    assert asset_slug("My Logo (v2).PNG") == "my-logo-v2.png"
    assert asset_slug("photo - final.JPG") == "photo-final.jpg"


def test_guess_mime_type_prefers_extension():
    assert guess_mime_type("doc.pdf", "application/octet-stream") == "application/pdf"
    assert guess_mime_type("blob", "image/webp") == "image/webp"
    assert guess_mime_type("blob") == "application/octet-stream"


def test_subject_slugs_avoid_reserved_route_prefixes():
    assert slugify_subject("Media") == "media-subject"
    assert slugify_subject("API") == "api-subject"
    assert slugify_subject("Social Media") == "social-media"
