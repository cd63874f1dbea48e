from conftest import create_content, upload_asset, upload_document

PUBLISHED_FLAGS = "allow-scripts allow-same-origin allow-modals allow-forms allow-popups"


def test_published_page_renders_resolved_document(client, alice):
    asset = upload_asset(client, alice, name="cat.png").json()
    create_content(
        client,
        alice,
        title="Cats <3",
        html_code='<img src="./assets/cat.png">',
        css_code="img{width:100%}",
    )

    response = client.get("/computer-science/cats-3")

    assert response.status_code == 200
    assert f'sandbox="{PUBLISHED_FLAGS}"' in response.text
    assert asset["url"] in response.text
    assert "./assets/cat.png" not in response.text
    assert "Cats &lt;3" in response.text


def test_each_page_view_is_counted(client, alice):
    content = create_content(client, alice).json()

    client.get(content["path"])
    client.get(content["path"])

    assert client.get(f"/api/contents/{content['id']}").json()["views"] == 2


def test_unknown_and_draft_pages_are_not_found(client, alice):
    draft = create_content(client, alice, title="Secret", is_published=False).json()

    assert client.get("/computer-science/nothing-here").status_code == 404
    assert client.get(draft["path"]).status_code == 404
    assert client.get(f"/api/contents/{draft['id']}").json()["views"] == 0


def test_pdf_page_embeds_the_file(client, alice):
    document = upload_document(client, alice, "notes.pdf").json()

    response = client.get(document["path"])

    assert response.status_code == 200
    assert f'<iframe src="{document["file_url"]}"' in response.text
    assert "srcdoc=" not in response.text


def test_image_and_download_pages(client, alice):
    image = upload_document(client, alice, "diagram.png", mime_type="image/png", title="Diagram").json()
    other = upload_document(client, alice, "data.csv", mime_type="text/csv", title="Data").json()

    assert f'<img src="{image["file_url"]}"' in client.get(image["path"]).text
    assert 'download="data.csv"' in client.get(other["path"]).text


def test_index_renders_inert_cards(client, alice):
    create_content(client, alice, title="Card One", html_code="<button>Go</button>")
    create_content(client, alice, title="Hidden", is_published=False)

    response = client.get("/")

    assert response.status_code == 200
    assert 'sandbox="allow-scripts"' in response.text
    assert 'tabindex="-1"' in response.text
    assert "Card One" in response.text
    assert "Hidden" not in response.text


def test_index_filters_by_subject(client, alice):
    create_content(client, alice, title="Algebra", subject="Math")
    create_content(client, alice, title="Sorting")

    response = client.get("/", params={"subject": "math"})

    assert "Algebra" in response.text
    assert "Sorting" not in response.text


def test_media_subject_page_is_reachable(client, alice):
    content = create_content(client, alice, subject="Media", title="Posters", html_code="<h1>Posters</h1>").json()

    response = client.get(content["path"])

    assert response.status_code == 200
    assert "Posters" in response.text


def test_latest_upload_wins_for_a_shared_name(client, alice):
    first = upload_asset(client, alice, name="pic.png", data=b"first").json()
    second = upload_asset(client, alice, name="pic.png", data=b"second").json()
    content = create_content(client, alice, title="Gallery", html_code='<img src="assets/pic.png">').json()

    page = client.get(content["path"]).text
    preview = client.post("/api/preview", json={"html_code": '<img src="assets/pic.png">'}, headers=alice).text

    assert second["url"] in page
    assert first["url"] not in page
    assert f'<img src="{second["url"]}">' in preview
    assert first["url"] not in preview


def test_index_shows_an_icon_for_empty_code_content(client, alice):
    create_content(client, alice, title="Blank")

    response = client.get("/")

    assert "Blank" in response.text
    assert "srcdoc=" not in response.text
    assert "&lt;/&gt;" in response.text
