import pytest

from conftest import upload_document


@pytest.mark.parametrize(
    ("name", "mime_type", "kind"),
    [
        ("notes.pdf", "application/pdf", "PDF"),
        ("diagram.png", "image/png", "IMAGE"),
        ("readme.txt", "text/plain", "DOCUMENT"),
    ],
)
def test_document_kind_follows_mime_type(client, alice, name, mime_type, kind):
    response = upload_document(client, alice, name, mime_type=mime_type)

    assert response.status_code == 201
    body = response.json()
    assert body["kind"] == kind
    assert body["file_name"] == name
    assert body["mime_type"] == mime_type
    assert body["file_url"].startswith("http://testserver/media/documents/")
    assert body["path"] == "/physics/lecture-notes"


def test_documents_listing_excludes_code_projects(client, alice):
    upload_document(client, alice, "notes.pdf")
    client.post("/api/contents", json={"title": "Code", "subject": "Physics"}, headers=alice)

    listing = client.get("/api/documents", headers=alice).json()

    assert listing["total"] == 1
    assert listing["contents"][0]["kind"] == "PDF"


def test_document_upload_validation(client, alice):
    assert upload_document(client, alice, "notes.pdf", title="  ").status_code == 400
    assert upload_document(client, alice, "notes.pdf", data=b"").status_code == 400
    assert upload_document(client, alice, "notes.pdf", data=b"x" * 8193).status_code == 413


def test_deleting_document_removes_file(client, alice):
    document = upload_document(client, alice, "notes.pdf").json()
    assert client.get(document["file_url"]).status_code == 200

    assert client.delete(f"/api/contents/{document['id']}", headers=alice).status_code == 200
    assert client.get(document["file_url"]).status_code == 404
