from conftest import upload_asset


def test_upload_stores_file_and_serves_it_under_media(client, alice):
    response = upload_asset(client, alice, name="Logo Final.PNG", data=b"png-bytes", folder="icons")

    assert response.status_code == 201
    asset = response.json()
    assert asset["name"] == "Logo Final.PNG"
    assert asset["slug"] == "logo-final.png"
    assert asset["folder"] == "icons"
    assert asset["size_bytes"] == len(b"png-bytes")
    assert asset["url"].startswith("http://testserver/media/assets/")
    assert asset["url"].endswith(".png")

    served = client.get(asset["url"])
    assert served.status_code == 200
    assert served.content == b"png-bytes"


def test_folder_defaults_to_general(client, alice):
    assert upload_asset(client, alice).json()["folder"] == "general"


def test_listing_is_scoped_to_owner_and_folder(client, alice, bob):
    upload_asset(client, alice, name="a.png", folder="icons")
    upload_asset(client, alice, name="b.png")
    upload_asset(client, bob, name="c.png")

    mine = client.get("/api/assets", headers=alice).json()["assets"]
    icons = client.get("/api/assets", params={"folder": "icons"}, headers=alice).json()["assets"]

    assert sorted(asset["name"] for asset in mine) == ["a.png", "b.png"]
    assert [asset["name"] for asset in icons] == ["a.png"]


def test_empty_upload_is_rejected(client, alice):
    assert upload_asset(client, alice, data=b"").status_code == 400


def test_oversized_upload_is_rejected(client, alice):
    response = upload_asset(client, alice, data=b"x" * 4097)

    assert response.status_code == 413
    assert client.get("/api/assets", headers=alice).json()["assets"] == []


def test_owner_deletes_asset(client, alice):
    asset = upload_asset(client, alice).json()

    assert client.delete(f"/api/assets/{asset['id']}", headers=alice).status_code == 200
    assert client.get("/api/assets", headers=alice).json()["assets"] == []
    assert client.get(asset["url"]).status_code == 404


def test_other_accounts_cannot_delete_asset(client, alice, bob):
    asset = upload_asset(client, alice).json()

    assert client.delete(f"/api/assets/{asset['id']}", headers=bob).status_code == 404
    assert client.delete("/api/assets/missing", headers=alice).status_code == 404
    assert len(client.get("/api/assets", headers=alice).json()["assets"]) == 1
