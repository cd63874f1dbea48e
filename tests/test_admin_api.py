from conftest import create_content


def test_admin_sees_every_content(client, alice, admin):
    create_content(client, alice, title="Public")
    create_content(client, alice, title="Draft", is_published=False)

    response = client.get("/api/admin/contents", headers=admin)

    assert response.status_code == 200
    assert sorted(item["title"] for item in response.json()["contents"]) == ["Draft", "Public"]


def test_admin_stats(client, alice, bob, admin):
    public = create_content(client, alice, title="Public").json()
    create_content(client, bob, title="Draft", subject="Math", is_published=False)
    client.get(public["path"])
    client.get(public["path"])

    stats = client.get("/api/admin/stats", headers=admin).json()

    assert stats["total_accounts"] == 3
    assert stats["total_contents"] == 2
    assert stats["published_count"] == 1
    assert stats["draft_count"] == 1
    assert stats["total_views"] == 2
    assert stats["top_contents"][0]["id"] == public["id"]
    assert {subject["slug"] for subject in stats["subjects"]} == {"computer-science", "math"}


def test_admin_routes_reject_regular_accounts(client, alice):
    assert client.get("/api/admin/stats", headers=alice).status_code == 403
    assert client.get("/api/admin/contents", headers=alice).status_code == 403
