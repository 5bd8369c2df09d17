import pytest

from brightpath.models.user import User


pytestmark = pytest.mark.asyncio

JSON = {"Accept": "application/json"}


async def _seed(client, login_as, create_user):
    """Two users with moods and journals, plus feedback and a confession."""
    alice, alice_pw = await create_user()
    bob, bob_pw = await create_user()

    await login_as(alice.email, alice_pw)
    await client.post("/mood", json={"mood": "sad"})
    await client.post("/mood", json={"mood": "happy", "stressLevel": 2})
    await client.post("/journal", json={"content": "alice journal"})
    await client.post("/feedback", json={"message": "alice feedback"})

    await login_as(bob.email, bob_pw)
    await client.post("/mood", json={"mood": "sad"})
    await client.post("/journal", json={"content": "bob journal"})

    await client.post("/anonymous", json={"message": "nobody knows"})
    await client.get("/logout")
    return alice, bob


async def test_admin_sees_everything(client, create_admin, create_user, login_as):
    await _seed(client, login_as, create_user)
    admin, admin_pw = await create_admin()
    await login_as(admin.email, admin_pw)

    resp = await client.get("/admin/data")
    assert resp.status_code == 200
    data = resp.json()
    assert len(data["moods"]) == 3
    assert [j["content"] for j in data["journals"]] == ["bob journal", "alice journal"]
    assert [f["message"] for f in data["feedbacks"]] == ["alice feedback"]
    assert [c["message"] for c in data["confessions"]] == ["nobody knows"]
    for rows in data.values():
        assert all(a["createdAt"] >= b["createdAt"] for a, b in zip(rows, rows[1:]))


async def test_admin_mood_filters(client, create_admin, create_user, login_as):
    alice, bob = await _seed(client, login_as, create_user)
    admin, admin_pw = await create_admin()
    await login_as(admin.email, admin_pw)

    by_mood = (await client.get("/admin/data", params={"mood": "sad"})).json()["moods"]
    assert {m["userEmail"] for m in by_mood} == {alice.email, bob.email}

    by_owner = (await client.get("/admin/data", params={"userEmail": alice.email})).json()["moods"]
    assert [m["mood"] for m in by_owner] == ["happy", "sad"]

    both = (await client.get("/admin/data", params={"email": alice.email, "mood": "sad"})).json()["moods"]
    assert [(m["userEmail"], m["mood"]) for m in both] == [(alice.email, "sad")]

    # Empty filters mean no filter
    everything = (await client.get("/admin/data", params={"email": "", "mood": ""})).json()["moods"]
    assert len(everything) == 3


async def test_admin_anonymous_listing(client, create_admin, login_as):
    await client.post("/anonymous", data={"message": "one"})
    await client.post("/anonymous", data={"message": "two"})
    admin, admin_pw = await create_admin()
    await login_as(admin.email, admin_pw)

    rows = (await client.get("/admin/anonymous")).json()
    assert [r["message"] for r in rows] == ["two", "one"]
    assert all("userEmail" not in r for r in rows)


async def test_admin_panel_json_and_html(client, create_admin, login_as):
    admin, admin_pw = await create_admin()
    await login_as(admin.email, admin_pw)

    as_json = await client.get("/admin", headers=JSON)
    assert set(as_json.json()) == {"moods", "journals", "feedbacks", "confessions"}

    as_html = await client.get("/admin", headers={"Accept": "text/html"})
    assert as_html.status_code == 200
    assert as_html.headers["content-type"].startswith("text/html")


@pytest.mark.parametrize("path", ["/admin", "/admin/data", "/admin/anonymous"])
async def test_non_admin_is_denied(client, create_user, login_as, path):
    user, password = await create_user()
    await login_as(user.email, password)

    resp = await client.get(path, headers=JSON)
    assert resp.status_code == 403
    assert resp.json()["detail"] == "FORBIDDEN_ADMIN_ONLY"

    browser = await client.get(path)
    assert browser.status_code == 403
    assert browser.text == "Admin access required"


@pytest.mark.parametrize("path", ["/admin", "/admin/data", "/admin/anonymous"])
async def test_unauthenticated_admin_routes_redirect_to_login(client, path):
    resp = await client.get(path)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/login"

    api_resp = await client.get(path, headers=JSON)
    assert api_resp.status_code == 401


async def test_role_is_snapshot_until_next_login(client, create_user, login_as):
    user, password = await create_user()
    await login_as(user.email, password)

    await User.filter(id=user.id).update(role="admin")
    assert (await client.get("/admin/data", headers=JSON)).status_code == 403

    await login_as(user.email, password)
    assert (await client.get("/admin/data", headers=JSON)).status_code == 200


async def test_role_refresh_on_admin(client_factory, create_user):
    user, password = await create_user()
    c = await client_factory(refresh_role_on_admin=True)
    await c.post("/login", data={"email": user.email, "password": password})

    await User.filter(id=user.id).update(role="admin")
    assert (await c.get("/admin/data", headers=JSON)).status_code == 200

    await User.filter(id=user.id).update(role="user")
    assert (await c.get("/admin/data", headers=JSON)).status_code == 403


async def test_disabled_collections_are_left_out(client_factory, create_admin):
    admin, admin_pw = await create_admin()
    c = await client_factory(enable_journal=False, enable_confessions=False)
    await c.post("/login", data={"email": admin.email, "password": admin_pw})

    data = (await c.get("/admin/data")).json()
    assert set(data) == {"moods", "feedbacks"}
    missing = await c.get("/admin/anonymous", headers=JSON)
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "NOT_FOUND"
