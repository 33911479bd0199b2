"""Entry isolation when every request must carry a resolvable bearer token."""
import pytest

A = {"Authorization": "Bearer token-a"}
B = {"Authorization": "Bearer token-b"}


def create(client, headers, **body):
    res = client.post("/entries", json=body, headers=headers)
    assert res.status_code == 200, res.text
    return res.json()


@pytest.mark.parametrize(
    "method,path",
    [
        ("post", "/entries"),
        ("get", "/entries"),
        ("get", "/stats"),
        ("put", "/entries/1"),
        ("delete", "/entries/1"),
    ],
)
def test_missing_token_is_401(auth_client, method, path):
    kwargs = {"json": {"score": 50}} if method in ("post", "put") else {}
    res = getattr(auth_client, method)(path, **kwargs)
    assert res.status_code == 401
    assert res.json() == {"error": "Missing bearer token"}


def test_malformed_header(auth_client):
    res = auth_client.get("/entries", headers={"Authorization": "Token token-a"})
    assert res.status_code == 401
    assert res.json() == {"error": "Malformed Authorization header"}


def test_unknown_token(auth_client, identity):
    res = auth_client.get("/entries", headers={"Authorization": "Bearer nope"})
    assert res.status_code == 401
    assert identity.calls == ["nope"]


def test_owner_is_stored(auth_client):
    assert create(auth_client, A, score=70)["user_id"] == "user-a"


def test_body_user_id_is_ignored(auth_client):
    assert create(auth_client, A, score=70, user_id="user-b")["user_id"] == "user-a"


def test_list_and_stats_are_isolated(auth_client):
    create(auth_client, A, score=70)
    create(auth_client, A, score=90)
    create(auth_client, B, score=10)

    assert [e["score"] for e in auth_client.get("/entries", headers=A).json()] == [90, 70]
    assert [e["score"] for e in auth_client.get("/entries", headers=B).json()] == [10]
    assert auth_client.get("/stats", headers=A).json() == {"count": 2, "avg": 80.0, "min": 70, "max": 90}
    assert auth_client.get("/stats", headers=B).json()["count"] == 1


def test_foreign_update_has_no_effect(auth_client):
    entry = create(auth_client, A, score=70, text="mine")
    res = auth_client.put(f"/entries/{entry['id']}", json={"text": "stolen"}, headers=B)
    assert res.status_code == 400
    assert res.json() == {"error": "Entry not found"}
    assert auth_client.get("/entries", headers=A).json()[0]["text"] == "mine"


def test_foreign_delete_has_no_effect(auth_client):
    entry = create(auth_client, A, score=70)
    res = auth_client.delete(f"/entries/{entry['id']}", headers=B)
    assert res.json() == {"success": True}
    assert [e["id"] for e in auth_client.get("/entries", headers=A).json()] == [entry["id"]]


def test_owner_can_update_and_delete(auth_client):
    entry = create(auth_client, A, score=70)
    assert auth_client.put(f"/entries/{entry['id']}", json={"score": 71}, headers=A).json()["score"] == 71
    auth_client.delete(f"/entries/{entry['id']}", headers=A)
    assert auth_client.get("/entries", headers=A).json() == []


def test_health_needs_no_token(auth_client):
    res = auth_client.get("/health")
    assert res.status_code == 200
    assert res.json()["auth_mode"] == "required"
