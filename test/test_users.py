"""
test_users.py — CRUD de /users contra MongoDB en memoria
"""

from bson import ObjectId


def test_create_returns_document_with_id(client):
    resp = client.post(
        "/users/",
        json={"username": "alice", "email": "Alice@Example.com ", "password": "s3cretpass"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert ObjectId.is_valid(body["id"])
    assert body["username"] == "alice"
    assert body["email"] == "alice@example.com"
    assert body["status"] == "offline"
    assert body["role"] == "user"
    assert "password" not in body
    assert "_id" not in body


def test_created_user_round_trips(client, create_user):
    created = create_user()
    resp = client.get(f"/users/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_password_is_stored_hashed(client, create_user, mongo_db):
    created = create_user(password="plainpassword")
    doc = mongo_db["users"].find_one({"_id": ObjectId(created["id"])})
    assert doc["password"] != "plainpassword"
    assert doc["password"].startswith("$2")


def test_create_rejects_missing_fields(client):
    resp = client.post("/users/", json={"username": "bob"})
    assert resp.status_code == 400


def test_create_rejects_short_password_and_username(client):
    resp = client.post("/users/", json={"username": "bo", "email": "bob@example.com", "password": "short"})
    assert resp.status_code == 400


def test_create_rejects_duplicate_email(client, create_user):
    create_user()
    resp = client.post(
        "/users/",
        json={"username": "alice2", "email": "ALICE@example.com", "password": "anotherpass"},
    )
    assert resp.status_code == 400
    assert "registrado" in resp.json()["detail"]


def test_update_merges_fields(client, create_user):
    created = create_user()
    resp = client.put(f"/users/{created['id']}", json={"username": "alice_w"})
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["username"] == "alice_w"
    assert updated["email"] == created["email"]

    fetched = client.get(f"/users/{created['id']}").json()
    assert fetched["username"] == "alice_w"


def test_patch_updates_status(client, create_user):
    created = create_user()
    resp = client.patch(f"/users/{created['id']}", json={"status": "away"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "away"


def test_update_rejects_email_taken_by_other_user(client, create_user):
    create_user()
    bob = create_user(username="bob", email="bob@example.com")
    resp = client.put(f"/users/{bob['id']}", json={"email": "alice@example.com"})
    assert resp.status_code == 400


def test_update_unknown_id_is_not_found(client):
    resp = client.put(f"/users/{ObjectId()}", json={"username": "ghost"})
    assert resp.status_code == 404


def test_malformed_id_is_not_found(client):
    assert client.get("/users/not-an-id").status_code == 404
    assert client.delete("/users/not-an-id").status_code == 404


def test_delete_then_get_is_not_found(client, create_user):
    created = create_user()
    resp = client.delete(f"/users/{created['id']}")
    assert resp.status_code == 200
    assert resp.json()["id"] == created["id"]

    assert client.get(f"/users/{created['id']}").status_code == 404
    assert client.delete(f"/users/{created['id']}").status_code == 404


def test_list_counts_creates_minus_deletes(client, create_user):
    users = [create_user(username=f"user{i}", email=f"user{i}@example.com") for i in range(5)]
    for user in users[:2]:
        assert client.delete(f"/users/{user['id']}").status_code == 200

    resp = client.get("/users/")
    assert resp.status_code == 200
    listed = resp.json()
    assert len(listed) == 3
    assert {u["id"] for u in listed} == {u["id"] for u in users[2:]}
    assert all("password" not in u for u in listed)


def test_validation_errors_report_field_list(client):
    resp = client.post("/users/", json={"username": "bob"})
    assert resp.status_code == 400
    fields = {tuple(err["loc"])[-1] for err in resp.json()["detail"]}
    assert {"email", "password"} <= fields


def test_create_rejects_password_over_bcrypt_limit(client):
    resp = client.post(
        "/users/",
        json={"username": "longpw", "email": "longpw@example.com", "password": "x" * 100},
    )
    assert resp.status_code == 400
    assert client.get("/users/").json() == []


def test_create_rejects_multibyte_password_over_72_bytes(client):
    # 40 caracteres, 80 bytes en UTF-8
    resp = client.post(
        "/users/",
        json={"username": "multib", "email": "multib@example.com", "password": "ñ" * 40},
    )
    assert resp.status_code == 400


def test_update_rejects_password_over_bcrypt_limit(client, create_user):
    created = create_user()
    resp = client.patch(f"/users/{created['id']}", json={"password": "z" * 100})
    assert resp.status_code == 400


def test_unique_index_rejects_duplicate_email(client, create_user, monkeypatch):
    from repositories import user_repository

    create_user()
    monkeypatch.setattr(user_repository, "_ensure_email_available", lambda *args, **kwargs: None)
    resp = client.post(
        "/users/",
        json={"username": "alice2", "email": "alice@example.com", "password": "anotherpass"},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Duplicate field value entered"
    assert len(client.get("/users/").json()) == 1
