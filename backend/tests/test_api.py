"""
TechNotes Backend: HTTP Endpoint Tests
======================================

What:  End-to-end tests through the FastAPI app with an in-memory SQLite database.

What we test:
    ✅ Status codes per branch: 200, 201, 400, 409
    ✅ Schema failures come back as 400 validation_error, not 422
    ✅ The alice/Shopping scenario, including the owned-notes delete guard
    ✅ Passwords never appear in responses
"""

import pytest
from uuid import uuid4


async def create_user(client, username="alice", password="pw123", roles=None):
    return await client.post(
        "/users",
        json={"username": username, "password": password, "roles": roles or ["Employee"]},
    )


async def user_id_of(client, username):
    response = await client.get("/users")
    return next(u["id"] for u in response.json() if u["username"] == username)


async def note_id_of(client, title):
    response = await client.get("/notes")
    return next(n["id"] for n in response.json() if n["title"] == title)


class TestUsersEndpoints:

    @pytest.mark.asyncio
    async def test_create_user_then_duplicate(self, test_client):
        first = await create_user(test_client)
        assert first.status_code == 201
        assert "alice" in first.json()["message"]

        second = await create_user(test_client)
        assert second.status_code == 409
        assert second.json()["error"] == "conflict"
        assert second.json()["message"] == "Duplicate username"

    @pytest.mark.asyncio
    async def test_list_users_empty_is_400(self, test_client):
        response = await test_client.get("/users")

        assert response.status_code == 400
        assert response.json()["message"] == "No users found"

    @pytest.mark.asyncio
    async def test_list_users_never_includes_password(self, test_client):
        await create_user(test_client)

        response = await test_client.get("/users")

        assert response.status_code == 200
        [user] = response.json()
        assert user["username"] == "alice"
        assert user["roles"] == ["Employee"]
        assert user["active"] is True
        assert "password" not in user
        assert "pw123" not in response.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"password": "pw123", "roles": ["Employee"]},
            {"username": "", "password": "pw123", "roles": ["Employee"]},
            {"username": "alice", "roles": ["Employee"]},
            {"username": "alice", "password": "pw123", "roles": []},
            {"username": "alice", "password": "pw123", "roles": "Employee"},
        ],
    )
    async def test_create_user_missing_fields_is_400(self, test_client, body):
        response = await test_client.post("/users", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert response.json()["message"] == "All fields are required"

    @pytest.mark.asyncio
    async def test_update_user_requires_boolean_active(self, test_client):
        await create_user(test_client)
        alice_id = await user_id_of(test_client, "alice")

        response = await test_client.patch(
            "/users",
            json={"id": alice_id, "username": "alice", "roles": ["Employee"], "active": "yes"},
        )

        assert response.status_code == 400
        assert "active" in response.json()["details"]["fields"]

    @pytest.mark.asyncio
    async def test_update_user_same_username_and_rename(self, test_client):
        await create_user(test_client)
        alice_id = await user_id_of(test_client, "alice")

        same = await test_client.patch(
            "/users",
            json={"id": alice_id, "username": "alice", "roles": ["Manager"], "active": False},
        )
        assert same.status_code == 200
        assert same.json() == {"message": "alice updated"}

        renamed = await test_client.patch(
            "/users",
            json={"id": alice_id, "username": "alicia", "roles": ["Manager"], "active": True},
        )
        assert renamed.status_code == 200

        [user] = (await test_client.get("/users")).json()
        assert user["username"] == "alicia"
        assert user["roles"] == ["Manager"]

    @pytest.mark.asyncio
    async def test_update_user_to_taken_username_conflicts(self, test_client):
        await create_user(test_client, "alice")
        await create_user(test_client, "bob")
        bob_id = await user_id_of(test_client, "bob")

        response = await test_client.patch(
            "/users",
            json={"id": bob_id, "username": "alice", "roles": ["Employee"], "active": True},
        )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_update_unknown_user_is_400(self, test_client):
        response = await test_client.patch(
            "/users",
            json={"id": str(uuid4()), "username": "ghost", "roles": ["Employee"], "active": True},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "User not found"

    @pytest.mark.asyncio
    async def test_delete_user_requires_id(self, test_client):
        response = await test_client.request("DELETE", "/users", json={})

        assert response.status_code == 400
        assert response.json()["details"]["fields"] == ["id"]

    @pytest.mark.asyncio
    async def test_delete_unknown_user_is_400(self, test_client):
        response = await test_client.request("DELETE", "/users", json={"id": str(uuid4())})

        assert response.status_code == 400
        assert response.json()["error"] == "not_found"


class TestNotesEndpoints:

    @pytest.mark.asyncio
    async def test_list_notes_empty_is_400(self, test_client):
        response = await test_client.get("/notes")

        assert response.status_code == 400
        assert response.json()["message"] == "No notes found"

    @pytest.mark.asyncio
    async def test_create_note_duplicate_title_is_409(self, test_client):
        await create_user(test_client)
        alice_id = await user_id_of(test_client, "alice")
        body = {"user": alice_id, "title": "Shopping", "text": "milk"}

        assert (await test_client.post("/notes", json=body)).status_code == 201

        duplicate = await test_client.post("/notes", json={**body, "text": "other"})
        assert duplicate.status_code == 409
        assert duplicate.json()["message"] == "Duplicate note title"

    @pytest.mark.asyncio
    async def test_create_note_missing_text_is_400(self, test_client):
        response = await test_client.post(
            "/notes", json={"user": str(uuid4()), "title": "Shopping", "text": ""}
        )

        assert response.status_code == 400
        assert response.json()["details"]["fields"] == ["text"]

    @pytest.mark.asyncio
    async def test_update_note_requires_strict_boolean(self, test_client):
        response = await test_client.patch(
            "/notes",
            json={
                "id": str(uuid4()),
                "user": str(uuid4()),
                "title": "Shopping",
                "text": "milk",
                "completed": 1,
            },
        )

        assert response.status_code == 400
        assert response.json()["details"]["fields"] == ["completed"]

    @pytest.mark.asyncio
    async def test_list_notes_joins_username(self, test_client):
        await create_user(test_client)
        alice_id = await user_id_of(test_client, "alice")
        await test_client.post("/notes", json={"user": alice_id, "title": "Shopping", "text": "milk"})

        response = await test_client.get("/notes")

        assert response.status_code == 200
        [note] = response.json()
        assert note["username"] == "alice"
        assert note["user"] == alice_id
        assert note["completed"] is False

    @pytest.mark.asyncio
    async def test_delete_unknown_note_is_400(self, test_client):
        response = await test_client.request("DELETE", "/notes", json={"id": str(uuid4())})

        assert response.status_code == 400
        assert response.json()["message"] == "Note not found"


class TestOwnershipScenario:
    """Users, notes and the owned-notes delete guard, end to end."""

    @pytest.mark.asyncio
    async def test_alice_shopping_lifecycle(self, test_client):
        created = await create_user(test_client, "alice", "pw123", ["Employee"])
        assert created.status_code == 201
        alice_id = await user_id_of(test_client, "alice")

        note = await test_client.post(
            "/notes", json={"user": alice_id, "title": "Shopping", "text": "milk"}
        )
        assert note.status_code == 201
        note_id = await note_id_of(test_client, "Shopping")

        updated = await test_client.patch(
            "/notes",
            json={
                "id": note_id,
                "user": alice_id,
                "title": "Shopping2",
                "text": "milk,eggs",
                "completed": True,
            },
        )
        assert updated.status_code == 200
        assert updated.json() == {"message": "'Shopping2' updated"}

        [listed] = (await test_client.get("/notes")).json()
        assert listed["title"] == "Shopping2"
        assert listed["text"] == "milk,eggs"
        assert listed["completed"] is True

        blocked = await test_client.request("DELETE", "/users", json={"id": alice_id})
        assert blocked.status_code == 409
        assert blocked.json()["message"] == "User has assigned notes"

        removed_note = await test_client.request("DELETE", "/notes", json={"id": note_id})
        assert removed_note.status_code == 200
        assert removed_note.json()["message"] == f"Note Shopping2 with ID {note_id} deleted"

        removed_user = await test_client.request("DELETE", "/users", json={"id": alice_id})
        assert removed_user.status_code == 200
        assert removed_user.json()["message"] == f"User alice with ID {alice_id} deleted"

        again = await test_client.request("DELETE", "/users", json={"id": alice_id})
        assert again.status_code == 400


class TestHealthAndMiddleware:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/users", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"
        assert response.json()["request_id"] == "abc123"
