"""Tests for the users endpoint and the user builders."""

import pytest

from gitea import NotFoundError, StaleBuilderError, UnprocessableError, User, ValidationError
from gitea.builders import BuilderState


def test_get_current(client, server, sample_user_data):
    # Arrange
    server.add("GET", "user", json=sample_user_data)

    # Act
    user = client.users.get_current()

    # Assert: should parse the user, bind the client and remember it is "me"
    assert isinstance(user, User)
    assert user.login == "kloubi"
    assert user.username == "kloubi"
    assert user.client is client
    assert user.is_authenticated_user


def test_get_by_username(client, server, sample_user_data):
    # Arrange
    server.add("GET", "users/kloubi", json=sample_user_data)

    # Act
    user = client.users.get_by_username("kloubi")

    # Assert
    assert user.email == "kloubi@example.com"
    assert user.location == "Aachen"
    assert user.last_login.year == 2024
    assert not user.is_authenticated_user


def test_get_by_username_not_found(client, server):
    # Arrange: nothing registered, server answers 404
    # Act & Assert: should raise a protocol error carrying the status
    with pytest.raises(NotFoundError) as exc_info:
        client.users.get_by_username("ghost")
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "route not found"


def test_get_by_username_rejects_blank_name(client, server):
    # Act & Assert: should fail before any request because the name is blank
    with pytest.raises(ValueError):
        client.users.get_by_username("  ")
    assert server.requests == []


def test_search_unwraps_data_envelope(client, server, sample_user_data):
    # Arrange
    server.add("GET", "users/search", json={"ok": True, "data": [sample_user_data]})

    # Act
    users = client.users.search("klo", limit=5)

    # Assert
    assert [u.login for u in users] == ["kloubi"]
    assert users[0].client is client
    assert server.requests[0].url.params["q"] == "klo"
    assert server.requests[0].url.params["limit"] == "5"


def test_create_user(client, server, sample_user_data):
    # Arrange
    server.add("POST", "admin/users", status=201, json=sample_user_data)
    builder = (
        client.users.create()
        .email("kloubi@example.com")
        .user_name("kloubi")
        .password("P@assword123!")
        .full_name("Houbi The Kloubi")
        .send_notification()
    )

    # Act
    user = builder.create()

    # Assert: should send one POST with the wire field names and return a bound user
    assert len(server.requests) == 1
    assert server.requests[0].method == "POST"
    assert server.last_json() == {
        "email": "kloubi@example.com",
        "username": "kloubi",
        "password": "P@assword123!",
        "full_name": "Houbi The Kloubi",
        "send_notify": True,
    }
    assert user.login == "kloubi"
    assert user.client is client
    assert builder.state is BuilderState.SENT


def test_create_user_missing_field_sends_nothing(client, server):
    # Arrange: password never set
    builder = client.users.create().user_name("kloubi").email("kloubi@example.com")

    # Act & Assert: should name the missing field and not touch the network
    with pytest.raises(ValidationError) as exc_info:
        builder.create()
    assert exc_info.value.missing == ["password"]
    assert "password" in str(exc_info.value)
    assert server.requests == []
    assert server.factory_calls == 0
    assert builder.state is BuilderState.COLLECTING


def test_create_user_reports_every_missing_field(client):
    # Act & Assert
    with pytest.raises(ValidationError) as exc_info:
        client.users.new().full_name("Nobody").create()
    assert exc_info.value.missing == ["username", "email", "password"]


def test_validation_failure_does_not_consume_builder(client, server, sample_user_data):
    # Arrange
    server.add("POST", "admin/users", status=201, json=sample_user_data)
    builder = client.users.create().user_name("kloubi").email("kloubi@example.com")
    with pytest.raises(ValidationError):
        builder.create()

    # Act: fill the gap and try again
    user = builder.password("pw").create()

    # Assert
    assert user.login == "kloubi"
    assert len(server.requests) == 1


def test_setters_overwrite_and_are_order_independent(client):
    # Act
    builder = client.users.create().email("a@example.com").user_name("x").email("b@example.com")

    # Assert: should keep only the last value
    assert builder.fields == {"email": "b@example.com", "username": "x"}


def test_builder_is_stale_after_submit(client, server, sample_user_data):
    # Arrange
    server.add("POST", "admin/users", status=201, json=sample_user_data)
    builder = client.users.create().user_name("kloubi").email("k@example.com").password("pw")
    builder.create()

    # Act & Assert: should refuse both setters and a second submit
    with pytest.raises(StaleBuilderError):
        builder.full_name("Again")
    with pytest.raises(StaleBuilderError):
        builder.create()
    assert len(server.requests) == 1


def test_failed_request_still_consumes_builder(client, server):
    # Arrange
    server.add("POST", "admin/users", status=422, json={"message": "e-mail already used"})
    builder = client.users.create().user_name("kloubi").email("k@example.com").password("pw")

    # Act
    with pytest.raises(UnprocessableError) as exc_info:
        builder.create()

    # Assert: should surface the server error and leave the builder spent
    assert exc_info.value.status_code == 422
    assert builder.state is BuilderState.SENT
    with pytest.raises(StaleBuilderError):
        builder.create()


def test_update_from_user_seeds_email(client, server, sample_user_data):
    # Arrange
    server.add("GET", "users/kloubi", json=sample_user_data)
    updated = dict(sample_user_data, full_name="The Kloubi", is_admin=True, active=False)
    server.add("PATCH", "admin/users/kloubi", json=updated)
    kloubi = client.users.get_by_username("kloubi")

    # Act
    kloubi = (
        kloubi.update()
        .password("A_New_P@ssword_123 !")
        .full_name("The Kloubi")
        .is_active(False)
        .make_admin()
        .location("Aachen")
        .no_repository_creation_limit()
        .save()
    )

    # Assert: should PATCH with the seeded email plus every set field
    assert server.requests[-1].method == "PATCH"
    assert server.last_json() == {
        "email": "kloubi@example.com",
        "password": "A_New_P@ssword_123 !",
        "full_name": "The Kloubi",
        "active": False,
        "admin": True,
        "location": "Aachen",
        "max_repo_creation": -1,
    }
    assert kloubi.is_admin
    assert kloubi.client is client


def test_update_without_email_is_rejected(client, server):
    # Act & Assert: should require the email because the server does
    with pytest.raises(ValidationError) as exc_info:
        client.users.update("kloubi").full_name("X").save()
    assert exc_info.value.missing == ["email"]
    assert server.requests == []


def test_delete_user_via_back_reference(client, server, sample_user_data):
    # Arrange
    server.add("GET", "users/kloubi", json=sample_user_data)
    server.add("DELETE", "admin/users/kloubi", status=204)
    kloubi = client.users.get_by_username("kloubi")

    # Act
    result = kloubi.delete()

    # Assert: should issue one DELETE and return nothing
    assert result is None
    assert server.requests[-1].method == "DELETE"
    assert server.requests[-1].url.path == "/api/v1/admin/users/kloubi"


def test_usernames_are_path_escaped(client, server):
    # Act
    with pytest.raises(NotFoundError):
        client.users.get_by_username("a/b")

    # Assert: should not let the name break out of its path segment
    assert server.requests[0].url.raw_path == b"/api/v1/users/a%2Fb"


def test_update_from_user_with_hidden_email_requires_email(client, server, sample_user_data):
    # Arrange: the server hides the address from this viewer
    server.add("GET", "users/kloubi", json=dict(sample_user_data, email=""))
    server.add("PATCH", "admin/users/kloubi", json=sample_user_data)
    kloubi = client.users.get_by_username("kloubi")

    # Act & Assert: should treat the empty email as unset and send no PATCH
    with pytest.raises(ValidationError) as exc_info:
        kloubi.update().full_name("X").save()
    assert exc_info.value.missing == ["email"]
    assert [r.method for r in server.requests] == ["GET"]
