"""Pytest configuration and fixtures for Gitea SDK tests."""

import json
from typing import Any, Optional

import httpx
import pytest

import gitea

API_PREFIX = "/api/v1/"


class MockGitea:
    """In-memory stand-in for a Gitea server, plugged in via ``transport_factory``."""

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.factory_calls = 0

    def add(self, method: str, path: str, status: int = 200, json: Any = None) -> None:
        self.routes[(method.upper(), path)] = (status, json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith(API_PREFIX):
            path = path[len(API_PREFIX):]
        status, body = self.routes.get(
            (request.method, path), (404, {"message": "route not found"})
        )
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    def transport_factory(self, client) -> httpx.MockTransport:
        self.factory_calls += 1
        return httpx.MockTransport(self.handler)

    def last_json(self) -> Optional[dict]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def server() -> MockGitea:
    return MockGitea()


@pytest.fixture
def client(server) -> gitea.Client:
    """Sync client with basic auth talking to the mock server."""
    return gitea.Client.with_basic_auth(
        "user", "pass", "gitea.test", 3000, transport_factory=server.transport_factory
    )


@pytest.fixture
def async_client(server) -> gitea.AsyncClient:
    return gitea.AsyncClient.with_token(
        "abc123", "gitea.test", 3000, transport_factory=server.transport_factory
    )


@pytest.fixture
def sample_user_data() -> dict:
    return {
        "id": 1,
        "login": "kloubi",
        "username": "kloubi",
        "full_name": "Houbi The Kloubi",
        "email": "kloubi@example.com",
        "avatar_url": "http://gitea.test:3000/avatars/1",
        "language": "en-US",
        "is_admin": False,
        "last_login": "2024-01-02T03:04:05Z",
        "created": "2023-05-06T07:08:09Z",
        "active": True,
        "location": "Aachen",
    }


@pytest.fixture
def sample_repo_data(sample_user_data) -> dict:
    return {
        "id": 42,
        "owner": sample_user_data,
        "name": "test1111",
        "full_name": "kloubi/test1111",
        "description": "afsddfa",
        "private": True,
        "empty": True,
        "clone_url": "http://gitea.test:3000/kloubi/test1111.git",
        "default_branch": "main",
        "created_at": "2024-01-02T03:04:05Z",
        "updated_at": "2024-01-02T03:04:05Z",
    }
