import json

import httpx
import pytest

from app.api import ApiClient
from app.models import UserDirectory
from app.session import AuthSession
from storage.token_store import TokenStore

BASE_URL = "https://api.test/api"
VALID_EMAIL = "eve.holt@reqres.in"
VALID_PASSWORD = "cityslicka"
TOKEN = "QpwL5tke4Pnpja7X4"


def make_user(user_id, first_name, last_name):
    return {
        "id": user_id,
        "email": f"{first_name.lower()}.{last_name.lower()}@reqres.in",
        "first_name": first_name,
        "last_name": last_name,
        "avatar": f"https://reqres.in/img/faces/{user_id}-image.jpg",
    }


PAGES = {
    1: [
        make_user(1, "George", "Bluth"),
        make_user(2, "Janet", "Weaver"),
        make_user(3, "Emma", "Wong"),
        make_user(4, "Eve", "Holt"),
        make_user(5, "Charles", "Morris"),
        make_user(6, "Tracey", "Ramos"),
    ],
    2: [
        make_user(7, "Michael", "Lawson"),
        make_user(8, "Lindsay", "Ferguson"),
        make_user(9, "Tobias", "Funke"),
        make_user(10, "Byron", "Fields"),
        make_user(11, "George", "Edwards"),
        make_user(12, "Rachel", "Howell"),
    ],
}


class FakeDirectoryServer:
    """In-process stand-in for the remote API, served through httpx.MockTransport."""

    def __init__(self):
        self.requests = []
        self.fail = False
        # (method, path) -> response, served instead of the normal reply
        self.replies = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail:
            return httpx.Response(500, json={"error": "server error"})

        path = request.url.path.removeprefix("/api")
        if (request.method, path) in self.replies:
            return self.replies[(request.method, path)]
        body = json.loads(request.content) if request.content else {}

        if request.method == "POST" and path == "/login":
            if body.get("email") == VALID_EMAIL and body.get("password") == VALID_PASSWORD:
                return httpx.Response(200, json={"token": TOKEN})
            return httpx.Response(400, json={"error": "user not found"})

        if request.method == "GET" and path == "/users":
            page = int(request.url.params.get("page", 1))
            return httpx.Response(200, json={
                "page": page,
                "per_page": 6,
                "total": 12,
                "total_pages": len(PAGES),
                "data": PAGES.get(page, []),
            })

        if request.method == "POST" and path == "/users":
            return httpx.Response(201, json={**body, "id": "742", "createdAt": "2024-01-01T00:00:00.000Z"})

        if path.startswith("/users/"):
            if request.method == "PUT":
                return httpx.Response(200, json={**body, "updatedAt": "2024-01-01T00:00:00.000Z"})
            if request.method == "DELETE":
                return httpx.Response(204)

        return httpx.Response(404, json={})

    def calls(self, method: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method]


@pytest.fixture
def token_store(tmp_path):
    store = TokenStore(str(tmp_path / "session.db"))
    store.init()
    return store


@pytest.fixture
def server():
    return FakeDirectoryServer()


@pytest.fixture
def api(server, token_store):
    return ApiClient(BASE_URL, token_store, transport=httpx.MockTransport(server))


@pytest.fixture
def session(api, token_store):
    return AuthSession(api, token_store)


@pytest.fixture
def directory(api):
    return UserDirectory(api)
