import json

import httpx
import pytest

from user import UserForm


@pytest.mark.asyncio
async def test_requests_carry_bearer_token_when_stored(api, server, token_store):
    token_store.set_token("secret-token")

    await api.get_users(1)

    assert server.requests[-1].headers["Authorization"] == "Bearer secret-token"


@pytest.mark.asyncio
async def test_requests_have_no_authorization_without_token(api, server):
    await api.get_users(1)

    assert "Authorization" not in server.requests[-1].headers


@pytest.mark.asyncio
async def test_token_is_read_on_every_request(api, server, token_store):
    await api.get_users(1)
    token_store.set_token("late-token")
    await api.get_users(2)

    assert "Authorization" not in server.requests[0].headers
    assert server.requests[1].headers["Authorization"] == "Bearer late-token"


@pytest.mark.asyncio
async def test_get_users_parses_page(api, server):
    page = await api.get_users(2)

    assert server.requests[-1].url.params["page"] == "2"
    assert page.page == 2
    assert page.total_pages == 2
    assert [u.id for u in page.users] == [7, 8, 9, 10, 11, 12]
    assert page.users[0].first_name == "Michael"


@pytest.mark.asyncio
async def test_update_sends_form_as_json(api, server):
    await api.update_user(3, UserForm(first_name="Emma", last_name="Stone", email="emma@example.com"))

    request = server.requests[-1]
    assert request.method == "PUT"
    assert request.url.path == "/api/users/3"
    assert json.loads(request.content) == {
        "first_name": "Emma",
        "last_name": "Stone",
        "email": "emma@example.com",
    }


@pytest.mark.asyncio
async def test_delete_returns_none_on_204(api, server):
    assert await api.delete_user(3) is None
    assert server.requests[-1].method == "DELETE"


@pytest.mark.asyncio
async def test_non_2xx_is_raised_unchanged(api, server):
    server.fail = True

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await api.get_users(1)

    assert exc_info.value.response.status_code == 500
    assert len(server.requests) == 1


@pytest.mark.asyncio
async def test_transport_errors_propagate(token_store):
    from app.api import ApiClient

    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    api = ApiClient("https://api.test/api", token_store, transport=httpx.MockTransport(refuse))

    with pytest.raises(httpx.ConnectError):
        await api.login("a@b.co", "pw")

    await api.aclose()


@pytest.mark.asyncio
async def test_non_json_success_body_is_a_decoding_error(api, server):
    server.replies[("GET", "/users")] = httpx.Response(200, text="<html>gateway</html>")

    with pytest.raises(httpx.DecodingError):
        await api.get_users(1)


@pytest.mark.asyncio
async def test_user_without_id_is_a_decoding_error(api, server):
    server.replies[("GET", "/users")] = httpx.Response(200, json={
        "page": 1,
        "total_pages": 1,
        "data": [{"email": "no.id@reqres.in", "first_name": "No", "last_name": "Id"}],
    })

    with pytest.raises(httpx.DecodingError):
        await api.get_users(1)
