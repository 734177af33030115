import logging
import httpx
from storage.token_store import TokenStore
from user import UserForm, UserPage


class ApiClient:
    """Async client for the remote user directory API.

    The bearer token is read from the token store on every request, so a
    login or logout takes effect on the next call without rebuilding the
    client. Transport errors and non-2xx responses are raised unchanged.
    """

    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.token_store = token_store
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
            event_hooks={"request": [self._attach_token]},
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _attach_token(self, request: httpx.Request) -> None:
        token = self.token_store.get_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    async def _request(self, method: str, url: str, **kwargs) -> dict | None:
        response = await self._client.request(method, url, **kwargs)
        logging.debug(f"{method} {url} -> {response.status_code}")
        response.raise_for_status()
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            # A 2xx body that is not JSON is reported like any other failed call
            raise httpx.DecodingError(f"Invalid JSON from {method} {url}: {e}", request=response.request) from e

    async def login(self, email: str, password: str) -> dict:
        return await self._request("POST", "/login", json={"email": email, "password": password})

    async def get_users(self, page: int = 1) -> UserPage:
        data = await self._request("GET", "/users", params={"page": page})
        try:
            return UserPage.from_api(data or {}, page)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise httpx.DecodingError(f"Unexpected user page from GET /users: {e!r}") from e

    async def create_user(self, form: UserForm) -> dict:
        return await self._request("POST", "/users", json=form.to_payload())

    async def update_user(self, user_id: int, form: UserForm) -> dict:
        return await self._request("PUT", f"/users/{user_id}", json=form.to_payload())

    async def delete_user(self, user_id: int) -> None:
        await self._request("DELETE", f"/users/{user_id}")
