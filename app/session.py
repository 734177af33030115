import logging
from app.api import ApiClient
from storage.token_store import TokenStore


class AuthError(Exception):
    """Raised when the login endpoint answers without a token."""


class AuthSession:
    def __init__(self, api: ApiClient, token_store: TokenStore):
        self.api = api
        self.token_store = token_store

    def is_authenticated(self) -> bool:
        # Presence check only, the token is never validated locally
        return bool(self.token_store.get_token())

    async def login(self, email: str, password: str) -> None:
        logging.info(f"Login attempt for {email}")
        data = await self.api.login(email, password)
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            logging.error(f"Login response for {email} did not include a token")
            raise AuthError("Login response did not include a token")
        self.token_store.set_token(token)
        logging.info(f"Login successful for {email}")

    def logout(self) -> None:
        self.token_store.clear_token()
        logging.info("Logged out")
