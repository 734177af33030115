import logging
from app.api import ApiClient
from app.config import load_settings
from app.console import UserConsoleApp
from app.session import AuthSession
from storage.token_store import TokenStore


def main():
    settings = load_settings()

    logging.basicConfig(
        filename=settings.log_file,
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    # Creates the session table on first run
    token_store = TokenStore(settings.database_name)
    token_store.init()

    api = ApiClient(settings.api_base_url, token_store, timeout=settings.request_timeout)
    session = AuthSession(api, token_store)
    logging.info(f"Starting user console against {settings.api_base_url}")

    app = UserConsoleApp(session)
    app.run()


if __name__ == "__main__":
    main()
