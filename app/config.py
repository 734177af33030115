import os
from dataclasses import dataclass
from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://reqres.in/api"


@dataclass
class Settings:
    api_base_url: str = DEFAULT_BASE_URL
    database_name: str = "user_console.db"
    log_file: str = "app.log"
    request_timeout: float = 10.0


def load_settings() -> Settings:
    """Read settings from the environment, after loading any .env file."""
    load_dotenv()
    return Settings(
        api_base_url=os.getenv("API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        database_name=os.getenv("DATABASE_NAME", "user_console.db"),
        log_file=os.getenv("LOG_FILE", "app.log"),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", "10")),
    )
