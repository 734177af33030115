from app.config import DEFAULT_BASE_URL, load_settings


def test_defaults(monkeypatch):
    for name in ("API_BASE_URL", "DATABASE_NAME", "LOG_FILE", "REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("app.config.load_dotenv", lambda: None)

    settings = load_settings()

    assert settings.api_base_url == DEFAULT_BASE_URL
    assert settings.database_name == "user_console.db"
    assert settings.request_timeout == 10.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "https://staging.example.com/api/")
    monkeypatch.setenv("DATABASE_NAME", "/tmp/console.db")
    monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")

    settings = load_settings()

    assert settings.api_base_url == "https://staging.example.com/api"
    assert settings.database_name == "/tmp/console.db"
    assert settings.request_timeout == 2.5
