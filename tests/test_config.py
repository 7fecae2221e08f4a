from core.config import AppSettings, _parse_env_lines, write_user_env_vars


def test_missing_fields_lists_empty_connection_settings():
    settings = AppSettings(_env_file=None, api_url="https://api", username="  ")
    assert settings.missing_fields() == ["authorisation_url", "username", "password"]


def test_complete_settings_have_no_missing_fields(settings):
    assert settings.missing_fields() == []


def test_credentials_come_from_auth_settings(settings):
    creds = settings.credentials()
    assert creds.username == "demo"
    assert creds.base_url == "https://auth.csp.test"
    assert creds.password.get_secret_value() == "s3cret"


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("CSP_API_URL", "https://from-env")
    monkeypatch.setenv("CSP_HTTP_TIMEOUT_SECONDS", "5")
    settings = AppSettings(_env_file=None)
    assert settings.api_url == "https://from-env"
    assert settings.http_timeout_seconds == 5.0


def test_write_user_env_vars_merges_existing_values(tmp_path):
    env_path = tmp_path / "csp-demo" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# old\nCSP_USERNAME=old\nCSP_USER_AGENT='ua/1'\n", encoding="utf-8")

    written = write_user_env_vars({"CSP_USERNAME": "new", "CSP_API_URL": "https://api"}, env_path=env_path)

    assert written == env_path
    values = _parse_env_lines(env_path.read_text(encoding="utf-8"))
    assert values == {"CSP_API_URL": "https://api", "CSP_USERNAME": "new", "CSP_USER_AGENT": "ua/1"}


def test_env_file_values_are_loaded(tmp_path):
    env_path = tmp_path / ".env"
    write_user_env_vars({"CSP_AUTHORISATION_URL": "https://auth.file"}, env_path=env_path)
    settings = AppSettings(_env_file=str(env_path))
    assert settings.authorisation_url == "https://auth.file"
