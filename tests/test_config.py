"""Tests for environment-driven settings."""

from usergraph.config import Settings


def test_defaults():
    settings = Settings()

    assert settings.api_host == "127.0.0.1"
    assert settings.api_port == 3000
    assert settings.graphql_path == "/graphql"
    assert (settings.seed_user_id, settings.seed_user_name, settings.seed_user_email) == (
        "1",
        "name",
        "name@example.com",
    )


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("USERGRAPH_API_PORT", "4000")
    monkeypatch.setenv("USERGRAPH_DEBUG", "true")

    settings = Settings()

    assert settings.api_port == 4000
    assert settings.debug is True


def test_settings_config():
    assert Settings.model_config["env_prefix"] == "USERGRAPH_"
    assert Settings.model_config["env_file"] == ".env"
    assert Settings.model_config["case_sensitive"] is False


def test_lowercase_environment_names(monkeypatch):
    monkeypatch.setenv("usergraph_seed_user_name", "ada")

    assert Settings().seed_user_name == "ada"
