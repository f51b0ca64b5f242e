import pytest

import crowdin_client
from crowdin_client import CrowdinClient, CrowdinConfig, MissingApiKeyError
from crowdin_client.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, get_default_config


def test_defaults():
    config = CrowdinConfig()
    assert config.api_key is None
    assert config.base_url == DEFAULT_BASE_URL == "https://api.crowdin.com"
    assert config.timeout == DEFAULT_TIMEOUT


def test_api_url_does_not_double_slashes():
    assert CrowdinConfig(base_url="https://x.test/").api_url("supported-languages") == (
        "https://x.test/api/supported-languages"
    )
    assert CrowdinConfig(base_url="https://x.test").api_url("project/p/info") == (
        "https://x.test/api/project/p/info"
    )


def test_validate_key():
    with pytest.raises(MissingApiKeyError, match="Please specify Crowdin API key."):
        CrowdinConfig().validate_key()
    CrowdinConfig(api_key="abc").validate_key()


def test_from_env(monkeypatch):
    monkeypatch.setenv("CROWDIN_API_KEY", "envkey")
    monkeypatch.setenv("CROWDIN_BASE_URL", "https://crowdin.example")
    monkeypatch.setenv("CROWDIN_TIMEOUT", "12.5")
    config = CrowdinConfig.from_env()
    assert config.api_key == "envkey"
    assert config.base_url == "https://crowdin.example"
    assert config.timeout == 12.5


def test_from_env_without_variables():
    config = CrowdinConfig.from_env()
    assert config.api_key is None
    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout == DEFAULT_TIMEOUT


def test_from_env_rejects_bad_timeout(monkeypatch):
    monkeypatch.setenv("CROWDIN_TIMEOUT", "soon")
    with pytest.raises(ValueError, match="CROWDIN_TIMEOUT"):
        CrowdinConfig.from_env()


def test_repr_hides_key():
    assert "secret" not in repr(CrowdinConfig(api_key="secret"))


def test_set_key_and_base_path_update_default_config():
    crowdin_client.set_key("global")
    crowdin_client.set_base_path("https://other.test")
    config = get_default_config()
    assert config.api_key == "global"
    assert config.base_url == "https://other.test"
    assert get_default_config() is config


def test_client_reads_default_config_at_call_time(session):
    client = CrowdinClient(session=session)
    with pytest.raises(MissingApiKeyError):
        client.supported_languages()
    assert session.calls == []

    crowdin_client.set_key("late")
    client.supported_languages()
    assert session.last["params"]["key"] == "late"
    assert session.last["url"] == "https://api.crowdin.com/api/supported-languages"
