import pytest

from .config import DEFAULT_EMBEDDING_MODEL, MissingSettingError, Settings

REQUIRED = {
    "OPENAI_API_KEY": "sk-test",
    "SUPABASE_URL": "https://example.supabase.co",
    "SUPABASE_ANON_KEY": "anon-key",
}


def test_from_env_reads_required_values():
    settings = Settings.from_env(REQUIRED)
    assert settings.openai_api_key == "sk-test"
    assert settings.supabase_url == "https://example.supabase.co"
    assert settings.supabase_anon_key == "anon-key"


def test_defaults():
    settings = Settings.from_env(REQUIRED)
    assert settings.embedding_model == DEFAULT_EMBEDDING_MODEL
    assert settings.log_level == "INFO"


def test_optional_overrides():
    settings = Settings.from_env({
        **REQUIRED,
        "OPENAI_EMBEDDING_MODEL": "text-embedding-3-small",
        "LOG_LEVEL": "debug",
    })
    assert settings.embedding_model == "text-embedding-3-small"
    assert settings.log_level == "debug"


@pytest.mark.parametrize("missing", sorted(REQUIRED))
def test_missing_required_variable_raises(missing):
    env = {k: v for k, v in REQUIRED.items() if k != missing}
    with pytest.raises(MissingSettingError, match=missing) as excinfo:
        Settings.from_env(env)
    assert excinfo.value.name == missing


def test_empty_required_variable_raises():
    with pytest.raises(MissingSettingError, match="SUPABASE_URL"):
        Settings.from_env({**REQUIRED, "SUPABASE_URL": ""})


def test_reads_process_environment(monkeypatch):
    for key, value in REQUIRED.items():
        monkeypatch.setenv(key, value)
    assert Settings.from_env().supabase_anon_key == "anon-key"
