# ==============================================
# Tests for Configuration
# ==============================================

import pytest

from rule_inference import config as config_module
from rule_inference.config import AppConfig, InferenceConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    # Keep a developer's .env out of these tests
    monkeypatch.setattr(config_module, "load_dotenv", lambda **kwargs: False)
    for name in ("INFERENCE_SAMPLE_SIZE", "AI_PROVIDER", "AI_MODEL", "REQUESTS_PER_MINUTE",
                 "GOOGLE_API_KEY", "DATA_STORE", "MYSQL_HOST", "MONGO_PORT"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


class TestInferenceConfig:

    def test_defaults(self):
        config = InferenceConfig()
        assert config.sample_size == 50
        assert config.ai_provider == "gemini"
        assert config.requests_per_minute is None

    def test_rejects_non_positive_sample_size(self):
        with pytest.raises(ValueError):
            InferenceConfig(sample_size=0)

    def test_rejects_non_positive_rpm(self):
        with pytest.raises(ValueError):
            InferenceConfig(requests_per_minute=0)

    def test_rejects_unknown_data_store(self):
        with pytest.raises(ValueError):
            AppConfig(data_store="sqlite")


class TestGetConfig:

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("INFERENCE_SAMPLE_SIZE", "25")
        monkeypatch.setenv("REQUESTS_PER_MINUTE", "30")
        monkeypatch.setenv("AI_MODEL", "gemini-1.5-pro")
        monkeypatch.setenv("DATA_STORE", "MongoDB")
        monkeypatch.setenv("MONGO_PORT", "27018")

        config = get_config()
        assert config.inference.sample_size == 25
        assert config.inference.requests_per_minute == 30
        assert config.inference.ai_model == "gemini-1.5-pro"
        assert config.data_store == "mongodb"
        assert config.mongo.port == 27018

    def test_blank_rpm_means_default(self, monkeypatch):
        monkeypatch.setenv("REQUESTS_PER_MINUTE", "")
        assert get_config().inference.requests_per_minute is None

    def test_singleton(self):
        assert get_config() is get_config()

    def test_reset(self, monkeypatch):
        first = get_config()
        reset_config()
        monkeypatch.setenv("MYSQL_HOST", "db.internal")
        second = get_config()
        assert first is not second
        assert second.mysql.host == "db.internal"
