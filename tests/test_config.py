"""Tests for configuration defaults and validation."""

import pytest

from signalign import config
from signalign.exceptions import ConfigError


class TestConfig:
    def test_default_weights(self):
        assert config.MISSING_TARGET_PENALTY == 10
        assert config.MISSING_SOURCE_PENALTY == 5
        assert config.SUBSTITUTION_PENALTY == 1

    def test_passes_disabled_by_default(self):
        assert config.COMPACT_RUNS is False
        assert config.PROPAGATE_MATCHES is False

    def test_validate_config_accepts_defaults(self):
        config.validate_config()

    def test_negative_weight_rejected(self, monkeypatch):
        monkeypatch.setattr(config, "MISSING_SOURCE_PENALTY", -5)
        with pytest.raises(ConfigError, match="MISSING_SOURCE_PENALTY"):
            config.validate_config()

    def test_unknown_differ_rejected(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_DIFFER", "patience")
        with pytest.raises(ConfigError, match="Unknown differ"):
            config.validate_config()

    def test_worker_count_rejected(self, monkeypatch):
        monkeypatch.setattr(config, "MAX_WORKERS", 0)
        with pytest.raises(ConfigError, match="MAX_WORKERS"):
            config.validate_config()


class TestEnvFlag:
    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_truthy(self, monkeypatch, value):
        monkeypatch.setenv("SIGNALIGN_TEST_FLAG", value)
        assert config._env_flag("SIGNALIGN_TEST_FLAG", False) is True

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_falsy(self, monkeypatch, value):
        monkeypatch.setenv("SIGNALIGN_TEST_FLAG", value)
        assert config._env_flag("SIGNALIGN_TEST_FLAG", True) is False

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("SIGNALIGN_TEST_FLAG", raising=False)
        assert config._env_flag("SIGNALIGN_TEST_FLAG", True) is True
