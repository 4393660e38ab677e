"""Tests for runtime settings."""

import pytest

from supertoml import Settings, SuperTomlError
from supertoml.settings import DEFAULT_MAX_DEPTH, DEFAULT_PLUGIN_ORDER


class TestSettingsDefaults:
    def test_defaults(self):
        settings = Settings()

        assert settings.plugin_order == ("before", "import", "reference", "templating", "after")
        assert settings.max_depth == DEFAULT_MAX_DEPTH
        assert settings.output_format == "toml"
        assert settings.log_level == "WARNING"

    def test_noop_not_in_default_pipeline(self):
        assert "noop" not in DEFAULT_PLUGIN_ORDER


class TestSettingsFromEnv:
    """Test environment variable overrides."""

    def test_no_overrides(self):
        assert Settings.from_env({}) == Settings()

    def test_plugin_order(self):
        settings = Settings.from_env({"SUPERTOML_PLUGINS": " before, templating ,,noop"})

        assert settings.plugin_order == ("before", "templating", "noop")

    def test_max_depth(self):
        assert Settings.from_env({"SUPERTOML_MAX_DEPTH": "8"}).max_depth == 8

    @pytest.mark.parametrize("value", ["0", "-1"])
    def test_max_depth_disabled(self, value):
        assert Settings.from_env({"SUPERTOML_MAX_DEPTH": value}).max_depth is None

    def test_invalid_max_depth(self):
        with pytest.raises(SuperTomlError, match="Invalid value for SUPERTOML_MAX_DEPTH"):
            Settings.from_env({"SUPERTOML_MAX_DEPTH": "deep"})

    def test_output_and_log_level_normalized(self):
        settings = Settings.from_env({"SUPERTOML_OUTPUT": "JSON", "SUPERTOML_LOG_LEVEL": "debug"})

        assert settings.output_format == "json"
        assert settings.log_level == "DEBUG"

    def test_custom_prefix(self):
        settings = Settings.from_env({"MYAPP_OUTPUT": "dotenv"}, prefix="MYAPP_")

        assert settings.output_format == "dotenv"

    def test_reads_process_environment(self, clear_env, env_vars):
        env_vars(SUPERTOML_OUTPUT="tfvars")

        assert Settings.from_env().output_format == "tfvars"
