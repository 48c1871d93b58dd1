"""Unit tests for configuration loading, validation and logging setup."""

import json
import logging

import pytest
from pydantic import ValidationError

from bankshot.config import (
    ApplicationConfig,
    Config,
    ConfigurationError,
    LoggingSettings,
    TableSettings,
    load_environment,
    merge_dicts,
    setup_logging,
)
from bankshot.core.analysis.bank_shot import ShotSolver


class TestSchemas:
    """Test pydantic settings models."""

    def test_defaults(self):
        config = ApplicationConfig()
        assert config.table.width == 1118.0
        assert config.table.length == 2235.0
        assert config.table.ball_diameter == 57.15
        assert config.table.rail_tolerance == 50.0
        assert config.table.on_table_margin is None
        assert config.solver.default_max_cushions == 2
        assert config.solver.max_display_shots == 8
        assert config.logging.level == "INFO"
        assert config.api.port == 8000

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            ApplicationConfig.model_validate({"table": {"colour": "green"}})

    def test_ball_must_fit(self):
        with pytest.raises(ValidationError):
            TableSettings(width=50.0)

    def test_cushion_default_range(self):
        with pytest.raises(ValidationError):
            ApplicationConfig.model_validate({"solver": {"default_max_cushions": 3}})

    def test_validate_assignment(self):
        settings = TableSettings()
        with pytest.raises(ValidationError):
            settings.length = -1.0


class TestConfigManager:
    """Test the Config singleton."""

    def test_singleton(self):
        assert Config() is Config()

    def test_missing_file_uses_defaults(self, missing_config):
        config = Config.set_config_file(missing_config)
        assert config.get_all() == {}
        assert config.get("table.width", 1118.0) == 1118.0
        assert config.settings() == ApplicationConfig()

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"table": {"width": 1270.0, "length": 2540.0}}))

        config = Config.set_config_file(path)
        assert config.get("table.width") == 1270.0
        assert config.get("table.missing") is None
        assert config.settings().table.length == 2540.0

    def test_environment_override(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"table": {"width": 1270.0}, "api": {"port": 9000}}))
        monkeypatch.setenv("BANKSHOT_TABLE__WIDTH", "1300")
        monkeypatch.setenv("BANKSHOT_SOLVER__DEFAULT_MAX_CUSHIONS", "1")

        settings = Config.set_config_file(path).settings()
        assert settings.table.width == 1300.0
        assert settings.solver.default_max_cushions == 1
        assert settings.api.port == 9000

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            Config.set_config_file(path)

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ConfigurationError):
            Config.set_config_file(path)

    def test_invalid_settings(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"solver": {"max_display_shots": 0}}))
        config = Config.set_config_file(path)
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            config.settings()

    def test_non_finite_setting_rejected(self, missing_config, monkeypatch):
        monkeypatch.setenv("BANKSHOT_TABLE__WIDTH", "Infinity")
        config = Config.set_config_file(missing_config)
        with pytest.raises(ConfigurationError):
            config.settings()

    def test_set_save_reload(self, missing_config):
        config = Config.set_config_file(missing_config)
        config.set("solver.max_display_shots", 4)
        assert config.get("solver.max_display_shots") == 4
        config.save()

        assert json.loads(missing_config.read_text()) == {
            "solver": {"max_display_shots": 4}
        }
        config.set("solver.max_display_shots", 12)
        config.reload()
        assert config.get("solver.max_display_shots") == 4

    def test_get_all_is_a_copy(self, missing_config):
        config = Config.set_config_file(missing_config)
        config.set("table.width", 1200.0)
        data = config.get_all()
        data["table"]["width"] = 1.0
        assert config.get("table.width") == 1200.0

    def test_solver_from_config(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"table": {"width": 1270.0, "length": 2540.0}}))
        solver = ShotSolver.from_config(Config.set_config_file(path))
        assert solver.table.width == 1270.0
        assert solver.table.pocket_position("top_right") == (1270.0, 2540.0)


class TestEnvironment:
    """Test environment variable parsing."""

    def test_nested_keys_and_json_values(self):
        environ = {
            "BANKSHOT_TABLE__WIDTH": "1270",
            "BANKSHOT_API__RELOAD": "true",
            "BANKSHOT_API__HOST": "127.0.0.1",
            "BANKSHOT_LOGGING__LOG_MODULES": '{"bankshot.core": "DEBUG"}',
            "OTHER_VARIABLE": "ignored",
        }
        assert load_environment(environ) == {
            "table": {"width": 1270},
            "api": {"reload": True, "host": "127.0.0.1"},
            "logging": {"log_modules": {"bankshot.core": "DEBUG"}},
        }

    def test_malformed_names_are_skipped(self):
        assert load_environment({"BANKSHOT_TABLE__": "1", "BANKSHOT___X": "2"}) == {}

    def test_merge_dicts(self):
        base = {"table": {"width": 1.0, "length": 2.0}, "api": {"port": 1}}
        merged = merge_dicts(base, {"table": {"width": 3.0}})
        assert merged == {"table": {"width": 3.0, "length": 2.0}, "api": {"port": 1}}
        assert base["table"]["width"] == 1.0


class TestLoggingSetup:
    """Test logging configuration."""

    def test_levels_applied(self):
        settings = LoggingSettings(level="WARNING", log_modules={"bankshot.core": "DEBUG"})
        setup_logging(settings)
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("bankshot.core").level == logging.DEBUG
        logging.getLogger("bankshot.core").setLevel(logging.NOTSET)

    def test_defaults(self):
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_invalid_level_rejected(self):
        with pytest.raises(ValidationError):
            LoggingSettings(level="LOUD")
