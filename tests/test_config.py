"""Tests for StepwiseConfig and its loading."""
import threading

import pytest
import yaml

from stepwise import (StepwiseConfig, get_current_config, load_config_from_file,
                      set_current_config)
from stepwise.core.config import get_default_config


class TestStepwiseConfig:

    def test_defaults(self):
        config = StepwiseConfig()
        assert config.verify_distance_type is True
        assert config.dispatch_log_level == "DEBUG"

    def test_log_level_normalised(self):
        assert StepwiseConfig(dispatch_log_level="info").dispatch_log_level == "INFO"
        assert StepwiseConfig(dispatch_log_level="warning").dispatch_log_levelno == 30

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="Invalid dispatch_log_level"):
            StepwiseConfig(dispatch_log_level="LOUD")

    def test_immutable(self):
        with pytest.raises(AttributeError):
            StepwiseConfig().verify_distance_type = False


class TestCurrentConfig:

    def test_falls_back_to_default(self):
        assert get_current_config() is get_default_config()

    def test_set_and_reset(self):
        custom = StepwiseConfig(verify_distance_type=False)
        set_current_config(custom)
        assert get_current_config() is custom
        set_current_config(None)
        assert get_current_config() is get_default_config()

    def test_thread_local(self):
        set_current_config(StepwiseConfig(dispatch_log_level="ERROR"))
        seen = []
        worker = threading.Thread(target=lambda: seen.append(get_current_config()))
        worker.start()
        worker.join()
        assert seen == [get_default_config()]
        assert get_current_config().dispatch_log_level == "ERROR"


class TestLoadConfigFromFile:

    def test_overrides_defaults(self, tmp_path):
        path = tmp_path / "stepwise.yaml"
        path.write_text(yaml.dump({'dispatch_log_level': 'info'}))
        config = load_config_from_file(path)
        assert config.dispatch_log_level == "INFO"
        assert config.verify_distance_type is True

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config_from_file(str(path)) == StepwiseConfig()

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config_from_file(path)

    def test_unknown_fields(self, tmp_path):
        path = tmp_path / "extra.yaml"
        path.write_text("verify_distance_type: false\nmax_steps: 10\n")
        with pytest.raises(ValueError, match="Unknown config field"):
            load_config_from_file(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("key: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_config_from_file(path)
