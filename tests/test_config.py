import os
import sys
import unittest

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from config import YamlConfig
from settings_schema import SettingsSchema, load_settings, validate_settings


class YamlConfigTest(unittest.TestCase):
    def setUp(self) -> None:
        self.path = "test_settings.yaml"
        if os.path.exists(self.path):
            os.remove(self.path)
        for key in YamlConfig.ENV_OVERRIDES:
            os.environ.pop(key, None)

    def tearDown(self) -> None:
        if os.path.exists(self.path):
            os.remove(self.path)
        for key in YamlConfig.ENV_OVERRIDES:
            os.environ.pop(key, None)

    def test_missing_file_loads_empty(self) -> None:
        self.assertEqual(YamlConfig(self.path).load(), {})

    def test_save_and_load(self) -> None:
        cfg = YamlConfig(self.path)
        cfg.save({"db_path": "other.db", "port": 9000})
        self.assertEqual(cfg.load(), {"db_path": "other.db", "port": 9000})

    def test_environment_overrides_file(self) -> None:
        YamlConfig(self.path).save({"db_path": "file.db"})
        os.environ["WORKOUTS_DB"] = "env.db"
        os.environ["WORKOUTS_PORT"] = "9090"
        settings = load_settings(self.path)
        self.assertEqual(settings.db_path, "env.db")
        self.assertEqual(settings.port, 9090)

    def test_explicit_overrides_win(self) -> None:
        os.environ["WORKOUTS_DB"] = "env.db"
        settings = load_settings(self.path, db_path="cli.db", port=None)
        self.assertEqual(settings.db_path, "cli.db")
        self.assertEqual(settings.port, 8080)

    def test_non_mapping_rejected(self) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("- just\n- a list\n")
        with self.assertRaises(ValueError):
            YamlConfig(self.path).load()


def test_defaults():
    settings = SettingsSchema()
    assert settings.db_path == "workouts.db"
    assert settings.port == 8080
    assert os.path.isdir(settings.templates_dir)
    assert os.path.isdir(settings.static_dir)


def test_validate_settings_rejects_bad_port():
    with pytest.raises(ValueError):
        validate_settings({"port": "not-a-port"})
