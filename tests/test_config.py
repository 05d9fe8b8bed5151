"""Tests for configuration loading."""

from pathlib import Path

import pytest

from tasklist.config import Config, load_config


@pytest.fixture(autouse=True)
def no_env_override(monkeypatch):
    monkeypatch.delenv("TASKLIST_FILE", raising=False)


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        config = load_config(tmp_path / "missing.conf")
        assert config == Config()
        assert config.tasks_path == Path("tasklist.json")
        assert config.timezone == "UTC"

    def test_reads_keys(self, tmp_path):
        conf = tmp_path / "tasklist.conf"
        conf.write_text(
            "# tasklist settings\n"
            "TASKS_FILE = /data/tasks.json\n"
            "timezone = 'Europe/Berlin'\n"
        )
        config = load_config(conf)
        assert config.tasks_file == "/data/tasks.json"
        assert config.timezone == "Europe/Berlin"

    def test_quoted_value_and_inline_comment(self, tmp_path):
        conf = tmp_path / "tasklist.conf"
        conf.write_text('TASKS_FILE = "my tasks.json" # with a space\n')
        assert load_config(conf).tasks_file == "my tasks.json"

    def test_unquoted_inline_comment(self, tmp_path):
        conf = tmp_path / "tasklist.conf"
        conf.write_text("TASKS_FILE = tasks.json # comment\n")
        assert load_config(conf).tasks_file == "tasks.json"

    def test_ignores_junk_lines(self, tmp_path):
        conf = tmp_path / "tasklist.conf"
        conf.write_text("not a setting\nUNKNOWN_KEY = 1\n\n")
        assert load_config(conf) == Config()

    def test_unknown_timezone_keeps_default(self, tmp_path):
        conf = tmp_path / "tasklist.conf"
        conf.write_text("TIMEZONE = Mars/Olympus\n")
        assert load_config(conf).timezone == "UTC"

    def test_env_overrides_tasks_file(self, tmp_path, monkeypatch):
        conf = tmp_path / "tasklist.conf"
        conf.write_text("TASKS_FILE = from-conf.json\n")
        monkeypatch.setenv("TASKLIST_FILE", "from-env.json")
        assert load_config(conf).tasks_file == "from-env.json"

    def test_expands_user_path(self):
        config = Config(tasks_file="~/tasks.json")
        assert "~" not in str(config.tasks_path)
        assert config.tasks_path == Path.home() / "tasks.json"
