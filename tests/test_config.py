"""Tests for configuration loading."""

import pytest

from tododash.config import DEFAULT_API_BASE, Config, load_config


@pytest.fixture
def conf_file(tmp_path, monkeypatch):
    monkeypatch.delenv("TODOIST_API_TOKEN", raising=False)
    return tmp_path / "tododash.conf"


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, conf_file):
        assert load_config(conf_file) == Config()

    def test_parses_keys(self, conf_file):
        conf_file.write_text(
            "\n".join(
                [
                    "# comment",
                    'TODOIST_API_TOKEN="abc" # inline',
                    "GOAL_FILTER = '@goal & p1'",
                    "WORK_FILTER=@task # work only",
                    "REFRESH_MINUTES=5",
                    "API_BASE=http://localhost:9000/",
                    "not a setting",
                ]
            )
        )
        config = load_config(conf_file)

        assert config.todoist_api_token == "abc"
        assert config.goal_filter == "@goal & p1"
        assert config.work_filter == "@task"
        assert config.refresh_minutes == 5
        assert config.api_base == "http://localhost:9000"

    def test_invalid_number_keeps_default(self, conf_file):
        conf_file.write_text("REFRESH_MINUTES=soon\n")
        assert load_config(conf_file).refresh_minutes == Config().refresh_minutes

    def test_env_token_overrides_file(self, conf_file, monkeypatch):
        conf_file.write_text("TODOIST_API_TOKEN=from-file\n")
        monkeypatch.setenv("TODOIST_API_TOKEN", "from-env")
        assert load_config(conf_file).todoist_api_token == "from-env"

    def test_default_api_base(self, conf_file):
        assert load_config(conf_file).api_base == DEFAULT_API_BASE
