from pathlib import Path

import pytest

from exam_bot.config import DEFAULT_API_URL, BotConfig
from exam_bot.errors import ConfigError


def test_from_env_defaults():
    config = BotConfig.from_env({"GITHUB_TOKEN": "abc", "GITHUB_REPOSITORY": "octo/exams"})
    assert config.token == "abc"
    assert config.repository == "octo/exams"
    assert config.api_url == DEFAULT_API_URL
    assert config.collections_dir == Path(".")
    assert config.approved_label == "approved"
    assert config.http_timeout == 30.0


def test_from_env_overrides():
    config = BotConfig.from_env(
        {
            "GITHUB_TOKEN": "abc",
            "GITHUB_REPOSITORY": "octo/exams",
            "GITHUB_API_URL": "https://ghe.example.com/api/v3/",
            "EXAM_BOT_COLLECTIONS_DIR": "exams",
            "EXAM_BOT_APPROVED_LABEL": "ship-it",
            "EXAM_BOT_GIT_USER": "quiz-bot",
            "EXAM_BOT_GIT_EMAIL": "quiz@example.com",
            "EXAM_BOT_HTTP_TIMEOUT": "5",
        }
    )
    assert config.api_url == "https://ghe.example.com/api/v3"
    assert config.collections_dir == Path("exams")
    assert config.approved_label == "ship-it"
    assert (config.git_user_name, config.git_user_email) == ("quiz-bot", "quiz@example.com")
    assert config.http_timeout == 5.0


def test_missing_values_are_listed_together():
    with pytest.raises(ConfigError) as excinfo:
        BotConfig.from_env({"GITHUB_TOKEN": "  "})
    assert "GITHUB_TOKEN" in str(excinfo.value)
    assert "GITHUB_REPOSITORY" in str(excinfo.value)


def test_reads_process_environment_by_default(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "from-env")
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo/exams")
    assert BotConfig.from_env().token == "from-env"


@pytest.mark.parametrize("repository", ["exams", "a/b/c"])
def test_repository_must_be_owner_slash_name(repository):
    with pytest.raises(ConfigError, match="owner/name"):
        BotConfig.from_env({"GITHUB_TOKEN": "t", "GITHUB_REPOSITORY": repository})


@pytest.mark.parametrize("timeout", ["soon", "0", "-1"])
def test_invalid_timeout(timeout):
    with pytest.raises(ConfigError, match="EXAM_BOT_HTTP_TIMEOUT"):
        BotConfig.from_env(
            {"GITHUB_TOKEN": "t", "GITHUB_REPOSITORY": "o/r", "EXAM_BOT_HTTP_TIMEOUT": timeout}
        )
