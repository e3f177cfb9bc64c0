from unittest.mock import MagicMock

import pytest
import requests

from exam_bot.config import BotConfig
from exam_bot.errors import NotificationError
from exam_bot.github import GitHubClient


def _client(response=None, exc=None):
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    if exc is not None:
        session.request.side_effect = exc
    else:
        session.request.return_value = response
    client = GitHubClient(
        "secret", "octo/exams", api_url="https://api.github.com/", timeout=7.5, session=session
    )
    return client, session


def _response(status=200, payload=None):
    response = MagicMock()
    response.ok = 200 <= status < 300
    response.status_code = status
    response.text = "boom" if status >= 400 else ""
    response.json.return_value = payload if payload is not None else {}
    return response


def test_headers_carry_token_and_api_version():
    _, session = _client(_response())
    assert session.headers["Authorization"] == "Bearer secret"
    assert session.headers["Accept"] == "application/vnd.github+json"
    assert session.headers["X-GitHub-Api-Version"] == "2022-11-28"


def test_create_comment_posts_body():
    client, session = _client(_response(201, {"id": 1}))
    assert client.create_comment(12, "Failed") == {"id": 1}
    session.request.assert_called_once_with(
        "POST",
        "https://api.github.com/repos/octo/exams/issues/12/comments",
        json={"body": "Failed"},
        timeout=7.5,
    )


def test_close_issue_patches_state():
    client, session = _client(_response(200, {"state": "closed"}))
    client.close_issue(12)
    session.request.assert_called_once_with(
        "PATCH",
        "https://api.github.com/repos/octo/exams/issues/12",
        json={"state": "closed"},
        timeout=7.5,
    )


def test_error_status_raises():
    client, _ = _client(_response(403))
    with pytest.raises(NotificationError, match="403"):
        client.close_issue(12)


def test_transport_error_raises():
    client, _ = _client(exc=requests.ConnectionError("unreachable"))
    with pytest.raises(NotificationError, match="unreachable"):
        client.create_comment(12, "x")


def test_from_config():
    config = BotConfig(token="t", repository="o/r", api_url="https://ghe.local/api/v3", http_timeout=3)
    client = GitHubClient.from_config(config)
    assert client.repository == "o/r"
    assert client.api_url == "https://ghe.local/api/v3"
    assert client.timeout == 3
    assert client.session.headers["Authorization"] == "Bearer t"
