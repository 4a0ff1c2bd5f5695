"""Tests for the shared JSON POST helper."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from travelchat.backend.errors import MalformedResponseError, TransportError
from travelchat.backend.http import post_json


@pytest.fixture(autouse=True)
def _configure_backend(monkeypatch) -> None:
    monkeypatch.setattr("travelchat.config.settings.backend_url", "http://backend.test/")
    monkeypatch.setattr("travelchat.config.settings.backend_timeout_seconds", 5.0)


def _mock_httpx_client(mock_client_cls: MagicMock, response=None, error=None) -> AsyncMock:
    """Wire up an AsyncClient context-manager mock whose post() returns *response*."""
    mock_client = AsyncMock()
    if error is not None:
        mock_client.post.side_effect = error
    else:
        mock_client.post.return_value = response
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    mock_client_cls.return_value = mock_client
    return mock_client


def _response(status_code: int = 200, **kwargs) -> httpx.Response:
    return httpx.Response(
        status_code=status_code,
        request=httpx.Request("POST", "http://backend.test/nlu/parse"),
        **kwargs,
    )


async def test_posts_json_and_returns_body() -> None:
    with patch("travelchat.backend.http.httpx.AsyncClient") as mock_cls:
        mock_client = _mock_httpx_client(mock_cls, _response(json={"intent": "x"}))
        body = await post_json("/nlu/parse", {"text": "hello"})

    assert body == {"intent": "x"}
    args, kwargs = mock_client.post.call_args
    assert args[0] == "http://backend.test/nlu/parse"
    assert kwargs["json"] == {"text": "hello"}
    assert kwargs["headers"]["Content-Type"] == "application/json"
    mock_cls.assert_called_once_with(timeout=5.0)


async def test_single_attempt_on_failure() -> None:
    with patch("travelchat.backend.http.httpx.AsyncClient") as mock_cls:
        mock_client = _mock_httpx_client(mock_cls, error=httpx.ConnectError("refused"))
        with pytest.raises(TransportError):
            await post_json("/execute", {})

    assert mock_client.post.call_count == 1


async def test_timeout_is_transport_error() -> None:
    with patch("travelchat.backend.http.httpx.AsyncClient") as mock_cls:
        _mock_httpx_client(mock_cls, error=httpx.ReadTimeout("slow"))
        with pytest.raises(TransportError) as exc_info:
            await post_json("/execute", {})

    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)


async def test_non_2xx_is_transport_error() -> None:
    with patch("travelchat.backend.http.httpx.AsyncClient") as mock_cls:
        _mock_httpx_client(mock_cls, _response(500, json={"detail": "boom"}))
        with pytest.raises(TransportError, match="500"):
            await post_json("/nlu/parse", {"text": "x"})


async def test_non_json_body_is_malformed() -> None:
    with patch("travelchat.backend.http.httpx.AsyncClient") as mock_cls:
        _mock_httpx_client(mock_cls, _response(200, text="<html>oops</html>"))
        with pytest.raises(MalformedResponseError):
            await post_json("/nlu/parse", {"text": "x"})


async def test_empty_body_is_malformed() -> None:
    with patch("travelchat.backend.http.httpx.AsyncClient") as mock_cls:
        _mock_httpx_client(mock_cls, _response(200, content=b""))
        with pytest.raises(MalformedResponseError):
            await post_json("/execute", {})
