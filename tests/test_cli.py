"""Tests for the xilabs command-line interface."""

import functools
import json

import httpx
import pytest

from xilabs_client import XiLabsClient
from xilabs_client import __main__ as cli


@pytest.fixture
def mock_api(monkeypatch, tmp_path):
    """Route the CLI's client through a MockTransport; returns recorded requests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ELEVENLABS_API_KEY", "cli-key")
    requests: list[httpx.Request] = []

    def install(handler):
        def recording_handler(request):
            requests.append(request)
            return handler(request)

        monkeypatch.setattr(
            cli,
            "XiLabsClient",
            functools.partial(XiLabsClient, http_transport=httpx.MockTransport(recording_handler)),
        )
        return requests

    return install


def test_voices_prints_json(mock_api, capsys) -> None:
    requests = mock_api(lambda request: httpx.Response(200, json={"voices": [{"voice_id": "v1"}]}))

    assert cli.main(["voices"]) == 0

    assert json.loads(capsys.readouterr().out) == {"voices": [{"voice_id": "v1"}]}
    assert requests[0].headers["xi-api-key"] == "cli-key"


def test_history_page_size(mock_api, capsys) -> None:
    requests = mock_api(lambda request: httpx.Response(200, json={"history": []}))

    assert cli.main(["history", "--page-size", "3"]) == 0
    assert requests[0].url.params["page_size"] == "3"


def test_tts_writes_file(mock_api, tmp_path, capsys) -> None:
    requests = mock_api(
        lambda request: httpx.Response(200, content=b"ID3data", headers={"content-type": "audio/mpeg"})
    )
    out = tmp_path / "out.mp3"

    assert cli.main(["tts", "voice1", "Hello", "-o", str(out)]) == 0

    assert out.read_bytes() == b"ID3data"
    assert requests[0].url.path == "/v1/text-to-speech/voice1"
    assert requests[0].url.params["output_format"] == "mp3_44100_128"
    assert "Wrote 7 bytes" in capsys.readouterr().out


def test_tts_stream_writes_file(mock_api, tmp_path) -> None:
    requests = mock_api(lambda request: httpx.Response(200, content=b"streamed-audio"))
    out = tmp_path / "stream.mp3"

    assert cli.main(["tts", "voice1", "Hello", "-o", str(out), "--stream"]) == 0

    assert out.read_bytes() == b"streamed-audio"
    assert requests[0].url.path == "/v1/text-to-speech/voice1/stream"


def test_tts_stream_error_removes_file(mock_api, tmp_path, capsys) -> None:
    mock_api(lambda request: httpx.Response(404, json={"detail": {"message": "Voice not found"}}))
    out = tmp_path / "stream.mp3"

    assert cli.main(["tts", "missing", "Hello", "-o", str(out), "--stream"]) == 1

    assert not out.exists()
    assert "Voice not found" in capsys.readouterr().err


def test_api_error_exits_1(mock_api, capsys) -> None:
    mock_api(lambda request: httpx.Response(401, json={"detail": {"message": "Invalid API key"}}))

    assert cli.main(["user"]) == 1
    assert capsys.readouterr().err.strip() == "error: Invalid API key"


def test_missing_key_exits_1(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.chdir(tmp_path)

    assert cli.main(["models"]) == 1
    assert "ELEVENLABS_API_KEY" in capsys.readouterr().err
