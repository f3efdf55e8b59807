"""Real-time text-to-speech over WebSocket.

The server accepts JSON text messages and answers with JSON messages carrying
base64 ``audio`` and optional ``alignment`` data. :meth:`TextToSpeechWebSocket.stream_text_to_speech`
drives a whole single-stream session; the ``send_*`` helpers are for callers
managing their own connection.
"""

import base64
import json
import logging
from typing import Any, Awaitable, Callable, Iterable, Union
from urllib.parse import urlencode

import websockets
from websockets.asyncio.client import ClientConnection

from .config import ClientConfig
from .endpoints.base import quote_id, require
from .errors import WebSocketError
from .models import VoiceSettingsLike, dump_model
from .transport import invoke_callback

logger = logging.getLogger(__name__)

AudioCallback = Callable[[bytes, dict], Union[None, Awaitable[None]]]


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _settings(voice_settings: VoiceSettingsLike | None) -> dict:
    return dict(dump_model(voice_settings)) if voice_settings else {}


async def _send(ws: ClientConnection, message: dict) -> None:
    await ws.send(json.dumps(message))


class TextToSpeechWebSocket:
    """WebSocket streaming TTS (single-stream and multi-context)."""

    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    def build_url(
        self,
        voice_id: str,
        multi_context: bool = False,
        *,
        model_id: str | None = None,
        language_code: str | None = None,
        enable_logging: bool | None = None,
        enable_ssml_parsing: bool | None = None,
        output_format: str | None = None,
        inactivity_timeout: int | None = None,
        sync_alignment: bool | None = None,
        auto_mode: bool | None = None,
        apply_text_normalization: str | None = None,
        seed: int | None = None,
    ) -> str:
        """Return the stream-input (or multi-stream-input) URL for a voice."""
        require("voice_id", voice_id)
        endpoint = "multi-stream-input" if multi_context else "stream-input"
        options = {
            "model_id": model_id,
            "language_code": language_code,
            "enable_logging": enable_logging,
            "enable_ssml_parsing": enable_ssml_parsing,
            "output_format": output_format,
            "inactivity_timeout": inactivity_timeout,
            "sync_alignment": sync_alignment,
            "auto_mode": auto_mode,
            "apply_text_normalization": apply_text_normalization,
            "seed": seed,
        }
        query = urlencode(
            {key: _query_value(value) for key, value in options.items() if value is not None}
        )
        url = f"{self.config.ws_base_url}/v1/text-to-speech/{quote_id(voice_id)}/{endpoint}"
        return f"{url}?{query}" if query else url

    async def _connect(self, url: str) -> ClientConnection:
        logger.debug(f"Opening WebSocket {url}")
        try:
            return await websockets.connect(
                url,
                additional_headers={"xi-api-key": self.config.api_key},
                user_agent_header=self.config.user_agent,
                ping_interval=20,
                ping_timeout=10,
                close_timeout=5,
            )
        except (OSError, websockets.exceptions.WebSocketException) as e:
            raise WebSocketError(f"Failed to connect to {url}: {e}") from e

    async def connect_stream_input(self, voice_id: str, **options: Any) -> ClientConnection:
        """Open a single-stream connection.

        Args:
            voice_id: Voice to speak with.
            **options: Query options accepted by :meth:`build_url`.

        Returns:
            An open ``websockets`` client connection. The caller closes it.
        """
        return await self._connect(self.build_url(voice_id, **options))

    async def connect_multi_stream_input(self, voice_id: str, **options: Any) -> ClientConnection:
        """Open a multi-context connection (several independent generations on one socket)."""
        return await self._connect(self.build_url(voice_id, multi_context=True, **options))

    # -------------------------------------------------------------------------
    # Single-stream messages
    # -------------------------------------------------------------------------

    async def send_initialize_connection(
        self,
        ws: ClientConnection,
        *,
        text: str = " ",
        voice_settings: VoiceSettingsLike | None = None,
        xi_api_key: str | None = None,
    ) -> None:
        await _send(ws, {
            "text": text,
            "voice_settings": _settings(voice_settings),
            "xi_api_key": xi_api_key or self.config.api_key,
        })

    async def send_text(
        self,
        ws: ClientConnection,
        text: str,
        *,
        try_trigger_generation: bool | None = None,
        voice_settings: VoiceSettingsLike | None = None,
    ) -> None:
        message: dict[str, Any] = {"text": text}
        if try_trigger_generation is not None:
            message["try_trigger_generation"] = try_trigger_generation
        if voice_settings:
            message["voice_settings"] = _settings(voice_settings)
        await _send(ws, message)

    async def send_close_connection(self, ws: ClientConnection) -> None:
        """An empty text message ends the input; the server flushes and closes."""
        await _send(ws, {"text": ""})

    # -------------------------------------------------------------------------
    # Multi-context messages
    # -------------------------------------------------------------------------

    async def send_initialize_connection_multi(
        self,
        ws: ClientConnection,
        context_id: str,
        *,
        text: str = " ",
        voice_settings: VoiceSettingsLike | None = None,
    ) -> None:
        await _send(ws, {
            "text": text,
            "voice_settings": _settings(voice_settings),
            "context_id": context_id,
        })

    async def send_initialize_context(
        self,
        ws: ClientConnection,
        context_id: str,
        *,
        voice_settings: VoiceSettingsLike | None = None,
        model_id: str | None = None,
        language_code: str | None = None,
    ) -> None:
        message: dict[str, Any] = {
            "context_id": context_id,
            "voice_settings": _settings(voice_settings),
        }
        if model_id:
            message["model_id"] = model_id
        if language_code:
            message["language_code"] = language_code
        await _send(ws, message)

    async def send_text_multi(
        self,
        ws: ClientConnection,
        context_id: str,
        text: str,
        *,
        flush: bool | None = None,
    ) -> None:
        message: dict[str, Any] = {"text": text, "context_id": context_id}
        if flush is not None:
            message["flush"] = flush
        await _send(ws, message)

    async def send_flush_context(self, ws: ClientConnection, context_id: str) -> None:
        await _send(ws, {"context_id": context_id, "flush": True})

    async def send_close_context(self, ws: ClientConnection, context_id: str) -> None:
        await _send(ws, {"context_id": context_id, "close_context": True})

    async def send_keep_context_alive(self, ws: ClientConnection, context_id: str) -> None:
        await _send(ws, {"context_id": context_id, "keep_context_alive": True})

    async def send_close_socket(self, ws: ClientConnection) -> None:
        await _send(ws, {"close_socket": True})

    # -------------------------------------------------------------------------
    # Convenience
    # -------------------------------------------------------------------------

    async def stream_text_to_speech(
        self,
        voice_id: str,
        text_chunks: Iterable[str],
        on_audio: AudioCallback,
        *,
        voice_settings: VoiceSettingsLike | None = None,
        **options: Any,
    ) -> int:
        """Stream text chunks in and audio out over one single-stream session.

        Args:
            voice_id: Voice to speak with.
            text_chunks: Text pieces, sent in order. The last one carries
                ``try_trigger_generation``.
            on_audio: Called with (audio bytes, full message) for every message
                carrying audio. May be a coroutine function.
            voice_settings: Voice settings sent with the initial message.
            **options: Query options accepted by :meth:`build_url`.

        Returns:
            Number of audio messages delivered.

        Raises:
            WebSocketError: On connection failure or a server error message.
        """
        chunks = list(text_chunks)
        delivered = 0

        ws = await self.connect_stream_input(voice_id, **options)
        try:
            await self.send_initialize_connection(ws, voice_settings=voice_settings)
            for index, chunk in enumerate(chunks):
                await self.send_text(ws, chunk, try_trigger_generation=index == len(chunks) - 1)
            await self.send_close_connection(ws)

            async for raw in ws:
                try:
                    data = json.loads(raw)
                except json.JSONDecodeError:
                    logger.warning(f"Ignoring non-JSON WebSocket message: {str(raw)[:80]!r}")
                    continue
                if not isinstance(data, dict):
                    logger.warning(f"Ignoring non-object WebSocket message: {str(raw)[:80]!r}")
                    continue

                if data.get("error"):
                    message = data.get("message") or data["error"]
                    raise WebSocketError(f"WebSocket error: {message}", body=json.dumps(data))

                if data.get("audio"):
                    await invoke_callback(on_audio, base64.b64decode(data["audio"]), data)
                    delivered += 1

                if data.get("isFinal"):
                    break
        except websockets.exceptions.ConnectionClosedError as e:
            raise WebSocketError(f"WebSocket closed unexpectedly: {e}") from e
        finally:
            await ws.close()

        logger.debug(f"WebSocket TTS for {voice_id} delivered {delivered} audio messages")
        return delivered
