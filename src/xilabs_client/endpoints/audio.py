"""Sound effects, music, audio isolation and forced alignment."""

from typing import IO, Any

from ..transport import ChunkCallback, StreamResult
from .base import Endpoint, compact, require

DEFAULT_MUSIC_MODEL_ID = "music_v1"


class SoundGeneration(Endpoint):
    async def generate(
        self,
        text: str,
        *,
        loop: bool | None = None,
        duration_seconds: float | None = None,
        prompt_influence: float | None = None,
        output_format: str | None = None,
    ) -> bytes:
        """Generate a sound effect from a text prompt.

        POST /v1/sound-generation

        Args:
            text: Description of the sound.
            loop: Produce a seamlessly looping effect.
            duration_seconds: Length in seconds (0.5-30); the API picks one if unset.
            prompt_influence: How closely to follow the prompt (0-1).
            output_format: Audio format, e.g. "mp3_22050_32".

        Returns:
            Audio bytes.
        """
        require("text", text)
        body = {
            "text": text,
            **compact(
                loop=loop,
                duration_seconds=duration_seconds,
                prompt_influence=prompt_influence,
            ),
        }
        return await self._transport.post_binary(
            "/v1/sound-generation", body, params=compact(output_format=output_format)
        )


class AudioIsolation(Endpoint):
    """Remove background noise from speech recordings."""

    async def isolate(
        self,
        audio: bytes | IO[bytes],
        filename: str,
        *,
        file_format: str | None = None,
    ) -> bytes:
        """POST /v1/audio-isolation (multipart), returning the cleaned audio."""
        require("filename", filename)
        form = {
            "audio": self._transport.file_part(audio, filename),
            **compact(file_format=file_format),
        }
        return await self._transport.post_multipart("/v1/audio-isolation", form)

    async def isolate_stream(
        self,
        audio: bytes | IO[bytes],
        filename: str,
        on_chunk: ChunkCallback,
        *,
        file_format: str | None = None,
    ) -> StreamResult:
        """POST /v1/audio-isolation/stream, delivering cleaned audio to ``on_chunk``."""
        require("filename", filename)
        form = {
            "audio": self._transport.file_part(audio, filename),
            **compact(file_format=file_format),
        }
        return await self._transport.post_multipart_streaming(
            "/v1/audio-isolation/stream", form, on_chunk
        )


class ForcedAlignment(Endpoint):
    async def create(
        self,
        audio: bytes | IO[bytes],
        filename: str,
        text: str,
        *,
        enabled_spooled_file: bool | None = None,
    ) -> dict:
        """Align a transcript to audio.

        POST /v1/forced-alignment (multipart)

        Returns:
            Dict with ``characters`` and ``words`` timing arrays and a ``loss`` score.
        """
        require("filename", filename)
        require("text", text)
        form = {
            "file": self._transport.file_part(audio, filename),
            "text": text,
            **compact(enabled_spooled_file=enabled_spooled_file),
        }
        return await self._transport.post_multipart("/v1/forced-alignment", form)


class Music(Endpoint):
    """Music composition."""

    @staticmethod
    def _body(
        prompt: str | None,
        composition_plan: dict | None,
        music_length_ms: int | None,
        model_id: str,
    ) -> dict[str, Any]:
        if not prompt and not composition_plan:
            raise ValueError("Either prompt or composition_plan is required")
        return compact(
            prompt=prompt,
            composition_plan=composition_plan,
            music_length_ms=music_length_ms,
            model_id=model_id,
        )

    async def compose(
        self,
        prompt: str | None = None,
        *,
        composition_plan: dict | None = None,
        music_length_ms: int | None = None,
        model_id: str = DEFAULT_MUSIC_MODEL_ID,
        output_format: str | None = None,
    ) -> bytes:
        """Compose music from a prompt or a composition plan.

        POST /v1/music

        Args:
            prompt: Text description of the music.
            composition_plan: Detailed section-by-section plan (see :meth:`create_plan`).
            music_length_ms: Target length in milliseconds.
            model_id: Music model.
            output_format: Audio format, e.g. "mp3_44100_128".

        Returns:
            Audio bytes.
        """
        return await self._transport.post_binary(
            "/v1/music",
            self._body(prompt, composition_plan, music_length_ms, model_id),
            params=compact(output_format=output_format),
        )

    async def compose_stream(
        self,
        on_chunk: ChunkCallback,
        prompt: str | None = None,
        *,
        composition_plan: dict | None = None,
        music_length_ms: int | None = None,
        model_id: str = DEFAULT_MUSIC_MODEL_ID,
        output_format: str | None = None,
    ) -> StreamResult:
        """POST /v1/music/stream, delivering audio chunks to ``on_chunk``."""
        return await self._transport.post_streaming(
            "/v1/music/stream",
            self._body(prompt, composition_plan, music_length_ms, model_id),
            on_chunk,
            params=compact(output_format=output_format),
        )

    async def compose_detailed(
        self,
        prompt: str | None = None,
        *,
        composition_plan: dict | None = None,
        music_length_ms: int | None = None,
        model_id: str = DEFAULT_MUSIC_MODEL_ID,
        output_format: str | None = None,
    ) -> bytes:
        """POST /v1/music/detailed.

        The response is multipart/mixed (JSON metadata plus audio) and is
        returned undecoded.
        """
        return await self._transport.post_binary(
            "/v1/music/detailed",
            self._body(prompt, composition_plan, music_length_ms, model_id),
            params=compact(output_format=output_format),
            headers={"Accept": "multipart/mixed"},
        )

    async def create_plan(
        self,
        prompt: str,
        *,
        music_length_ms: int | None = None,
        source_composition_plan: dict | None = None,
        model_id: str = DEFAULT_MUSIC_MODEL_ID,
    ) -> dict:
        """POST /v1/music/plan and return the generated composition plan."""
        require("prompt", prompt)
        body = compact(
            prompt=prompt,
            music_length_ms=music_length_ms,
            source_composition_plan=source_composition_plan,
            model_id=model_id,
        )
        return await self._transport.post("/v1/music/plan", body)
