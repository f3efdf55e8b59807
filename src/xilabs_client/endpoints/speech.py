"""Speech-to-speech (voice changer) and speech-to-text endpoints."""

import json
from typing import IO, Any

from ..models import VoiceSettings, VoiceSettingsLike
from ..transport import ChunkCallback, StreamResult
from .base import Endpoint, compact, quote_id, require


def _voice_settings_field(voice_settings: VoiceSettingsLike | str | None) -> str | None:
    """Voice settings travel as a JSON string inside multipart forms."""
    if voice_settings is None or isinstance(voice_settings, str):
        return voice_settings
    if isinstance(voice_settings, VoiceSettings):
        return voice_settings.model_dump_json(exclude_none=True)
    return json.dumps(dict(voice_settings))


class SpeechToSpeech(Endpoint):
    """Re-voice recorded audio with a different voice."""

    def _form(
        self,
        audio: bytes | IO[bytes],
        filename: str,
        model_id: str | None,
        voice_settings: VoiceSettingsLike | str | None,
        seed: int | None,
        remove_background_noise: bool | None,
        file_format: str | None,
    ) -> dict[str, Any]:
        require("filename", filename)
        return {
            "audio": self._transport.file_part(audio, filename),
            **compact(
                model_id=model_id,
                voice_settings=_voice_settings_field(voice_settings),
                seed=seed,
                remove_background_noise=remove_background_noise,
                file_format=file_format,
            ),
        }

    async def convert(
        self,
        voice_id: str,
        audio: bytes | IO[bytes],
        filename: str,
        *,
        model_id: str | None = None,
        voice_settings: VoiceSettingsLike | str | None = None,
        seed: int | None = None,
        remove_background_noise: bool | None = None,
        file_format: str | None = None,
        enable_logging: bool | None = None,
        optimize_streaming_latency: int | None = None,
        output_format: str | None = None,
    ) -> bytes:
        """Convert audio to the target voice.

        POST /v1/speech-to-speech/{voice_id} (multipart)

        Args:
            voice_id: Target voice.
            audio: Source audio content or binary file object.
            filename: Source filename; its extension selects the MIME type.
            model_id: Model identifier (e.g. "eleven_multilingual_sts_v2").
            voice_settings: Voice settings (sent as a JSON string).
            seed: Deterministic sampling seed.
            remove_background_noise: Run audio isolation on the input first.
            file_format: "pcm_s16le_16" or "other".
            enable_logging: False enables zero-retention mode.
            optimize_streaming_latency: Latency optimization level (0-4).
            output_format: Audio format of the result.

        Returns:
            Converted audio bytes.
        """
        require("voice_id", voice_id)
        form = self._form(
            audio, filename, model_id, voice_settings, seed, remove_background_noise, file_format
        )
        return await self._transport.post_multipart(
            f"/v1/speech-to-speech/{quote_id(voice_id)}",
            form,
            params=compact(
                enable_logging=enable_logging,
                optimize_streaming_latency=optimize_streaming_latency,
                output_format=output_format,
            ),
        )

    async def convert_stream(
        self,
        voice_id: str,
        audio: bytes | IO[bytes],
        filename: str,
        on_chunk: ChunkCallback,
        *,
        model_id: str | None = None,
        voice_settings: VoiceSettingsLike | str | None = None,
        seed: int | None = None,
        remove_background_noise: bool | None = None,
        file_format: str | None = None,
        enable_logging: bool | None = None,
        optimize_streaming_latency: int | None = None,
        output_format: str | None = None,
    ) -> StreamResult:
        """Same as :meth:`convert`, streaming the converted audio to ``on_chunk``."""
        require("voice_id", voice_id)
        form = self._form(
            audio, filename, model_id, voice_settings, seed, remove_background_noise, file_format
        )
        return await self._transport.post_multipart_streaming(
            f"/v1/speech-to-speech/{quote_id(voice_id)}/stream",
            form,
            on_chunk,
            params=compact(
                enable_logging=enable_logging,
                optimize_streaming_latency=optimize_streaming_latency,
                output_format=output_format,
            ),
        )


class SpeechToText(Endpoint):
    """Transcription."""

    async def create(
        self,
        model_id: str,
        *,
        file: bytes | IO[bytes] | None = None,
        filename: str | None = None,
        cloud_storage_url: str | None = None,
        language_code: str | None = None,
        tag_audio_events: bool | None = None,
        num_speakers: int | None = None,
        timestamps_granularity: str | None = None,
        diarize: bool | None = None,
        diarization_threshold: float | None = None,
        additional_formats: list[dict] | None = None,
        file_format: str | None = None,
        webhook: bool | None = None,
        webhook_id: str | None = None,
        webhook_metadata: str | dict | None = None,
        temperature: float | None = None,
        seed: int | None = None,
        use_multi_channel: bool | None = None,
        enable_logging: bool | None = None,
    ) -> dict:
        """Transcribe an uploaded file or a file at a cloud storage URL.

        POST /v1/speech-to-text (multipart)

        Exactly one of ``file`` (with ``filename``) or ``cloud_storage_url``
        must be given.

        Raises:
            ValueError: If neither or both sources are given.
        """
        require("model_id", model_id)
        has_file = file is not None and bool(filename)
        if has_file == bool(cloud_storage_url):
            raise ValueError("Provide either file with filename, or cloud_storage_url")

        form: dict[str, Any] = {"model_id": model_id}
        if has_file:
            form["file"] = self._transport.file_part(file, filename)
        else:
            form["cloud_storage_url"] = cloud_storage_url

        form.update(
            compact(
                language_code=language_code,
                tag_audio_events=tag_audio_events,
                num_speakers=num_speakers,
                timestamps_granularity=timestamps_granularity,
                diarize=diarize,
                diarization_threshold=diarization_threshold,
                additional_formats=json.dumps(additional_formats) if additional_formats else None,
                file_format=file_format,
                webhook=webhook,
                webhook_id=webhook_id,
                webhook_metadata=webhook_metadata,
                temperature=temperature,
                seed=seed,
                use_multi_channel=use_multi_channel,
            )
        )
        return await self._transport.post_multipart(
            "/v1/speech-to-text",
            form,
            params=compact(enable_logging=enable_logging),
        )

    async def get_transcript(self, transcription_id: str) -> dict:
        """GET /v1/speech-to-text/transcripts/{transcription_id}"""
        require("transcription_id", transcription_id)
        return await self._transport.get(
            f"/v1/speech-to-text/transcripts/{quote_id(transcription_id)}"
        )
