"""Text-to-speech endpoints."""

from typing import Any

from ..models import VoiceSettingsLike
from ..transport import ChunkCallback, EventCallback, StreamResult
from .base import Endpoint, compact, quote_id, require

DEFAULT_MODEL_ID = "eleven_multilingual_v2"
DEFAULT_OUTPUT_FORMAT = "mp3_44100_128"


class TextToSpeech(Endpoint):
    """Convert text to audio, in one piece or streamed."""

    @staticmethod
    def _query(
        enable_logging: bool | None,
        optimize_streaming_latency: int | None,
        output_format: str | None,
    ) -> dict[str, Any]:
        return compact(
            enable_logging=enable_logging,
            optimize_streaming_latency=optimize_streaming_latency,
            output_format=output_format,
        )

    @staticmethod
    def _body(text: str, **options: Any) -> dict[str, Any]:
        return {"text": text, **compact(**options)}

    async def convert(
        self,
        voice_id: str,
        text: str,
        *,
        model_id: str | None = None,
        language_code: str | None = None,
        voice_settings: VoiceSettingsLike | None = None,
        pronunciation_dictionary_locators: list[dict] | None = None,
        seed: int | None = None,
        previous_text: str | None = None,
        next_text: str | None = None,
        previous_request_ids: list[str] | None = None,
        next_request_ids: list[str] | None = None,
        apply_text_normalization: str | None = None,
        apply_language_text_normalization: bool | None = None,
        enable_logging: bool | None = None,
        optimize_streaming_latency: int | None = None,
        output_format: str | None = None,
    ) -> bytes:
        """Synthesize speech and return the complete audio.

        POST /v1/text-to-speech/{voice_id}

        Args:
            voice_id: Voice to speak with.
            text: Text to synthesize.
            model_id: Model identifier (e.g. "eleven_multilingual_v2").
            language_code: ISO 639-1 code used for text normalization.
            voice_settings: Overrides for the stored voice settings.
            pronunciation_dictionary_locators: Up to 3 dictionary locators.
            seed: Deterministic sampling seed.
            previous_text: Text preceding this request, for continuity.
            next_text: Text following this request, for continuity.
            previous_request_ids: Request IDs of preceding samples.
            next_request_ids: Request IDs of following samples.
            apply_text_normalization: "auto", "on" or "off".
            apply_language_text_normalization: Language-specific normalization.
            enable_logging: False enables zero-retention mode.
            optimize_streaming_latency: Latency optimization level (0-4).
            output_format: Audio format, e.g. "mp3_44100_128" or "pcm_24000".

        Returns:
            Audio bytes in the requested format.
        """
        require("voice_id", voice_id)
        body = self._body(
            text,
            model_id=model_id,
            language_code=language_code,
            voice_settings=voice_settings,
            pronunciation_dictionary_locators=pronunciation_dictionary_locators,
            seed=seed,
            previous_text=previous_text,
            next_text=next_text,
            previous_request_ids=previous_request_ids,
            next_request_ids=next_request_ids,
            apply_text_normalization=apply_text_normalization,
            apply_language_text_normalization=apply_language_text_normalization,
        )
        return await self._transport.post_binary(
            f"/v1/text-to-speech/{quote_id(voice_id)}",
            body,
            params=self._query(enable_logging, optimize_streaming_latency, output_format),
        )

    async def convert_with_timestamps(
        self,
        voice_id: str,
        text: str,
        *,
        model_id: str | None = None,
        language_code: str | None = None,
        voice_settings: VoiceSettingsLike | None = None,
        pronunciation_dictionary_locators: list[dict] | None = None,
        seed: int | None = None,
        previous_text: str | None = None,
        next_text: str | None = None,
        previous_request_ids: list[str] | None = None,
        next_request_ids: list[str] | None = None,
        apply_text_normalization: str | None = None,
        apply_language_text_normalization: bool | None = None,
        use_pvc_as_ivc: bool | None = None,
        enable_logging: bool | None = None,
        optimize_streaming_latency: int | None = None,
        output_format: str | None = None,
    ) -> dict:
        """Synthesize speech with character-level timing.

        POST /v1/text-to-speech/{voice_id}/with-timestamps

        Returns:
            Dict with ``audio_base64``, ``alignment`` and
            ``normalized_alignment``. See :func:`xilabs_client.alignment.words_from_alignment`.
        """
        require("voice_id", voice_id)
        body = self._body(
            text,
            model_id=model_id,
            language_code=language_code,
            voice_settings=voice_settings,
            pronunciation_dictionary_locators=pronunciation_dictionary_locators,
            seed=seed,
            previous_text=previous_text,
            next_text=next_text,
            previous_request_ids=previous_request_ids,
            next_request_ids=next_request_ids,
            apply_text_normalization=apply_text_normalization,
            apply_language_text_normalization=apply_language_text_normalization,
            use_pvc_as_ivc=use_pvc_as_ivc,
        )
        return await self._transport.post(
            f"/v1/text-to-speech/{quote_id(voice_id)}/with-timestamps",
            body,
            params=self._query(enable_logging, optimize_streaming_latency, output_format),
        )

    async def stream(
        self,
        voice_id: str,
        text: str,
        on_chunk: ChunkCallback,
        *,
        model_id: str = DEFAULT_MODEL_ID,
        output_format: str = DEFAULT_OUTPUT_FORMAT,
        voice_settings: VoiceSettingsLike | None = None,
        language_code: str | None = None,
        seed: int | None = None,
        enable_logging: bool | None = None,
        optimize_streaming_latency: int | None = None,
    ) -> StreamResult:
        """Stream synthesized audio as it is generated.

        POST /v1/text-to-speech/{voice_id}/stream

        Args:
            voice_id: Voice to speak with.
            text: Text to synthesize.
            on_chunk: Called with each audio chunk (bytes).
            model_id: Model identifier.
            output_format: Audio format.
            voice_settings: Overrides for the stored voice settings.
            language_code: ISO 639-1 code used for text normalization.
            seed: Deterministic sampling seed.
            enable_logging: False enables zero-retention mode.
            optimize_streaming_latency: Latency optimization level (0-4).

        Returns:
            StreamResult once all audio has been delivered.
        """
        require("voice_id", voice_id)
        body = self._body(
            text,
            model_id=model_id,
            voice_settings=voice_settings,
            language_code=language_code,
            seed=seed,
        )
        return await self._transport.post_streaming(
            f"/v1/text-to-speech/{quote_id(voice_id)}/stream",
            body,
            on_chunk,
            params=self._query(enable_logging, optimize_streaming_latency, output_format),
        )

    async def stream_with_timestamps(
        self,
        voice_id: str,
        text: str,
        on_event: EventCallback,
        *,
        model_id: str | None = None,
        language_code: str | None = None,
        voice_settings: VoiceSettingsLike | None = None,
        pronunciation_dictionary_locators: list[dict] | None = None,
        seed: int | None = None,
        previous_text: str | None = None,
        next_text: str | None = None,
        previous_request_ids: list[str] | None = None,
        next_request_ids: list[str] | None = None,
        apply_text_normalization: str | None = None,
        apply_language_text_normalization: bool | None = None,
        use_pvc_as_ivc: bool | None = None,
        enable_logging: bool | None = None,
        optimize_streaming_latency: int | None = None,
        output_format: str | None = None,
    ) -> StreamResult:
        """Stream audio with timing data as newline-delimited JSON.

        POST /v1/text-to-speech/{voice_id}/stream/with-timestamps

        ``on_event`` receives each decoded object (``audio_base64``,
        ``alignment``, ``normalized_alignment``).
        """
        require("voice_id", voice_id)
        body = self._body(
            text,
            model_id=model_id,
            language_code=language_code,
            voice_settings=voice_settings,
            pronunciation_dictionary_locators=pronunciation_dictionary_locators,
            seed=seed,
            previous_text=previous_text,
            next_text=next_text,
            previous_request_ids=previous_request_ids,
            next_request_ids=next_request_ids,
            apply_text_normalization=apply_text_normalization,
            apply_language_text_normalization=apply_language_text_normalization,
            use_pvc_as_ivc=use_pvc_as_ivc,
        )
        return await self._transport.post_streaming_with_timestamps(
            f"/v1/text-to-speech/{quote_id(voice_id)}/stream/with-timestamps",
            body,
            on_event,
            params=self._query(enable_logging, optimize_streaming_latency, output_format),
        )
