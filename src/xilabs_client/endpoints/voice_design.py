"""Text-to-voice: design a voice from a description, then save it."""

from ..transport import ChunkCallback, StreamResult
from .base import Endpoint, compact, quote_id, require


class TextToVoice(Endpoint):
    async def design(
        self,
        voice_description: str,
        *,
        output_format: str | None = None,
        model_id: str | None = None,
        text: str | None = None,
        auto_generate_text: bool | None = None,
        loudness: float | None = None,
        seed: int | None = None,
        guidance_scale: float | None = None,
        stream_previews: bool | None = None,
        remixing_session_id: str | None = None,
        remixing_session_iteration_id: str | None = None,
        quality: float | None = None,
        reference_audio_base64: str | None = None,
        prompt_strength: float | None = None,
    ) -> dict:
        """Generate voice previews from a description.

        POST /v1/text-to-voice/design

        Args:
            voice_description: 20-1000 character description of the voice.
            output_format: Preview audio format.
            model_id: e.g. "eleven_multilingual_ttv_v2" or "eleven_ttv_v3".
            text: Preview text (100-1000 characters).
            auto_generate_text: Let the API write the preview text.
            loudness: -1 to 1.
            seed: Sampling seed.
            guidance_scale: How strictly to follow the description.
            stream_previews: Return preview IDs only, to be streamed with
                :meth:`stream_preview`.
            remixing_session_id: Remixing session.
            remixing_session_iteration_id: Remixing session iteration.
            quality: -1 to 1.
            reference_audio_base64: Reference audio (eleven_ttv_v3 only).
            prompt_strength: 0 to 1 (eleven_ttv_v3 only).

        Returns:
            Dict with ``previews`` (each carrying a ``generated_voice_id``) and ``text``.
        """
        require("voice_description", voice_description)
        body = {
            "voice_description": voice_description,
            **compact(
                output_format=output_format,
                model_id=model_id,
                text=text,
                auto_generate_text=auto_generate_text,
                loudness=loudness,
                seed=seed,
                guidance_scale=guidance_scale,
                stream_previews=stream_previews,
                remixing_session_id=remixing_session_id,
                remixing_session_iteration_id=remixing_session_iteration_id,
                quality=quality,
                reference_audio_base64=reference_audio_base64,
                prompt_strength=prompt_strength,
            ),
        }
        return await self._transport.post("/v1/text-to-voice/design", body)

    async def create(
        self,
        voice_name: str,
        voice_description: str,
        generated_voice_id: str,
        *,
        labels: dict[str, str] | None = None,
        played_not_selected_voice_ids: list[str] | None = None,
    ) -> dict:
        """Save a designed preview as a voice. POST /v1/text-to-voice"""
        require("voice_name", voice_name)
        require("generated_voice_id", generated_voice_id)
        body = {
            "voice_name": voice_name,
            "voice_description": voice_description,
            "generated_voice_id": generated_voice_id,
            **compact(
                labels=labels,
                played_not_selected_voice_ids=played_not_selected_voice_ids,
            ),
        }
        return await self._transport.post("/v1/text-to-voice", body)

    async def stream_preview(self, generated_voice_id: str, on_chunk: ChunkCallback) -> StreamResult:
        """GET /v1/text-to-voice/{generated_voice_id}/stream"""
        require("generated_voice_id", generated_voice_id)
        return await self._transport.get_streaming(
            f"/v1/text-to-voice/{quote_id(generated_voice_id)}/stream", on_chunk
        )

    async def list_voices(self) -> dict:
        """GET /v1/voices, to find voices saved from previews."""
        return await self._transport.get("/v1/voices")
