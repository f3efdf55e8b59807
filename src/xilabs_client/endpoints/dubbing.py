"""Dubbing jobs and the dubbing studio resource editor."""

from typing import IO, Any, Sequence

from .base import Endpoint, compact, quote_id, require


class Dubbing(Endpoint):
    """Translate and re-voice audio or video files."""

    async def create(
        self,
        file: bytes | IO[bytes],
        filename: str,
        target_languages: Sequence[str],
        name: str | None = None,
        *,
        source_lang: str | None = None,
        mode: str | None = None,
        num_speakers: int | None = None,
        watermark: bool | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
        highest_resolution: bool | None = None,
        drop_background_audio: bool | None = None,
        use_profanity_filter: bool | None = None,
        dubbing_studio: bool | None = None,
        disable_voice_cloning: bool | None = None,
    ) -> dict:
        """Start a dubbing job.

        POST /v1/dubbing (multipart)

        Args:
            file: Source media content or binary file object.
            filename: Source filename; its extension selects the MIME type.
            target_languages: Target language codes; the first one is dubbed.
            name: Optional project name.
            source_lang: Source language code ("auto" to detect).
            mode: "automatic" or "manual".
            num_speakers: Number of speakers (0 to detect).
            watermark: Add a watermark to the output video.
            start_time: Start of the section to dub, in seconds.
            end_time: End of the section to dub, in seconds.
            highest_resolution: Use the highest available resolution.
            drop_background_audio: Remove background audio from the dub.
            use_profanity_filter: Censor profanities in transcripts.
            dubbing_studio: Prepare the project for editing in Dubbing Studio.
            disable_voice_cloning: Use similar library voices instead of clones.

        Returns:
            Dict with ``dubbing_id`` and ``expected_duration_sec``.
        """
        require("filename", filename)
        require("target_languages", list(target_languages))
        form = {
            "file": self._transport.file_part(file, filename),
            "target_lang": target_languages[0],
            **compact(
                name=name,
                source_lang=source_lang,
                mode=mode,
                num_speakers=num_speakers,
                watermark=watermark,
                start_time=start_time,
                end_time=end_time,
                highest_resolution=highest_resolution,
                drop_background_audio=drop_background_audio,
                use_profanity_filter=use_profanity_filter,
                dubbing_studio=dubbing_studio,
                disable_voice_cloning=disable_voice_cloning,
            ),
        }
        return await self._transport.post_multipart("/v1/dubbing", form)

    async def get(self, dubbing_id: str) -> dict:
        """GET /v1/dubbing/{dubbing_id}"""
        require("dubbing_id", dubbing_id)
        return await self._transport.get(f"/v1/dubbing/{quote_id(dubbing_id)}")

    async def list(
        self,
        *,
        cursor: str | None = None,
        page_size: int | None = None,
        dubbing_status: str | None = None,
        filter_by_creator: str | None = None,
    ) -> dict:
        """GET /v1/dubbing"""
        params = compact(
            cursor=cursor,
            page_size=page_size,
            dubbing_status=dubbing_status,
            filter_by_creator=filter_by_creator,
        )
        return await self._transport.get("/v1/dubbing", params=params)

    async def delete(self, dubbing_id: str) -> dict:
        """DELETE /v1/dubbing/{dubbing_id}"""
        require("dubbing_id", dubbing_id)
        return await self._transport.delete(f"/v1/dubbing/{quote_id(dubbing_id)}")

    async def get_dubbed_audio(self, dubbing_id: str, language_code: str) -> bytes:
        """Download the dubbed media for one language."""
        require("dubbing_id", dubbing_id)
        require("language_code", language_code)
        return await self._transport.get_binary(
            f"/v1/dubbing/{quote_id(dubbing_id)}/audio/{quote_id(language_code)}"
        )

    async def get_dubbed_transcript(
        self,
        dubbing_id: str,
        language_code: str,
        *,
        format_type: str | None = None,
    ) -> Any:
        """Fetch the transcript of a dub as SRT or WebVTT (``format_type``)."""
        require("dubbing_id", dubbing_id)
        require("language_code", language_code)
        return await self._transport.get(
            f"/v1/dubbing/{quote_id(dubbing_id)}/transcript/{quote_id(language_code)}",
            params=compact(format_type=format_type),
        )

    # -------------------------------------------------------------------------
    # Dubbing studio resources
    # -------------------------------------------------------------------------

    async def get_resource(self, dubbing_id: str) -> dict:
        """GET /v1/dubbing/resource/{dubbing_id}"""
        require("dubbing_id", dubbing_id)
        return await self._transport.get(f"/v1/dubbing/resource/{quote_id(dubbing_id)}")

    async def create_segment(
        self,
        dubbing_id: str,
        speaker_id: str,
        start_time: float,
        end_time: float,
        *,
        text: str | None = None,
        translations: dict[str, str] | None = None,
    ) -> dict:
        """Add a segment for a speaker.

        Returns:
            Dict with ``version`` and ``new_segment``.
        """
        require("dubbing_id", dubbing_id)
        require("speaker_id", speaker_id)
        body = {
            "start_time": start_time,
            "end_time": end_time,
            **compact(text=text, translations=translations),
        }
        return await self._transport.post(
            f"/v1/dubbing/resource/{quote_id(dubbing_id)}/speaker/{quote_id(speaker_id)}/segment",
            body,
        )

    async def update_segment(
        self,
        dubbing_id: str,
        segment_id: str,
        language: str,
        *,
        start_time: float | None = None,
        end_time: float | None = None,
        text: str | None = None,
    ) -> dict:
        require("dubbing_id", dubbing_id)
        require("segment_id", segment_id)
        require("language", language)
        body = compact(start_time=start_time, end_time=end_time, text=text)
        return await self._transport.patch(
            f"/v1/dubbing/resource/{quote_id(dubbing_id)}/segment/{quote_id(segment_id)}/{quote_id(language)}",
            body,
        )

    async def delete_segment(self, dubbing_id: str, segment_id: str) -> dict:
        require("dubbing_id", dubbing_id)
        require("segment_id", segment_id)
        return await self._transport.delete(
            f"/v1/dubbing/resource/{quote_id(dubbing_id)}/segment/{quote_id(segment_id)}"
        )

    async def transcribe_segments(self, dubbing_id: str, segments: Sequence[str]) -> dict:
        """Regenerate transcriptions for the given segment IDs."""
        require("dubbing_id", dubbing_id)
        return await self._transport.post(
            f"/v1/dubbing/resource/{quote_id(dubbing_id)}/transcribe", {"segments": list(segments)}
        )

    async def translate_segments(
        self,
        dubbing_id: str,
        segments: Sequence[str],
        languages: Sequence[str] | None = None,
    ) -> dict:
        """Regenerate translations for the given segments, optionally per language."""
        require("dubbing_id", dubbing_id)
        body = {"segments": list(segments), **compact(languages=_list_or_none(languages))}
        return await self._transport.post(
            f"/v1/dubbing/resource/{quote_id(dubbing_id)}/translate", body
        )

    async def dub_segments(
        self,
        dubbing_id: str,
        segments: Sequence[str],
        languages: Sequence[str] | None = None,
    ) -> dict:
        """Regenerate dubbed audio for the given segments, optionally per language."""
        require("dubbing_id", dubbing_id)
        body = {"segments": list(segments), **compact(languages=_list_or_none(languages))}
        return await self._transport.post(f"/v1/dubbing/resource/{quote_id(dubbing_id)}/dub", body)

    async def render(
        self,
        dubbing_id: str,
        language: str,
        render_type: str,
        *,
        normalize_volume: bool | None = None,
    ) -> dict:
        """Render the output media for one language.

        Args:
            dubbing_id: Dubbing project.
            language: Language to render ("original" for the source track).
            render_type: "mp4", "aac", "mp3", "wav", "aaf", "tracks_zip" or "clips_zip".
            normalize_volume: Normalize the rendered volume.

        Returns:
            Dict with ``version`` and ``render_id``.
        """
        require("dubbing_id", dubbing_id)
        require("language", language)
        require("render_type", render_type)
        body = {"render_type": render_type, **compact(normalize_volume=normalize_volume)}
        return await self._transport.post(
            f"/v1/dubbing/resource/{quote_id(dubbing_id)}/render/{quote_id(language)}", body
        )

    async def update_speaker(
        self,
        dubbing_id: str,
        speaker_id: str,
        *,
        voice_id: str | None = None,
        languages: Sequence[str] | None = None,
    ) -> dict:
        """Change the voice of a speaker (a voice ID, "track-clone" or "clip-clone")."""
        require("dubbing_id", dubbing_id)
        require("speaker_id", speaker_id)
        body = compact(voice_id=voice_id, languages=_list_or_none(languages))
        return await self._transport.patch(
            f"/v1/dubbing/resource/{quote_id(dubbing_id)}/speaker/{quote_id(speaker_id)}", body
        )

    async def get_similar_voices(self, dubbing_id: str, speaker_id: str) -> dict:
        require("dubbing_id", dubbing_id)
        require("speaker_id", speaker_id)
        return await self._transport.get(
            f"/v1/dubbing/resource/{quote_id(dubbing_id)}/speaker/{quote_id(speaker_id)}/similar-voices"
        )


def _list_or_none(values: Sequence[str] | None) -> list[str] | None:
    return list(values) if values is not None else None
