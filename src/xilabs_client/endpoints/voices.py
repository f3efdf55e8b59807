"""Voices, models, voice samples and the shared voice library."""

import logging
from typing import IO, Any, Sequence, Union

from ..errors import APIError, NotFoundError, ValidationError
from ..transport import FilePart
from .base import Endpoint, compact, quote_id, require

logger = logging.getLogger(__name__)

# A voice sample: a ready FilePart, a (filename, content) pair, or bare
# content that is uploaded as an MP3.
Sample = Union[FilePart, tuple[str, Union[bytes, IO[bytes]]], bytes, IO[bytes]]

# Failures the voice predicates report as False instead of raising
PREDICATE_ERRORS = (NotFoundError, ValidationError, APIError)


class Voices(Endpoint):
    """Voice management."""

    def _sample_parts(self, samples: Sequence[Sample] | None) -> list[FilePart]:
        parts = []
        for index, sample in enumerate(samples or ()):
            if isinstance(sample, FilePart):
                parts.append(sample)
            elif isinstance(sample, tuple):
                filename, content = sample
                parts.append(self._transport.file_part(content, filename))
            else:
                parts.append(FilePart(sample, f"sample_{index}.mp3", "audio/mpeg"))
        return parts

    @staticmethod
    def _label_fields(labels: dict[str, Any] | None) -> dict[str, str]:
        return {f"labels[{key}]": str(value) for key, value in (labels or {}).items()}

    async def get(self, voice_id: str) -> dict:
        """GET /v1/voices/{voice_id}"""
        require("voice_id", voice_id)
        return await self._transport.get(f"/v1/voices/{quote_id(voice_id)}")

    async def list(self) -> dict:
        """GET /v1/voices"""
        return await self._transport.get("/v1/voices")

    async def create(
        self,
        name: str,
        samples: Sequence[Sample] | None = None,
        description: str = "",
        labels: dict[str, Any] | None = None,
    ) -> dict:
        """Create an instant voice clone from audio samples.

        POST /v1/voices/add (multipart)

        Args:
            name: Voice name.
            samples: Audio samples; each becomes a ``files`` part.
            description: Voice description.
            labels: Labels, sent as ``labels[key]`` fields.

        Returns:
            Dict with the new ``voice_id``.
        """
        require("name", name)
        form: dict[str, Any] = {
            "name": name,
            "description": description or "",
            **self._label_fields(labels),
            "files": self._sample_parts(samples),
        }
        return await self._transport.post_multipart("/v1/voices/add", form)

    async def edit(
        self,
        voice_id: str,
        samples: Sequence[Sample] | None = None,
        *,
        name: str | None = None,
        description: str | None = None,
        labels: dict[str, Any] | None = None,
    ) -> dict:
        """Update a voice's name, description, labels or samples.

        POST /v1/voices/{voice_id}/edit (multipart)
        """
        require("voice_id", voice_id)
        form: dict[str, Any] = {
            **compact(name=name, description=description),
            **self._label_fields(labels),
            "files": self._sample_parts(samples),
        }
        return await self._transport.post_multipart(f"/v1/voices/{quote_id(voice_id)}/edit", form)

    async def delete(self, voice_id: str) -> dict:
        """DELETE /v1/voices/{voice_id}"""
        require("voice_id", voice_id)
        return await self._transport.delete(f"/v1/voices/{quote_id(voice_id)}")

    async def is_banned(self, voice_id: str) -> bool:
        """Return True if the voice's safety control is BAN.

        Not-found, client-error and server-error responses yield False;
        authentication, rate-limit and network failures are raised.
        """
        try:
            voice = await self.get(voice_id)
        except PREDICATE_ERRORS as e:
            logger.warning(f"Could not check ban status of voice {voice_id}: {e}")
            return False
        return voice.get("safety_control") == "BAN"

    async def is_active(self, voice_id: str) -> bool:
        """Return True if the voice appears in the account's voice list.

        Failures are handled as in :meth:`is_banned`.
        """
        try:
            data = await self.list()
        except PREDICATE_ERRORS as e:
            logger.warning(f"Could not list voices to check {voice_id}: {e}")
            return False
        return any(voice.get("voice_id") == voice_id for voice in data.get("voices", []))


class Models(Endpoint):
    async def list(self) -> Any:
        """GET /v1/models"""
        return await self._transport.get("/v1/models")


class Samples(Endpoint):
    async def delete(self, voice_id: str, sample_id: str) -> dict:
        """DELETE /v1/voices/{voice_id}/samples/{sample_id}"""
        require("voice_id", voice_id)
        require("sample_id", sample_id)
        return await self._transport.delete(
            f"/v1/voices/{quote_id(voice_id)}/samples/{quote_id(sample_id)}"
        )


class VoiceLibrary(Endpoint):
    """Voices shared by the community."""

    async def list_shared(
        self,
        *,
        page_size: int | None = None,
        category: str | None = None,
        gender: str | None = None,
        age: str | None = None,
        accent: str | None = None,
        language: str | None = None,
        locale: str | None = None,
        search: str | None = None,
        use_cases: Sequence[str] | None = None,
        descriptives: Sequence[str] | None = None,
        featured: bool | None = None,
        min_notice_period_days: int | None = None,
        include_custom_rates: bool | None = None,
        include_live_moderated: bool | None = None,
        reader_app_enabled: bool | None = None,
        owner_id: str | None = None,
        sort: str | None = None,
        page: int | None = None,
    ) -> dict:
        """GET /v1/shared-voices with optional filters."""
        params = compact(
            page_size=page_size,
            category=category,
            gender=gender,
            age=age,
            accent=accent,
            language=language,
            locale=locale,
            search=search,
            use_cases=use_cases,
            descriptives=descriptives,
            featured=featured,
            min_notice_period_days=min_notice_period_days,
            include_custom_rates=include_custom_rates,
            include_live_moderated=include_live_moderated,
            reader_app_enabled=reader_app_enabled,
            owner_id=owner_id,
            sort=sort,
            page=page,
        )
        return await self._transport.get("/v1/shared-voices", params=params)

    async def add_shared(self, public_user_id: str, voice_id: str, new_name: str) -> dict:
        """Copy a shared voice into the account under ``new_name``."""
        require("public_user_id", public_user_id)
        require("voice_id", voice_id)
        require("new_name", new_name)
        return await self._transport.post(
            f"/v1/voices/add/{quote_id(public_user_id)}/{quote_id(voice_id)}",
            {"new_name": new_name},
        )
