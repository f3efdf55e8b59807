"""Audio Native: embeddable narrated-article players."""

from typing import IO

from .base import Endpoint, compact, quote_id, require


class AudioNative(Endpoint):
    async def create(
        self,
        name: str,
        *,
        file: bytes | IO[bytes] | None = None,
        filename: str | None = None,
        image: str | None = None,
        author: str | None = None,
        title: str | None = None,
        small: bool | None = None,
        text_color: str | None = None,
        background_color: str | None = None,
        sessionization: int | None = None,
        voice_id: str | None = None,
        model_id: str | None = None,
        auto_convert: bool | None = None,
        apply_text_normalization: str | None = None,
    ) -> dict:
        """Create an Audio Native project.

        POST /v1/audio-native (multipart)

        Args:
            name: Project name.
            file: Optional article content (text or HTML) to narrate.
            filename: Name of ``file``; required for the file to be attached.
            image: Image URL shown in the player.
            author: Author shown in the player.
            title: Title shown in the player.
            small: Use the compact player.
            text_color: Player text color.
            background_color: Player background color.
            sessionization: Minutes to persist the session.
            voice_id: Narration voice.
            model_id: Narration model.
            auto_convert: Convert the project to audio right away.
            apply_text_normalization: "auto", "on", "off" or "apply_english".

        Returns:
            Dict with ``project_id``, ``converting`` and ``html_snippet``.
        """
        require("name", name)
        form = {
            "name": name,
            **compact(
                image=image,
                author=author,
                title=title,
                small=small,
                text_color=text_color,
                background_color=background_color,
                sessionization=sessionization,
                voice_id=voice_id,
                model_id=model_id,
                auto_convert=auto_convert,
                apply_text_normalization=apply_text_normalization,
            ),
        }
        if file is not None and filename:
            form["file"] = self._transport.file_part(file, filename)
        return await self._transport.post_multipart("/v1/audio-native", form)

    async def update_content(
        self,
        project_id: str,
        *,
        file: bytes | IO[bytes] | None = None,
        filename: str | None = None,
        auto_convert: bool | None = None,
        auto_publish: bool | None = None,
    ) -> dict:
        """Replace the content of a project. POST /v1/audio-native/{project_id}/content"""
        require("project_id", project_id)
        form = compact(auto_convert=auto_convert, auto_publish=auto_publish)
        if file is not None and filename:
            form["file"] = self._transport.file_part(file, filename)
        return await self._transport.post_multipart(
            f"/v1/audio-native/{quote_id(project_id)}/content", form
        )

    async def get_settings(self, project_id: str) -> dict:
        require("project_id", project_id)
        return await self._transport.get(f"/v1/audio-native/{quote_id(project_id)}/settings")
