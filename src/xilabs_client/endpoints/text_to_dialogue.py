"""Multi-voice dialogue synthesis."""

from typing import Any, Sequence

from ..models import DialogueInput
from ..transport import ChunkCallback, StreamResult
from .base import Endpoint, compact, require
from .text_to_speech import DEFAULT_OUTPUT_FORMAT


def _inputs(inputs: Sequence[DialogueInput | dict]) -> list[dict]:
    require("inputs", inputs)
    return [
        item.model_dump() if isinstance(item, DialogueInput) else dict(item)
        for item in inputs
    ]


class TextToDialogue(Endpoint):
    """Turn a list of (text, voice_id) lines into one audio track."""

    async def convert(
        self,
        inputs: Sequence[DialogueInput | dict],
        *,
        model_id: str | None = None,
        settings: dict[str, Any] | None = None,
        seed: int | None = None,
        output_format: str | None = None,
    ) -> bytes:
        """POST /v1/text-to-dialogue and return the audio bytes."""
        body = {
            "inputs": _inputs(inputs),
            **compact(model_id=model_id, settings=settings or None, seed=seed),
        }
        return await self._transport.post_binary(
            "/v1/text-to-dialogue",
            body,
            params=compact(output_format=output_format),
        )

    async def stream(
        self,
        inputs: Sequence[DialogueInput | dict],
        on_chunk: ChunkCallback,
        *,
        model_id: str | None = None,
        language_code: str | None = None,
        settings: dict[str, Any] | None = None,
        pronunciation_dictionary_locators: list[dict] | None = None,
        seed: int | None = None,
        apply_text_normalization: str | None = None,
        output_format: str = DEFAULT_OUTPUT_FORMAT,
    ) -> StreamResult:
        """POST /v1/text-to-dialogue/stream, delivering audio chunks to ``on_chunk``."""
        body = {
            "inputs": _inputs(inputs),
            **compact(
                model_id=model_id,
                language_code=language_code,
                settings=settings,
                pronunciation_dictionary_locators=pronunciation_dictionary_locators,
                seed=seed,
                apply_text_normalization=apply_text_normalization,
            ),
        }
        return await self._transport.post_streaming(
            "/v1/text-to-dialogue/stream",
            body,
            on_chunk,
            params={"output_format": output_format},
        )
