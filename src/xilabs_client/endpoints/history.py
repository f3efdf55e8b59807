"""Generation history."""

from typing import Sequence

from .base import Endpoint, compact, quote_id, require


class History(Endpoint):
    async def list(
        self,
        *,
        page_size: int | None = None,
        start_after_history_item_id: str | None = None,
        voice_id: str | None = None,
        search: str | None = None,
        source: str | None = None,
    ) -> dict:
        """List generated items, newest first.

        GET /v1/history

        Args:
            page_size: Items per page (max 1000).
            start_after_history_item_id: Pagination cursor.
            voice_id: Only items generated with this voice.
            search: Free-text search.
            source: "TTS" or "STS".

        Returns:
            Dict with ``history``, ``last_history_item_id`` and ``has_more``.
        """
        params = compact(
            page_size=page_size,
            start_after_history_item_id=start_after_history_item_id,
            voice_id=voice_id,
            search=search,
            source=source,
        )
        return await self._transport.get("/v1/history", params=params)

    async def get(self, history_item_id: str) -> dict:
        require("history_item_id", history_item_id)
        return await self._transport.get(f"/v1/history/{quote_id(history_item_id)}")

    async def delete(self, history_item_id: str) -> dict:
        require("history_item_id", history_item_id)
        return await self._transport.delete(f"/v1/history/{quote_id(history_item_id)}")

    async def get_audio(self, history_item_id: str) -> bytes:
        """GET /v1/history/{history_item_id}/audio"""
        require("history_item_id", history_item_id)
        return await self._transport.get_binary(f"/v1/history/{quote_id(history_item_id)}/audio")

    async def download(
        self,
        history_item_ids: Sequence[str],
        *,
        output_format: str | None = None,
    ) -> bytes:
        """Download one item as audio, or several as a zip archive.

        POST /v1/history/download
        """
        ids = list(history_item_ids)
        require("history_item_ids", ids)
        body = {"history_item_ids": ids, **compact(output_format=output_format)}
        return await self._transport.post_binary("/v1/history/download", body)
