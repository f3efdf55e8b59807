"""Account information and usage statistics."""

from .base import Endpoint, compact


class User(Endpoint):
    async def get(self) -> dict:
        """GET /v1/user: subscription and account details."""
        return await self._transport.get("/v1/user")


class Usage(Endpoint):
    async def get_character_stats(
        self,
        start_unix: int,
        end_unix: int,
        *,
        include_workspace_metrics: bool | None = None,
        breakdown_type: str | None = None,
        aggregation_interval: str | None = None,
        aggregation_bucket_size: int | None = None,
        metric: str | None = None,
    ) -> dict:
        """Character usage over a time range.

        GET /v1/usage/character-stats

        Args:
            start_unix: Range start, Unix time in milliseconds.
            end_unix: Range end, Unix time in milliseconds.
            include_workspace_metrics: Include the whole workspace.
            breakdown_type: e.g. "voice", "user", "api_keys", "model".
            aggregation_interval: "hour", "day", "week", "month" or "cumulative".
            aggregation_bucket_size: Bucket size in seconds.
            metric: e.g. "credits", "tts_characters", "minutes_used".

        Returns:
            Dict with ``time`` and ``usage`` series.
        """
        params = {
            "start_unix": start_unix,
            "end_unix": end_unix,
            **compact(
                include_workspace_metrics=include_workspace_metrics,
                breakdown_type=breakdown_type,
                aggregation_interval=aggregation_interval,
                aggregation_bucket_size=aggregation_bucket_size,
                metric=metric,
            ),
        }
        return await self._transport.get("/v1/usage/character-stats", params=params)
