"""Pronunciation dictionaries."""

from typing import IO, Any, Sequence

from .base import Endpoint, compact, quote_id, require

BASE_PATH = "/v1/pronunciation-dictionaries"


class PronunciationDictionaries(Endpoint):
    async def add_from_file(
        self,
        name: str,
        *,
        file: bytes | IO[bytes] | None = None,
        filename: str | None = None,
        description: str | None = None,
        workspace_access: str | None = None,
    ) -> dict:
        """Create a dictionary from a PLS lexicon file.

        POST /v1/pronunciation-dictionaries/add-from-file (multipart)
        """
        require("name", name)
        form: dict[str, Any] = {
            "name": name,
            **compact(description=description, workspace_access=workspace_access),
        }
        if file is not None and filename:
            form["file"] = self._transport.file_part(file, filename)
        return await self._transport.post_multipart(f"{BASE_PATH}/add-from-file", form)

    async def add_from_rules(
        self,
        name: str,
        rules: Sequence[dict],
        *,
        description: str | None = None,
        workspace_access: str | None = None,
    ) -> dict:
        """Create a dictionary from alias or phoneme rules.

        Each rule is a dict such as ``{"type": "alias", "string_to_replace":
        "XI", "alias": "eleven"}``.
        """
        require("name", name)
        rules = list(rules)
        require("rules", rules)
        body = {
            "name": name,
            "rules": rules,
            **compact(description=description, workspace_access=workspace_access),
        }
        return await self._transport.post(f"{BASE_PATH}/add-from-rules", body)

    async def get(self, pronunciation_dictionary_id: str) -> dict:
        require("pronunciation_dictionary_id", pronunciation_dictionary_id)
        return await self._transport.get(f"{BASE_PATH}/{quote_id(pronunciation_dictionary_id)}")

    async def update(self, pronunciation_dictionary_id: str, **attributes: Any) -> dict:
        """PATCH the given attributes (e.g. ``name``, ``description``, ``archived``)."""
        require("pronunciation_dictionary_id", pronunciation_dictionary_id)
        return await self._transport.patch(
            f"{BASE_PATH}/{quote_id(pronunciation_dictionary_id)}", compact(**attributes)
        )

    async def download_version(self, dictionary_id: str, version_id: str) -> bytes:
        """Download one version of a dictionary as a PLS file."""
        require("dictionary_id", dictionary_id)
        require("version_id", version_id)
        return await self._transport.get_binary(
            f"{BASE_PATH}/{quote_id(dictionary_id)}/{quote_id(version_id)}/download"
        )

    async def list(
        self,
        *,
        cursor: str | None = None,
        page_size: int | None = None,
        sort: str | None = None,
        sort_direction: str | None = None,
    ) -> dict:
        params = compact(
            cursor=cursor, page_size=page_size, sort=sort, sort_direction=sort_direction
        )
        return await self._transport.get(BASE_PATH, params=params)
