"""Shared HTTP transport for the ElevenLabs API.

Every endpoint call goes through :class:`Transport`, which injects the
``xi-api-key`` header, encodes JSON and multipart bodies, feeds streamed
responses to caller callbacks, and turns non-2xx responses into typed errors.
"""

import inspect
import json
import logging
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import IO, Any, Awaitable, Callable, Mapping, Union

import httpx

from .config import ClientConfig
from .errors import APIError, TransportError, error_for_status

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = {
    ".mp4": "video/mp4",
    ".mov": "video/quicktime",
    ".avi": "video/x-msvideo",
    ".mkv": "video/x-matroska",
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".flac": "audio/flac",
    ".m4a": "audio/mp4",
    ".pdf": "application/pdf",
    ".epub": "application/epub+zip",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".doc": "application/msword",
    ".txt": "text/plain",
    ".html": "text/html",
    ".htm": "text/html",
    ".md": "text/markdown",
}

# Raw error bodies longer than this are cut before being used as a message
ERROR_BODY_LIMIT = 200

ChunkCallback = Callable[[bytes], Union[None, Awaitable[None]]]
EventCallback = Callable[[Any], Union[None, Awaitable[None]]]


def mime_for(filename: str) -> str:
    """Return the MIME type for a filename based on its extension."""
    suffix = PurePosixPath(filename.replace("\\", "/")).suffix.lower()
    return MIME_TYPES.get(suffix, DEFAULT_MIME_TYPE)


@dataclass
class FilePart:
    """A file field in a multipart request."""

    content: bytes | IO[bytes]
    filename: str
    content_type: str = DEFAULT_MIME_TYPE


@dataclass
class StreamResult:
    """Summary of a completed streaming response."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    bytes_received: int = 0
    chunks: int = 0
    events: int = 0  # parsed JSON lines delivered (timestamp streams only)
    skipped_lines: int = 0  # malformed JSON lines dropped (timestamp streams only)


def _truncate(text: str) -> str:
    if len(text) > ERROR_BODY_LIMIT:
        return text[:ERROR_BODY_LIMIT] + "..."
    return text


def _flatten_message(value: Any) -> str:
    """Reduce a nested detail/errors value to a single message string."""
    if isinstance(value, list):
        if not value:
            return ""
        value = value[0]
    if isinstance(value, dict):
        inner = value.get("message") or value.get("msg")
        return str(inner) if inner else json.dumps(value)
    return str(value)


def extract_error_message(body: str) -> str:
    """Pull a human-readable message out of an error response body.

    Args:
        body: Raw response text.

    Returns:
        The first of ``detail``, ``message``, ``error`` or ``errors`` from a
        JSON object body, otherwise the raw text (truncated). Empty string
        for an empty body.
    """
    if not body or not body.strip():
        return ""

    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        return _truncate(body)

    if isinstance(data, dict):
        for key in ("detail", "message", "error", "errors"):
            value = data.get(key)
            if value:
                message = _flatten_message(value)
                if message:
                    return message

    return _truncate(body)


def raise_for_status(status_code: int, body: str) -> None:
    """Raise the typed error for a non-2xx status; no-op for 2xx."""
    if 200 <= status_code < 300:
        return
    error_cls, default_message = error_for_status(status_code)
    message = extract_error_message(body) or default_message
    raise error_cls(message, status_code=status_code, body=body)


def _compact(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return None
    return {key: value for key, value in params.items() if value is not None}


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def encode_multipart(fields: Mapping[str, Any]) -> list[tuple[str, tuple]]:
    """Encode form fields as an httpx ``files`` list.

    Plain values are sent as filename-less parts so the request is always
    multipart/form-data, even when no file is attached.

    Args:
        fields: Field name to value, list of values, FilePart, or list of
            FileParts. None values are omitted.

    Returns:
        List of (field name, part tuple) accepted by httpx ``files=``.
    """
    parts: list[tuple[str, tuple]] = []
    for name, value in fields.items():
        if value is None:
            continue
        items = value if isinstance(value, (list, tuple)) else [value]
        for item in items:
            if item is None:
                continue
            if isinstance(item, FilePart):
                parts.append((name, (item.filename, item.content, item.content_type)))
            else:
                parts.append((name, (None, _form_value(item))))
    return parts


async def invoke_callback(callback: Callable[..., Any], *args: Any) -> None:
    """Call a sync or async callback."""
    result = callback(*args)
    if inspect.isawaitable(result):
        await result


def _decode_body(response: httpx.Response) -> Any:
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise APIError(
                f"Invalid JSON in response: {_truncate(response.text)}",
                status_code=response.status_code,
                body=response.text,
            ) from e
    return response.content


class Transport:
    """Authenticated async HTTP transport bound to one base URL."""

    def __init__(
        self,
        config: ClientConfig,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            config: Resolved connection configuration.
            http_transport: Optional httpx transport (e.g. httpx.MockTransport
                in tests).
        """
        self.config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers={
                "xi-api-key": config.api_key,
                "User-Agent": config.user_agent,
            },
            timeout=httpx.Timeout(config.timeout, connect=config.connect_timeout),
            transport=http_transport,
        )

    @property
    def api_key(self) -> str:
        return self.config.api_key

    # -------------------------------------------------------------------------
    # Request plumbing
    # -------------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_body: Any = None,
        files: list[tuple[str, tuple]] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(
                method,
                path,
                params=_compact(params),
                json=json_body,
                files=files,
                headers=headers,
            )
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP error during {method} {path}: {e}") from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    def _handle_response(self, response: httpx.Response, binary: bool = False) -> Any:
        """Return the decoded body of a 2xx response or raise a typed error."""
        raise_for_status(response.status_code, response.text)
        if binary:
            return response.content
        return _decode_body(response)

    async def _stream(
        self,
        method: str,
        path: str,
        on_chunk: ChunkCallback,
        *,
        params: Mapping[str, Any] | None = None,
        json_body: Any = None,
        files: list[tuple[str, tuple]] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> StreamResult:
        try:
            async with self._client.stream(
                method,
                path,
                params=_compact(params),
                json=json_body,
                files=files,
                headers=headers,
            ) as response:
                logger.debug(f"{method} {path} -> {response.status_code} (streaming)")
                if not 200 <= response.status_code < 300:
                    await response.aread()
                    raise_for_status(response.status_code, response.text)

                result = StreamResult(
                    status_code=response.status_code,
                    headers=dict(response.headers),
                )
                async for chunk in response.aiter_bytes():
                    if not chunk:
                        continue
                    result.bytes_received += len(chunk)
                    result.chunks += 1
                    await invoke_callback(on_chunk, chunk)
                return result
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP error during {method} {path} stream: {e}") from e

    # -------------------------------------------------------------------------
    # Verbs
    # -------------------------------------------------------------------------

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET and return the decoded body (JSON or raw bytes)."""
        response = await self._request("GET", path, params=params)
        return self._handle_response(response)

    async def post(
        self,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """POST a JSON body and return the decoded response."""
        response = await self._request("POST", path, params=params, json_body=body, headers=headers)
        return self._handle_response(response)

    async def patch(
        self,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """PATCH a JSON body and return the decoded response."""
        response = await self._request("PATCH", path, params=params, json_body=body)
        return self._handle_response(response)

    async def delete(
        self,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """DELETE, optionally with a JSON body, and return the decoded response."""
        response = await self._request("DELETE", path, params=params, json_body=body)
        return self._handle_response(response)

    async def post_multipart(
        self,
        path: str,
        fields: Mapping[str, Any],
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """POST a multipart/form-data body and return the decoded response."""
        response = await self._request(
            "POST", path, params=params, files=encode_multipart(fields)
        )
        return self._handle_response(response)

    async def get_binary(self, path: str, params: Mapping[str, Any] | None = None) -> bytes:
        """GET and return the raw response bytes."""
        response = await self._request("GET", path, params=params)
        return self._handle_response(response, binary=True)

    async def post_binary(
        self,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> bytes:
        """POST a JSON body and return the raw response bytes."""
        response = await self._request("POST", path, params=params, json_body=body, headers=headers)
        return self._handle_response(response, binary=True)

    async def post_streaming(
        self,
        path: str,
        body: Any,
        on_chunk: ChunkCallback,
        params: Mapping[str, Any] | None = None,
    ) -> StreamResult:
        """POST a JSON body and feed each response chunk to ``on_chunk``.

        Args:
            path: API path.
            body: JSON-serializable request body.
            on_chunk: Called with each chunk of bytes as it arrives. May be a
                coroutine function.
            params: Query parameters.

        Returns:
            StreamResult once the response is fully consumed.

        Raises:
            XiLabsError: Typed error for a non-2xx status (no chunk is delivered).
        """
        return await self._stream(
            "POST",
            path,
            on_chunk,
            params=params,
            json_body=body,
            headers={"Accept": "audio/mpeg"},
        )

    async def get_streaming(
        self,
        path: str,
        on_chunk: ChunkCallback,
        params: Mapping[str, Any] | None = None,
    ) -> StreamResult:
        """GET and feed each response chunk to ``on_chunk``."""
        return await self._stream(
            "GET", path, on_chunk, params=params, headers={"Accept": "audio/mpeg"}
        )

    async def post_multipart_streaming(
        self,
        path: str,
        fields: Mapping[str, Any],
        on_chunk: ChunkCallback,
        params: Mapping[str, Any] | None = None,
    ) -> StreamResult:
        """POST a multipart body and feed each response chunk to ``on_chunk``."""
        return await self._stream(
            "POST", path, on_chunk, params=params, files=encode_multipart(fields)
        )

    async def post_streaming_with_timestamps(
        self,
        path: str,
        body: Any,
        on_event: EventCallback,
        params: Mapping[str, Any] | None = None,
    ) -> StreamResult:
        """POST a JSON body and parse the newline-delimited JSON response.

        Chunks are buffered and split on newlines; each complete line is
        decoded and passed to ``on_event``. Lines that are not valid JSON are
        logged, counted in ``StreamResult.skipped_lines`` and never passed to
        the callback.

        Args:
            path: API path.
            body: JSON-serializable request body.
            on_event: Called with each decoded JSON object. May be a coroutine
                function.
            params: Query parameters.

        Returns:
            StreamResult with ``events`` and ``skipped_lines`` filled in.
        """
        buffer = b""
        events = 0
        skipped = 0

        async def handle_line(line: bytes) -> None:
            nonlocal events, skipped
            line = line.strip()
            if not line:
                return
            try:
                event = json.loads(line)
            except (json.JSONDecodeError, UnicodeDecodeError):
                skipped += 1
                logger.warning(f"Skipping malformed line in {path} stream: {line[:80]!r}")
                return
            events += 1
            await invoke_callback(on_event, event)

        async def on_chunk(chunk: bytes) -> None:
            nonlocal buffer
            buffer += chunk
            while b"\n" in buffer:
                line, buffer = buffer.split(b"\n", 1)
                await handle_line(line)

        result = await self._stream("POST", path, on_chunk, params=params, json_body=body)

        # Stream ended without a trailing newline
        if buffer.strip():
            await handle_line(buffer)

        result.events = events
        result.skipped_lines = skipped
        return result

    def file_part(self, file: bytes | IO[bytes], filename: str) -> FilePart:
        """Wrap file content and its name as a multipart file part."""
        return FilePart(content=file, filename=filename, content_type=mime_for(filename))

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
