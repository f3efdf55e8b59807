"""Base class for endpoint groups."""

from typing import Any
from urllib.parse import quote

from ..models import dump_model
from ..transport import Transport


def compact(**values: Any) -> dict[str, Any]:
    """Drop None values and serialize pydantic models.

    Unset options are omitted from requests so the API applies its own
    defaults.
    """
    return {key: dump_model(value) for key, value in values.items() if value is not None}


def require(name: str, value: Any) -> None:
    """Raise ValueError if a required argument is missing or blank."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{name} is required")
    if isinstance(value, (list, tuple)) and not value:
        raise ValueError(f"{name} must be a non-empty list")


def quote_id(value: Any) -> str:
    """Escape an identifier for use as a single URL path segment."""
    return quote(str(value), safe="")


class Endpoint:
    """A group of API operations sharing one transport."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport
