"""xilabs-client - Async Python client for the ElevenLabs speech API."""

__version__ = "0.1.0"

from .alignment import WordTiming, words_from_alignment
from .client import XiLabsClient
from .config import ClientConfig
from .errors import (
    APIError,
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    ForbiddenError,
    NotFoundError,
    PaymentRequiredError,
    RateLimitError,
    RequestTimeoutError,
    ServiceUnavailableError,
    TransportError,
    UnprocessableEntityError,
    ValidationError,
    WebSocketError,
    XiLabsError,
)
from .models import DialogueInput, VoiceSettings
from .transport import FilePart, StreamResult, mime_for

__all__ = [
    "XiLabsClient",
    "ClientConfig",
    "VoiceSettings",
    "DialogueInput",
    "FilePart",
    "StreamResult",
    "WordTiming",
    "mime_for",
    "words_from_alignment",
    "XiLabsError",
    "APIError",
    "ValidationError",
    "BadRequestError",
    "AuthenticationError",
    "PaymentRequiredError",
    "ForbiddenError",
    "NotFoundError",
    "RequestTimeoutError",
    "UnprocessableEntityError",
    "RateLimitError",
    "ServiceUnavailableError",
    "TransportError",
    "WebSocketError",
    "ConfigurationError",
]
