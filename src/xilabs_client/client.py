"""Top-level client tying configuration, transport and endpoints together."""

import logging

import httpx

from .config import ClientConfig
from .endpoints import (
    AudioIsolation,
    AudioNative,
    Dubbing,
    ForcedAlignment,
    History,
    Models,
    Music,
    PronunciationDictionaries,
    Samples,
    ServiceAccounts,
    SoundGeneration,
    SpeechToSpeech,
    SpeechToText,
    TextToDialogue,
    TextToSpeech,
    TextToVoice,
    Usage,
    User,
    VoiceLibrary,
    Voices,
    Webhooks,
    WorkspaceGroups,
    WorkspaceInvites,
    WorkspaceMembers,
    WorkspaceResources,
)
from .transport import Transport
from .websocket import TextToSpeechWebSocket

logger = logging.getLogger(__name__)


class XiLabsClient:
    """Async client for the ElevenLabs API.

    Usage:
        async with XiLabsClient(api_key="...") as client:
            audio = await client.text_to_speech.convert(voice_id, "Hello")
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        *,
        config: ClientConfig | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
        connect_timeout: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: API key. Falls back to ``config``, then ELEVENLABS_API_KEY.
            base_url: API base URL. Falls back to ``config``, then
                ELEVENLABS_BASE_URL, then https://api.elevenlabs.io.
            config: Injected configuration.
            http_transport: Optional httpx transport (e.g. httpx.MockTransport).
            timeout: Read timeout in seconds.
            connect_timeout: Connect timeout in seconds.

        Raises:
            ConfigurationError: If no API key can be resolved.
        """
        self.config = ClientConfig.resolve(
            api_key=api_key,
            base_url=base_url,
            config=config,
            timeout=timeout,
            connect_timeout=connect_timeout,
        )
        logger.debug(f"Client configured: {self.config.redacted()}")

        self.transport = Transport(self.config, http_transport=http_transport)

        self.text_to_speech = TextToSpeech(self.transport)
        self.text_to_dialogue = TextToDialogue(self.transport)
        self.sound_generation = SoundGeneration(self.transport)
        self.speech_to_speech = SpeechToSpeech(self.transport)
        self.speech_to_text = SpeechToText(self.transport)
        self.audio_isolation = AudioIsolation(self.transport)
        self.forced_alignment = ForcedAlignment(self.transport)
        self.text_to_voice = TextToVoice(self.transport)
        self.music = Music(self.transport)
        self.audio_native = AudioNative(self.transport)
        self.dubbing = Dubbing(self.transport)

        self.voices = Voices(self.transport)
        self.models = Models(self.transport)
        self.samples = Samples(self.transport)
        self.voice_library = VoiceLibrary(self.transport)
        self.history = History(self.transport)
        self.usage = Usage(self.transport)
        self.user = User(self.transport)
        self.pronunciation_dictionaries = PronunciationDictionaries(self.transport)

        self.workspace_groups = WorkspaceGroups(self.transport)
        self.workspace_invites = WorkspaceInvites(self.transport)
        self.workspace_members = WorkspaceMembers(self.transport)
        self.workspace_resources = WorkspaceResources(self.transport)
        self.webhooks = Webhooks(self.transport)
        self.service_accounts = ServiceAccounts(self.transport)

        self.websocket = TextToSpeechWebSocket(self.config)

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def base_url(self) -> str:
        return self.config.base_url

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.transport.close()

    async def __aenter__(self) -> "XiLabsClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
