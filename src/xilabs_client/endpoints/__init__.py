"""Endpoint groups, one class per API resource."""

from .account import Usage, User
from .audio import AudioIsolation, ForcedAlignment, Music, SoundGeneration
from .audio_native import AudioNative
from .base import Endpoint
from .dubbing import Dubbing
from .history import History
from .pronunciation import PronunciationDictionaries
from .speech import SpeechToSpeech, SpeechToText
from .text_to_dialogue import TextToDialogue
from .text_to_speech import TextToSpeech
from .voice_design import TextToVoice
from .voices import Models, Samples, VoiceLibrary, Voices
from .workspace import (
    ServiceAccounts,
    Webhooks,
    WorkspaceGroups,
    WorkspaceInvites,
    WorkspaceMembers,
    WorkspaceResources,
)

__all__ = [
    "AudioIsolation",
    "AudioNative",
    "Dubbing",
    "Endpoint",
    "ForcedAlignment",
    "History",
    "Models",
    "Music",
    "PronunciationDictionaries",
    "Samples",
    "ServiceAccounts",
    "SoundGeneration",
    "SpeechToSpeech",
    "SpeechToText",
    "TextToDialogue",
    "TextToSpeech",
    "TextToVoice",
    "Usage",
    "User",
    "VoiceLibrary",
    "Voices",
    "Webhooks",
    "WorkspaceGroups",
    "WorkspaceInvites",
    "WorkspaceMembers",
    "WorkspaceResources",
]
