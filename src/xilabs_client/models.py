"""Request models shared across endpoints."""

from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field


class VoiceSettings(BaseModel):
    """Per-request voice settings.

    Unset fields are left out of the request so the stored voice settings
    apply.
    """

    model_config = ConfigDict(extra="allow")

    stability: float | None = Field(default=None, ge=0.0, le=1.0)
    similarity_boost: float | None = Field(default=None, ge=0.0, le=1.0)
    style: float | None = Field(default=None, ge=0.0, le=1.0)
    use_speaker_boost: bool | None = None
    speed: float | None = Field(default=None, ge=0.7, le=1.2)


class DialogueInput(BaseModel):
    """One line of a text-to-dialogue request."""

    text: str = Field(min_length=1)
    voice_id: str = Field(min_length=1)


VoiceSettingsLike = Union[VoiceSettings, Mapping[str, Any]]


def dump_model(value: Any) -> Any:
    """Serialize a pydantic model (unset fields dropped); pass anything else through."""
    if isinstance(value, BaseModel):
        return value.model_dump(exclude_none=True)
    if isinstance(value, list):
        return [dump_model(item) for item in value]
    return value
