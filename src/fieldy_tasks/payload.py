"""Models for the JSON a Fieldy device posts and the response sent back."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class TranscriptionSegment(BaseModel):
    """One speaker turn inside a webhook payload.

    Segments are informational only, so values that do not fit a field are
    dropped instead of rejecting the payload.
    """

    model_config = ConfigDict(extra="ignore")

    text: str = ""
    speaker: str | None = None
    start: float | None = None
    end: float | None = None
    duration: float | None = None

    @field_validator("text", mode="wrap")
    @classmethod
    def _text_or_empty(cls, value: Any, handler) -> str:
        try:
            return handler(value)
        except ValidationError:
            return ""

    @field_validator("speaker", "start", "end", "duration", mode="wrap")
    @classmethod
    def _none_when_invalid(cls, value: Any, handler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None


class WebhookPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    date: datetime | None = None
    transcription: str | None = None
    transcriptions: list[TranscriptionSegment] = Field(default_factory=list)

    @field_validator("date", mode="wrap")
    @classmethod
    def _none_when_unparseable(cls, value: Any, handler) -> datetime | None:
        try:
            return handler(value)
        except ValidationError:
            return None

    @field_validator("transcription", mode="before")
    @classmethod
    def _ignore_non_text(cls, value: Any) -> str | None:
        # Devices occasionally send null or structured values here; those carry no tasks.
        return value if isinstance(value, str) else None

    @field_validator("transcriptions", mode="before")
    @classmethod
    def _keep_segment_objects(cls, value: Any) -> list:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, (dict, TranscriptionSegment))]


class ExtractedTask(BaseModel):
    text: str
    category: Literal["quick", "deep", "idea"]
    confidence: float


class ExtractionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    tasks_extracted: int = Field(default=0, alias="tasksExtracted")
    tasks: list[ExtractedTask] = Field(default_factory=list)

    @classmethod
    def from_tasks(cls, tasks) -> "ExtractionResponse":
        """Build a response from extracted task candidates (anything with ``to_dict()``)."""
        extracted = [ExtractedTask(**task.to_dict()) for task in tasks]
        return cls(tasks_extracted=len(extracted), tasks=extracted)
