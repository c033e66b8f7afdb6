from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer

SCHEMA_VERSION = 1

ColorScheme = Literal["light", "dark", "system"]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NotificationPreferences(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    enabled: bool = False
    ntfyUrl: str | None = None


class Preferences(BaseModel):
    """
    User preferences. Open: unknown keys are kept as-is and round-trip to disk.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    colorScheme: ColorScheme = "system"
    language: str = "en"
    notifications: NotificationPreferences | None = None

    @model_serializer(mode="wrap")
    def _omit_unset_notifications(self, handler):
        data = handler(self)
        # Only the optional section is dropped; explicit nulls in other keys are kept.
        if data.get("notifications") is None:
            data.pop("notifications", None)
        return data

    def merged(self, updates: Mapping[str, Any]) -> "Preferences":
        # Shallow merge: top-level keys in `updates` replace, the rest are retained.
        current = self.model_dump(mode="json")
        return Preferences.model_validate({**current, **dict(updates)})


DEFAULT_PREFERENCES = Preferences()


class PreferencesMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    schema_version: int = SCHEMA_VERSION
    created_at: datetime = Field(default_factory=utcnow)
    last_updated: datetime = Field(default_factory=utcnow)

    @field_validator("schema_version")
    @classmethod
    def _known_schema_version(cls, v: int) -> int:
        if v > SCHEMA_VERSION:
            raise ValueError(f"schema_version {v} is newer than supported version {SCHEMA_VERSION}")
        return v

    @field_validator("created_at", "last_updated")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        return v if v.tzinfo is not None else v.replace(tzinfo=timezone.utc)

    def touched(self, now: datetime | None = None) -> "PreferencesMetadata":
        ts = now or utcnow()
        # Never move backwards, even if the wall clock does.
        return self.model_copy(update={"last_updated": max(ts, self.last_updated)})


class PreferencesDocument(BaseModel):
    """
    Mirrors the on-disk preferences.json schema:
      {
        "preferences": { "colorScheme": "system", "language": "en", ... },
        "metadata": { "schema_version": 1, "created_at": "...", "last_updated": "..." }
      }
    """

    model_config = ConfigDict(frozen=True)

    preferences: Preferences
    metadata: PreferencesMetadata

    def with_preferences(self, updates: Mapping[str, Any], now: datetime | None = None) -> "PreferencesDocument":
        return self.model_copy(
            update={
                "preferences": self.preferences.merged(updates),
                "metadata": self.metadata.touched(now),
            }
        )


def default_document() -> PreferencesDocument:
    now = utcnow()
    return PreferencesDocument(
        preferences=DEFAULT_PREFERENCES.model_copy(deep=True),
        metadata=PreferencesMetadata(schema_version=SCHEMA_VERSION, created_at=now, last_updated=now),
    )
