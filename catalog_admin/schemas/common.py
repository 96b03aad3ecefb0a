"""Shared schema helpers: stored-record base, legacy key normalization, sentinels."""

import logging
from datetime import datetime, timezone
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)

# Display sentinels for references that do not resolve
UNKNOWN_ARTIST = "Unknown Artist"
UNKNOWN_ALBUM = "Unknown Album"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_TIMESTAMP_KEYS = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def rename_legacy_keys(data: dict[str, Any], aliases: dict[str, str]) -> dict[str, Any]:
    """
    Return a copy of ``data`` with legacy keys renamed to canonical ones.

    A canonical key already present in the document wins over its legacy
    spelling. Keys holding ``None`` are dropped so field defaults apply.
    """
    normalized = dict(data)
    for legacy, canonical in aliases.items():
        if legacy in normalized:
            value = normalized.pop(legacy)
            if normalized.get(canonical) is None:
                normalized[canonical] = value
    return {key: value for key, value in normalized.items() if value is not None}


def coerce_timestamp(value: Any) -> Any:
    """
    Normalize a stored timestamp to an aware datetime.

    Accepts the ``{"seconds": ..., "nanoseconds": ...}`` form and ISO
    strings. Values without an offset are taken as UTC. Anything else is
    returned unchanged for field validation to judge.
    """
    if isinstance(value, dict) and "seconds" in value:
        seconds = float(value["seconds"]) + float(value.get("nanoseconds", 0)) / 1e9
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            return value
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class StoredRecord(BaseModel):
    """
    Base for records read back from a collection.

    Subclasses list the legacy spellings they accept in ``LEGACY_KEYS``;
    they are normalized on read and never written back.
    """

    model_config = ConfigDict(extra="ignore")

    LEGACY_KEYS: ClassVar[dict[str, str]] = {}

    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_legacy_shape(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return rename_legacy_keys(data, {**_TIMESTAMP_KEYS, **cls.LEGACY_KEYS})

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _coerce_timestamps(cls, value: Any) -> Any:
        return coerce_timestamp(value)

    @classmethod
    def from_document(cls, record_id: str, data: dict[str, Any]):
        """
        Build a record from a stored document body.

        Fields holding values of the wrong kind (``year: ""``,
        ``duration: "3:45"``) fall back to their defaults so one bad field
        never fails a listing.
        """
        try:
            return cls.model_validate({**data, "id": record_id})
        except ValidationError as e:
            invalid = {error["loc"][0] for error in e.errors() if error["loc"]}
            if not invalid or "id" in invalid:
                raise
            logger.warning(
                f"[StoredRecord] {cls.__name__} {record_id}: "
                f"ignoring invalid fields {sorted(map(str, invalid))}"
            )
        normalized = rename_legacy_keys(data, {**_TIMESTAMP_KEYS, **cls.LEGACY_KEYS})
        cleaned = {key: value for key, value in normalized.items() if key not in invalid}
        return cls.model_validate({**cleaned, "id": record_id})


class CreatedResponse(BaseModel):
    """Schema for create responses."""
    id: str
