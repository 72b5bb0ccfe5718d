"""Models for the disabled-server storage document."""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ..core.constants import HELPY_CONFIG_VERSION


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StoreMeta(BaseModel):
    """Bookkeeping written alongside the disabled servers."""

    version: int = HELPY_CONFIG_VERSION
    lastModified: datetime = Field(default_factory=_utc_now)

    @field_serializer("lastModified")
    def serialize_last_modified(self, value: datetime) -> str:
        # Millisecond precision with a trailing Z, e.g. 2024-01-01T00:00:00.000Z
        value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class DisabledStoreDocument(BaseModel):
    """Disabled servers storage file (helpy.json)."""

    model_config = ConfigDict(populate_by_name=True)

    disabledServers: Dict[str, Any] = Field(
        default_factory=dict, description="Map of server name to configuration"
    )
    meta: StoreMeta = Field(default_factory=StoreMeta, alias="_meta")

    def to_json_dict(self) -> Dict[str, Any]:
        """Convert to the on-disk JSON layout."""
        return self.model_dump(mode="json", by_alias=True)
