import re
import uuid

from pydantic import BaseModel, Field, field_validator

from mediafolder.config import DEFAULT_THUMBNAIL_QUALITY

HEX_ID_RE = re.compile(r"^[0-9a-f]{32}$")


def new_id() -> str:
    return uuid.uuid4().hex


def normalize_id(value: str) -> str:
    value = (value or "").strip().lower().replace("-", "")
    if not HEX_ID_RE.match(value):
        raise ValueError("id must be a 32 character hex string")
    return value


def _optional_id(value: str | None) -> str | None:
    if value is None:
        return None
    return normalize_id(value)


class FolderConfiguration(BaseModel):
    id: str
    createThumbnails: bool = True
    keepAspectRatio: bool = True
    thumbnailQuality: int = Field(default=DEFAULT_THUMBNAIL_QUALITY, ge=0, le=100)


class Folder(BaseModel):
    id: str
    name: str
    parentId: str | None = None
    useParentConfiguration: bool = False
    configurationId: str | None = None


class ConfigurationPayload(BaseModel):
    id: str | None = None
    createThumbnails: bool = True
    keepAspectRatio: bool = True
    thumbnailQuality: int = Field(default=DEFAULT_THUMBNAIL_QUALITY, ge=0, le=100)

    @field_validator("id")
    @classmethod
    def check_id(cls, value: str | None) -> str | None:
        return _optional_id(value)


class CreateFolderPayload(BaseModel):
    id: str | None = None
    name: str = Field(min_length=1, max_length=255)
    parentId: str | None = None
    useParentConfiguration: bool = False
    configuration: ConfigurationPayload | None = None

    @field_validator("id", "parentId")
    @classmethod
    def check_ids(cls, value: str | None) -> str | None:
        return _optional_id(value)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value
