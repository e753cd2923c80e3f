"""
Defines Pydantic models for validation of requests and responses.

The JSON API speaks camelCase (``publisherId``, ``storeId``...) while the ORM
uses snake_case columns; field aliases bridge the two.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from app.db.models.enums import PlatformEnum


class GamePayload(BaseModel):
    """Body of create and update. Update is a full replace: omitted fields are stored as null."""

    model_config = ConfigDict(populate_by_name=True)

    publisher_id: Optional[str] = Field(None, alias="publisherId")
    # always required, so a full replace can clear every field except name
    name: str
    platform: Optional[PlatformEnum] = None
    store_id: Optional[str] = Field(None, alias="storeId")
    bundle_id: Optional[str] = Field(None, alias="bundleId")
    app_version: Optional[str] = Field(None, alias="appVersion")
    is_published: Optional[bool] = Field(None, alias="isPublished")

    def to_record(self) -> dict:
        return {
            "publisher_id": self.publisher_id,
            "name": self.name,
            "platform": self.platform.value if self.platform else None,
            "store_id": self.store_id,
            "bundle_id": self.bundle_id,
            "app_version": self.app_version,
            "is_published": self.is_published,
        }


class GameSearch(BaseModel):
    name: Optional[str] = None
    platform: Optional[str] = None


class GameOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    publisher_id: Optional[str] = Field(None, alias="publisherId")
    name: Optional[str] = None
    platform: Optional[str] = None
    store_id: Optional[str] = Field(None, alias="storeId")
    bundle_id: Optional[str] = Field(None, alias="bundleId")
    app_version: Optional[str] = Field(None, alias="appVersion")
    is_published: Optional[bool] = Field(None, alias="isPublished")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class GameDeleted(BaseModel):
    id: int
