"""
Configuration for the MongoDB accounts storage.

Settings are loaded from environment variables; MongoOptions is the explicit
per-store options object merged over defaults at construction time.
"""
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


def utc_now() -> datetime:
    """Default clock used for token and timestamp fields."""
    return datetime.now(timezone.utc)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_db_name: str = "accounts"

    # Users collection layout
    users_collection: str = "users"
    convert_user_id_to_object_id: bool = True
    timestamp_created_at: str = "createdAt"
    timestamp_updated_at: str = "updatedAt"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class Timestamps(BaseModel):
    """Names of the timestamp fields written on user documents."""
    created_at: str = Field(default="createdAt", description="Creation timestamp field")
    updated_at: str = Field(default="updatedAt", description="Last update timestamp field")


class MongoOptions(BaseModel):
    """
    Options controlling how the credential store reads and writes users.
    """
    collection_name: str = Field(default="users", description="Users collection name")
    convert_user_id_to_object_id: bool = Field(
        default=True,
        description="Convert string user ids to bson ObjectId before querying"
    )
    timestamps: Timestamps = Field(default_factory=Timestamps)
    date_provider: Callable[[], Any] = Field(
        default=utc_now,
        description="Clock returning the value stored in timestamp and `when` fields"
    )

    def merge(self, overrides: Optional[Union["MongoOptions", Mapping[str, Any]]] = None) -> "MongoOptions":
        """
        Return a copy of these options with `overrides` deep-merged on top.

        Args:
            overrides: Mapping of option values, or another MongoOptions whose
                explicitly set fields take precedence

        Returns:
            New MongoOptions instance
        """
        if overrides is None:
            return self.model_copy(deep=True)
        if isinstance(overrides, MongoOptions):
            overrides = overrides.model_dump(exclude_unset=True)

        merged = _deep_merge(self.model_dump(), dict(overrides))
        return MongoOptions.model_validate(merged)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "MongoOptions":
        """Build options from environment settings."""
        settings = settings or get_settings()
        return cls(
            collection_name=settings.users_collection,
            convert_user_id_to_object_id=settings.convert_user_id_to_object_id,
            timestamps=Timestamps(
                created_at=settings.timestamp_created_at,
                updated_at=settings.timestamp_updated_at,
            ),
        )


def _deep_merge(base: dict, overrides: Mapping[str, Any]) -> dict:
    result = dict(base)
    for key, value in overrides.items():
        if isinstance(value, BaseModel):
            value = value.model_dump(exclude_unset=True)
        if isinstance(value, Mapping) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


DEFAULT_OPTIONS = MongoOptions()
