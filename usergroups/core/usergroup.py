"""
Core user group data models, as returned by the platform.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


class UserGroupPrefs(BaseModel):
    # Public default channels
    channels: list[str] = Field(default_factory=list)
    # Private default channels
    groups: list[str] = Field(default_factory=list)

    @field_validator("channels", "groups", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return [] if value is None else value


class UserGroup(BaseModel):
    """
    A snapshot of a single user group. Every field has a zero value so that
    partial payloads decode; `user_count` and `users` are only populated when
    the caller asked for them.
    """

    id: str = ""
    team_id: str = ""
    is_usergroup: bool = False
    name: str = ""
    description: str = ""
    handle: str = ""
    is_external: bool = False
    date_create: datetime | None = None
    date_update: datetime | None = None
    date_delete: datetime | None = None
    auto_type: str = ""
    created_by: str = ""
    updated_by: str = ""
    deleted_by: str = ""
    prefs: UserGroupPrefs = Field(default_factory=UserGroupPrefs)
    user_count: int = 0
    users: list[str] = Field(default_factory=list)

    @field_validator("date_create", "date_update", "date_delete", mode="before")
    @classmethod
    def epoch_to_datetime(cls, value):
        # The wire format is integer epoch seconds, with 0 meaning "never".
        if value is None or isinstance(value, datetime):
            return value

        if isinstance(value, str):
            value = float(value) if value.strip() else 0

        if not value:
            return None

        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError) as e:
            raise ValueError(f"Timestamp {value} out of range") from e

    @field_validator(
        "id",
        "team_id",
        "name",
        "handle",
        "description",
        "auto_type",
        "created_by",
        "updated_by",
        "deleted_by",
        mode="before",
    )
    @classmethod
    def null_as_empty_string(cls, value):
        return "" if value is None else value

    @field_validator("user_count", mode="before")
    @classmethod
    def null_as_zero(cls, value):
        return 0 if value is None else value

    @field_validator("is_usergroup", "is_external", mode="before")
    @classmethod
    def null_as_false(cls, value):
        return False if value is None else value

    @field_validator("users", mode="before")
    @classmethod
    def null_as_empty_list(cls, value):
        return [] if value is None else value

    @field_validator("prefs", mode="before")
    @classmethod
    def null_as_empty_prefs(cls, value):
        return {} if value is None else value

    @property
    def is_disabled(self) -> bool:
        return self.date_delete is not None
