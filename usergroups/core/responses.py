"""
Response envelopes for the `usergroups.*` family of methods.

Every method answers with the same status block (`ok`, `error`, ...) plus
one method-specific payload field. Each method decodes into its own model so
only the field that method actually returns is available.
"""

from typing import TypeVar

from pydantic import BaseModel, Field

from .errors import SlackAPIError
from .usergroup import UserGroup


class ResponseMetadata(BaseModel):
    messages: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class SlackResponse(BaseModel):
    ok: bool = False
    error: str = ""
    warning: str = ""
    response_metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)

    def raise_for_error(self) -> None:
        """
        Raises
        ------
        SlackAPIError
            If the platform reported a failure.
        """

        if self.ok:
            return

        raise SlackAPIError(
            error=self.error or "unknown_error",
            warning=self.warning,
            messages=list(self.response_metadata.messages),
        )


class UserGroupResponse(SlackResponse):
    usergroup: UserGroup = Field(default_factory=UserGroup)


class UserGroupListResponse(SlackResponse):
    usergroups: list[UserGroup] = Field(default_factory=list)


class UserGroupMembersResponse(SlackResponse):
    users: list[str] = Field(default_factory=list)


R = TypeVar("R", bound=SlackResponse)
