"""
Optional parameters for each user group method.

Each method has a parameter model whose default instance means "send
nothing extra". Callers pass an ordered sequence of options, small callables
that each set one field; they are applied in order, so the last option
touching a field wins.

Fields typed `X | None` on `UpdateUserGroupParams` distinguish "not given"
(`None`) from "explicitly set", which matters when the explicit value is
empty (e.g. clearing the description or the default channels).
"""

from typing import Callable, Iterable, TypeVar

from pydantic import BaseModel, Field

P = TypeVar("P", bound=BaseModel)


def apply_options(params: P, options: Iterable[Callable[[P], None]]) -> P:
    for option in options:
        option(params)

    return params


class CreateUserGroupParams(BaseModel):
    handle: str = ""
    description: str = ""
    channels: list[str] = Field(default_factory=list)
    team_id: str = ""


CreateUserGroupOption = Callable[[CreateUserGroupParams], None]


def create_option_handle(handle: str) -> CreateUserGroupOption:
    def option(params: CreateUserGroupParams):
        params.handle = handle

    return option


def create_option_description(description: str) -> CreateUserGroupOption:
    def option(params: CreateUserGroupParams):
        params.description = description

    return option


def create_option_channels(channels: list[str]) -> CreateUserGroupOption:
    def option(params: CreateUserGroupParams):
        params.channels = list(channels)

    return option


def create_option_team_id(team_id: str) -> CreateUserGroupOption:
    def option(params: CreateUserGroupParams):
        params.team_id = team_id

    return option


class DisableUserGroupParams(BaseModel):
    """
    Shared by `usergroups.disable` and `usergroups.enable`.
    """

    include_count: bool = False
    team_id: str = ""


DisableUserGroupOption = Callable[[DisableUserGroupParams], None]


def disable_option_include_count(include_count: bool) -> DisableUserGroupOption:
    def option(params: DisableUserGroupParams):
        params.include_count = include_count

    return option


def disable_option_team_id(team_id: str) -> DisableUserGroupOption:
    def option(params: DisableUserGroupParams):
        params.team_id = team_id

    return option


class GetUserGroupsParams(BaseModel):
    include_count: bool = False
    include_disabled: bool = False
    include_users: bool = False
    team_id: str = ""


GetUserGroupsOption = Callable[[GetUserGroupsParams], None]


def get_option_include_count(include_count: bool) -> GetUserGroupsOption:
    def option(params: GetUserGroupsParams):
        params.include_count = include_count

    return option


def get_option_include_disabled(include_disabled: bool) -> GetUserGroupsOption:
    def option(params: GetUserGroupsParams):
        params.include_disabled = include_disabled

    return option


def get_option_include_users(include_users: bool) -> GetUserGroupsOption:
    def option(params: GetUserGroupsParams):
        params.include_users = include_users

    return option


def get_option_team_id(team_id: str) -> GetUserGroupsOption:
    def option(params: GetUserGroupsParams):
        params.team_id = team_id

    return option


class UpdateUserGroupParams(BaseModel):
    # Empty name or handle leaves them unchanged.
    name: str = ""
    handle: str = ""
    description: str | None = None
    channels: list[str] | None = None
    team_id: str | None = None


UpdateUserGroupOption = Callable[[UpdateUserGroupParams], None]


def update_option_name(name: str) -> UpdateUserGroupOption:
    def option(params: UpdateUserGroupParams):
        params.name = name

    return option


def update_option_handle(handle: str) -> UpdateUserGroupOption:
    def option(params: UpdateUserGroupParams):
        params.handle = handle

    return option


def update_option_description(description: str | None) -> UpdateUserGroupOption:
    """
    Set the description. An empty string clears it; `None` un-sets any
    earlier description option.
    """

    def option(params: UpdateUserGroupParams):
        params.description = description

    return option


def update_option_channels(channels: list[str]) -> UpdateUserGroupOption:
    """
    Set the default channels. An empty list clears them.
    """

    def option(params: UpdateUserGroupParams):
        params.channels = list(channels)

    return option


def update_option_team_id(team_id: str | None) -> UpdateUserGroupOption:
    def option(params: UpdateUserGroupParams):
        params.team_id = team_id

    return option


class GetUserGroupMembersParams(BaseModel):
    include_disabled: bool = False
    team_id: str = ""


GetUserGroupMembersOption = Callable[[GetUserGroupMembersParams], None]


def members_option_include_disabled(
    include_disabled: bool,
) -> GetUserGroupMembersOption:
    def option(params: GetUserGroupMembersParams):
        params.include_disabled = include_disabled

    return option


def members_option_team_id(team_id: str) -> GetUserGroupMembersOption:
    def option(params: GetUserGroupMembersParams):
        params.team_id = team_id

    return option


class UpdateUserGroupMembersParams(BaseModel):
    include_count: bool = False
    team_id: str = ""


UpdateUserGroupMembersOption = Callable[[UpdateUserGroupMembersParams], None]


def update_members_option_include_count(
    include_count: bool,
) -> UpdateUserGroupMembersOption:
    def option(params: UpdateUserGroupMembersParams):
        params.include_count = include_count

    return option


def update_members_option_team_id(team_id: str) -> UpdateUserGroupMembersOption:
    def option(params: UpdateUserGroupMembersParams):
        params.team_id = team_id

    return option
