"""
Builds the form payloads sent to the `usergroups.*` methods.

All values are strings. Optional strings and lists are only sent when
non-empty, unless the parameter model tracks presence explicitly (a
`None`-able field), in which case anything that is not `None` is sent, empty
values included. Boolean flags are sent as "true" or not at all.
"""

from .options import (
    CreateUserGroupParams,
    DisableUserGroupParams,
    GetUserGroupMembersParams,
    GetUserGroupsParams,
    UpdateUserGroupMembersParams,
    UpdateUserGroupParams,
)

Payload = dict[str, str]


def join_list(values: list[str]) -> str:
    return ",".join(values)


def _put_non_empty(payload: Payload, key: str, value: str | list[str]) -> None:
    if not value:
        return

    payload[key] = join_list(value) if isinstance(value, list) else value


def _put_present(payload: Payload, key: str, value: str | list[str] | None) -> None:
    if value is None:
        return

    payload[key] = join_list(value) if isinstance(value, list) else value


def _put_flag(payload: Payload, key: str, flag: bool) -> None:
    if flag:
        payload[key] = "true"


def create_payload(token: str, name: str, params: CreateUserGroupParams) -> Payload:
    payload = {"token": token, "name": name}

    _put_non_empty(payload, "handle", params.handle)
    _put_non_empty(payload, "description", params.description)
    _put_non_empty(payload, "channels", params.channels)
    _put_non_empty(payload, "team_id", params.team_id)

    return payload


def disable_payload(
    token: str, user_group_id: str, params: DisableUserGroupParams
) -> Payload:
    """
    Payload for both `usergroups.disable` and `usergroups.enable`.
    """

    payload = {"token": token, "usergroup": user_group_id}

    _put_flag(payload, "include_count", params.include_count)
    _put_non_empty(payload, "team_id", params.team_id)

    return payload


def list_payload(token: str, params: GetUserGroupsParams) -> Payload:
    payload = {"token": token}

    _put_flag(payload, "include_count", params.include_count)
    _put_flag(payload, "include_disabled", params.include_disabled)
    _put_flag(payload, "include_users", params.include_users)
    _put_non_empty(payload, "team_id", params.team_id)

    return payload


def update_payload(
    token: str, user_group_id: str, params: UpdateUserGroupParams
) -> Payload:
    payload = {"token": token, "usergroup": user_group_id}

    _put_non_empty(payload, "name", params.name)
    _put_non_empty(payload, "handle", params.handle)
    _put_present(payload, "description", params.description)
    _put_present(payload, "channels", params.channels)
    _put_present(payload, "team_id", params.team_id)

    return payload


def members_payload(
    token: str, user_group_id: str, params: GetUserGroupMembersParams
) -> Payload:
    payload = {"token": token, "usergroup": user_group_id}

    _put_flag(payload, "include_disabled", params.include_disabled)
    _put_non_empty(payload, "team_id", params.team_id)

    return payload


def update_members_payload(
    token: str,
    user_group_id: str,
    members: str,
    params: UpdateUserGroupMembersParams,
) -> Payload:
    # Members arrive pre-joined ("U1,U2") and are sent as given.
    payload = {"token": token, "usergroup": user_group_id, "users": members}

    _put_flag(payload, "include_count", params.include_count)
    _put_non_empty(payload, "team_id", params.team_id)

    return payload
