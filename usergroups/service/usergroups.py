"""
Service layer for user groups.

Every method follows the same shape: apply the options to a fresh parameter
model, build the form payload, make exactly one request through the
transport, raise if the envelope reports a failure, and return the one field
of the envelope that the method is about.
"""

import httpx
from httpx._types import TimeoutTypes
from structlog.typing import FilteringBoundLogger

from usergroups.core import payload as payloads
from usergroups.core.errors import SlackAPIError
from usergroups.core.options import (
    CreateUserGroupOption,
    CreateUserGroupParams,
    DisableUserGroupOption,
    DisableUserGroupParams,
    GetUserGroupMembersOption,
    GetUserGroupMembersParams,
    GetUserGroupsOption,
    GetUserGroupsParams,
    UpdateUserGroupMembersOption,
    UpdateUserGroupMembersParams,
    UpdateUserGroupOption,
    UpdateUserGroupParams,
    apply_options,
)
from usergroups.core.responses import (
    R,
    UserGroupListResponse,
    UserGroupMembersResponse,
    UserGroupResponse,
)
from usergroups.core.usergroup import UserGroup
from usergroups.toolkit.client import ClientDefault, SlackTransport

CREATE = "usergroups.create"
DISABLE = "usergroups.disable"
ENABLE = "usergroups.enable"
LIST = "usergroups.list"
UPDATE = "usergroups.update"
USERS_LIST = "usergroups.users.list"
USERS_UPDATE = "usergroups.users.update"


async def _usergroup_request(
    endpoint: str,
    values: payloads.Payload,
    response_model: type[R],
    transport: SlackTransport,
    log: FilteringBoundLogger,
    timeout: TimeoutTypes | ClientDefault,
) -> R:
    """
    Send one request and unwrap the envelope status.

    Raises
    ------
    SlackTransportError
        Propagated unchanged from the transport.
    SlackAPIError
        If the platform rejected the request.
    """

    log = log.bind(endpoint=endpoint)
    await log.adebug("usergroups.request.sent")

    response = await transport.post_method(
        endpoint, values, response_model, timeout=timeout
    )

    try:
        response.raise_for_error()
    except SlackAPIError as e:
        await log.ainfo("usergroups.request.rejected", error=e.error)
        raise e

    await log.adebug("usergroups.request.succeeded")

    return response


async def create_user_group(
    name: str,
    *options: CreateUserGroupOption,
    token: str,
    transport: SlackTransport,
    log: FilteringBoundLogger,
    timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
) -> UserGroup:
    """
    Create a new user group.

    Parameters
    ----------
    name: str
        The display name of the group.
    *options: CreateUserGroupOption
        Handle, description, default channels and team id.
    token: str
        The API token.
    transport: SlackTransport
        The transport to send the request with.
    log: FilteringBoundLogger
        Logger instance.
    timeout: optional
        Deadline for this request.

    Raises
    ------
    SlackTransportError
        If the request could not be completed.
    SlackAPIError
        If the group could not be created (e.g. `name_already_exists`).
    """

    params = apply_options(CreateUserGroupParams(), options)
    log = log.bind(user_group_name=name)

    response = await _usergroup_request(
        CREATE,
        payloads.create_payload(token, name, params),
        UserGroupResponse,
        transport=transport,
        log=log,
        timeout=timeout,
    )

    return response.usergroup


async def disable_user_group(
    user_group_id: str,
    *options: DisableUserGroupOption,
    token: str,
    transport: SlackTransport,
    log: FilteringBoundLogger,
    timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
) -> UserGroup:
    """
    Disable (soft-delete) a user group. The returned group has `date_delete`
    set. Same parameters as `enable_user_group`.
    """

    params = apply_options(DisableUserGroupParams(), options)
    log = log.bind(user_group_id=user_group_id)

    response = await _usergroup_request(
        DISABLE,
        payloads.disable_payload(token, user_group_id, params),
        UserGroupResponse,
        transport=transport,
        log=log,
        timeout=timeout,
    )

    return response.usergroup


async def enable_user_group(
    user_group_id: str,
    *options: DisableUserGroupOption,
    token: str,
    transport: SlackTransport,
    log: FilteringBoundLogger,
    timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
) -> UserGroup:
    """
    Re-enable a previously disabled user group.

    Parameters
    ----------
    user_group_id: str
        The ID of the group.
    *options: DisableUserGroupOption
        Include-count flag and team id.
    token: str
        The API token.
    transport: SlackTransport
        The transport to send the request with.
    log: FilteringBoundLogger
        Logger instance.
    timeout: optional
        Deadline for this request.

    Raises
    ------
    SlackTransportError
        If the request could not be completed.
    SlackAPIError
        If the platform rejected the request.
    """

    params = apply_options(DisableUserGroupParams(), options)
    log = log.bind(user_group_id=user_group_id)

    response = await _usergroup_request(
        ENABLE,
        payloads.disable_payload(token, user_group_id, params),
        UserGroupResponse,
        transport=transport,
        log=log,
        timeout=timeout,
    )

    return response.usergroup


async def get_user_groups(
    *options: GetUserGroupsOption,
    token: str,
    transport: SlackTransport,
    log: FilteringBoundLogger,
    timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
) -> list[UserGroup]:
    """
    List the user groups of a team, in the order the platform returns them.
    """

    params = apply_options(GetUserGroupsParams(), options)

    response = await _usergroup_request(
        LIST,
        payloads.list_payload(token, params),
        UserGroupListResponse,
        transport=transport,
        log=log,
        timeout=timeout,
    )

    await log.adebug("usergroups.listed", number_of_groups=len(response.usergroups))

    return response.usergroups


async def update_user_group(
    user_group_id: str,
    *options: UpdateUserGroupOption,
    token: str,
    transport: SlackTransport,
    log: FilteringBoundLogger,
    timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
) -> UserGroup:
    """
    Update the name, handle, description, default channels or team of a
    user group. Fields without an option are left as they are.

    Raises
    ------
    SlackTransportError
        If the request could not be completed.
    SlackAPIError
        If the platform rejected the update.
    """

    params = apply_options(UpdateUserGroupParams(), options)
    log = log.bind(user_group_id=user_group_id)

    response = await _usergroup_request(
        UPDATE,
        payloads.update_payload(token, user_group_id, params),
        UserGroupResponse,
        transport=transport,
        log=log,
        timeout=timeout,
    )

    return response.usergroup


async def get_user_group_members(
    user_group_id: str,
    *options: GetUserGroupMembersOption,
    token: str,
    transport: SlackTransport,
    log: FilteringBoundLogger,
    timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
) -> list[str]:
    """
    Read the IDs of the current members of a user group.
    """

    params = apply_options(GetUserGroupMembersParams(), options)
    log = log.bind(user_group_id=user_group_id)

    response = await _usergroup_request(
        USERS_LIST,
        payloads.members_payload(token, user_group_id, params),
        UserGroupMembersResponse,
        transport=transport,
        log=log,
        timeout=timeout,
    )

    return response.users


async def update_user_group_members(
    user_group_id: str,
    members: str,
    *options: UpdateUserGroupMembersOption,
    token: str,
    transport: SlackTransport,
    log: FilteringBoundLogger,
    timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
) -> UserGroup:
    """
    Replace the members of a user group.

    Parameters
    ----------
    user_group_id: str
        The ID of the group.
    members: str
        Comma-separated user IDs, e.g. "U1,U2". This is the complete new
        member list, not a delta.
    *options: UpdateUserGroupMembersOption
        Include-count flag and team id.
    token: str
        The API token.
    transport: SlackTransport
        The transport to send the request with.
    log: FilteringBoundLogger
        Logger instance.
    timeout: optional
        Deadline for this request.

    Raises
    ------
    SlackTransportError
        If the request could not be completed.
    SlackAPIError
        If the platform rejected the update (e.g. `invalid_users`).
    """

    params = apply_options(UpdateUserGroupMembersParams(), options)
    log = log.bind(user_group_id=user_group_id)

    response = await _usergroup_request(
        USERS_UPDATE,
        payloads.update_members_payload(token, user_group_id, members, params),
        UserGroupResponse,
        transport=transport,
        log=log,
        timeout=timeout,
    )

    return response.usergroup
