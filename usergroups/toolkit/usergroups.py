"""
A client for the user group methods that carries the token, transport and
logger so callers only pass the arguments specific to each call.

```python
from usergroups.core.options import get_option_include_disabled
from usergroups.toolkit.usergroups import UserGroupsClient

async with UserGroupsClient(token="xoxb-...") as client:
    groups = await client.get_user_groups(get_option_include_disabled(True))
```
"""

import httpx
from httpx._types import TimeoutTypes
from structlog import get_logger
from structlog.typing import FilteringBoundLogger

from usergroups.config.settings import Settings
from usergroups.core.options import (
    CreateUserGroupOption,
    DisableUserGroupOption,
    GetUserGroupMembersOption,
    GetUserGroupsOption,
    UpdateUserGroupMembersOption,
    UpdateUserGroupOption,
)
from usergroups.core.usergroup import UserGroup
from usergroups.service import usergroups as usergroups_service

from .client import ClientDefault, SlackTransport


class UserGroupsClient:
    token: str
    transport: SlackTransport
    log: FilteringBoundLogger

    def __init__(
        self,
        token: str,
        transport: SlackTransport | None = None,
        log: FilteringBoundLogger | None = None,
    ):
        """
        Parameters
        ----------
        token: str
            The API token, sent with every request.
        transport: SlackTransport | None, optional
            The transport to use. If not provided, one is created against the
            public API.
        log: FilteringBoundLogger | None, optional
            Logger; defaults to `structlog.get_logger()`.
        """
        self.token = token
        self.log = log or get_logger()
        self.transport = transport or SlackTransport(log=self.log)

    @classmethod
    def from_settings(
        cls, settings: Settings, log: FilteringBoundLogger | None = None
    ) -> "UserGroupsClient":
        if settings.token is None:
            raise ValueError("No token configured, set USERGROUPS_TOKEN")

        log = log or get_logger()

        return cls(
            token=settings.token,
            transport=SlackTransport.from_settings(settings, log=log),
            log=log,
        )

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> "UserGroupsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def create_user_group(
        self,
        name: str,
        *options: CreateUserGroupOption,
        timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
    ) -> UserGroup:
        return await usergroups_service.create_user_group(
            name,
            *options,
            token=self.token,
            transport=self.transport,
            log=self.log,
            timeout=timeout,
        )

    async def disable_user_group(
        self,
        user_group_id: str,
        *options: DisableUserGroupOption,
        timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
    ) -> UserGroup:
        return await usergroups_service.disable_user_group(
            user_group_id,
            *options,
            token=self.token,
            transport=self.transport,
            log=self.log,
            timeout=timeout,
        )

    async def enable_user_group(
        self,
        user_group_id: str,
        *options: DisableUserGroupOption,
        timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
    ) -> UserGroup:
        return await usergroups_service.enable_user_group(
            user_group_id,
            *options,
            token=self.token,
            transport=self.transport,
            log=self.log,
            timeout=timeout,
        )

    async def get_user_groups(
        self,
        *options: GetUserGroupsOption,
        timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
    ) -> list[UserGroup]:
        return await usergroups_service.get_user_groups(
            *options,
            token=self.token,
            transport=self.transport,
            log=self.log,
            timeout=timeout,
        )

    async def update_user_group(
        self,
        user_group_id: str,
        *options: UpdateUserGroupOption,
        timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
    ) -> UserGroup:
        return await usergroups_service.update_user_group(
            user_group_id,
            *options,
            token=self.token,
            transport=self.transport,
            log=self.log,
            timeout=timeout,
        )

    async def get_user_group_members(
        self,
        user_group_id: str,
        *options: GetUserGroupMembersOption,
        timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
    ) -> list[str]:
        return await usergroups_service.get_user_group_members(
            user_group_id,
            *options,
            token=self.token,
            transport=self.transport,
            log=self.log,
            timeout=timeout,
        )

    async def update_user_group_members(
        self,
        user_group_id: str,
        members: str,
        *options: UpdateUserGroupMembersOption,
        timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
    ) -> UserGroup:
        return await usergroups_service.update_user_group_members(
            user_group_id,
            members,
            *options,
            token=self.token,
            transport=self.transport,
            log=self.log,
            timeout=timeout,
        )
