"""
Exceptions raised by the user group client.

Transport errors (the request never produced a usable envelope) and API
errors (the platform decoded the request and rejected it) are kept
distinct so callers can decide on their own retry policy.
"""


class UserGroupsError(Exception):
    pass


class SlackTransportError(UserGroupsError):
    """
    The round trip failed: network failure, timeout, non-2xx status or an
    undecodable body.
    """

    endpoint: str

    def __init__(self, message: str, endpoint: str):
        super().__init__(message)
        self.endpoint = endpoint


class SlackStatusCodeError(SlackTransportError):
    status_code: int

    def __init__(self, message: str, endpoint: str, status_code: int):
        super().__init__(message, endpoint=endpoint)
        self.status_code = status_code


class ResponseDecodeError(SlackTransportError):
    pass


class SlackAPIError(UserGroupsError):
    """
    The platform answered with `ok: false`.

    Parameters
    ----------
    error: str
        The machine-readable error code, e.g. `no_such_subteam`.
    warning: str
        Any warning string returned alongside the error.
    messages: list[str]
        Detail messages from `response_metadata`.
    """

    error: str
    warning: str
    messages: list[str]

    def __init__(self, error: str, warning: str = "", messages: list[str] | None = None):
        super().__init__(error)
        self.error = error
        self.warning = warning
        self.messages = messages or []
