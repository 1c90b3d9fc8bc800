"""
The transport used by the user group methods, wraps around httpx.

One call is one form-encoded POST whose JSON body is decoded into the
envelope model chosen by the caller. Failures of the round trip itself
(network, timeout, non-2xx, undecodable body) are raised as
`SlackTransportError`; a decoded `ok: false` envelope is returned as-is and
left for the caller to unwrap.
"""

import httpx
from httpx._types import TimeoutTypes
from pydantic import ValidationError
from structlog import get_logger
from structlog.typing import FilteringBoundLogger

from usergroups.config.settings import Settings
from usergroups.core.errors import (
    ResponseDecodeError,
    SlackStatusCodeError,
    SlackTransportError,
)
from usergroups.core.responses import R

ClientDefault = type(httpx.USE_CLIENT_DEFAULT)


class SlackTransport:
    """
    An async transport for the platform's Web API. Safe to share between
    tasks; it holds no per-request state.
    """

    base_url: str

    def __init__(
        self,
        base_url: str = "https://slack.com/api/",
        *,
        timeout: TimeoutTypes = 30.0,
        client: httpx.AsyncClient | None = None,
        log: FilteringBoundLogger | None = None,
    ):
        """
        Create the transport.

        Parameters
        ----------
        base_url: str
            The root of the Web API. Method names (e.g. `usergroups.list`)
            are appended to it.
        timeout: TimeoutTypes, optional
            The default timeout for requests that do not specify their own.
        client: httpx.AsyncClient | None, optional
            An existing client to send requests with. If provided, it is not
            closed by `aclose`.
        log: FilteringBoundLogger | None, optional
            Logger; defaults to `structlog.get_logger()`.
        """

        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self.log = log or get_logger()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
        log: FilteringBoundLogger | None = None,
    ) -> "SlackTransport":
        return cls(
            base_url=settings.api_url,
            timeout=settings.timeout,
            client=client,
            log=log,
        )

    async def post_method(
        self,
        endpoint: str,
        values: dict[str, str],
        response_model: type[R],
        *,
        timeout: TimeoutTypes | ClientDefault = httpx.USE_CLIENT_DEFAULT,
    ) -> R:
        """
        POST `values` as a form to `endpoint` and decode the body.

        Parameters
        ----------
        endpoint: str
            The API method name, e.g. `usergroups.create`.
        values: dict[str, str]
            The form payload.
        response_model: type[R]
            The envelope model to decode into.
        timeout: optional
            The deadline for this request only. Defaults to the client's.

        Returns
        -------
        response: R
            The decoded envelope. Its status may still signal a failure.

        Raises
        ------
        SlackTransportError
            On network failure or timeout.
        SlackStatusCodeError
            If the response status is not 2xx.
        ResponseDecodeError
            If the body is not a valid envelope.
        """

        log = self.log.bind(endpoint=endpoint)

        try:
            response = await self._client.post(
                self.base_url + endpoint, data=values, timeout=timeout
            )
        except httpx.HTTPError as e:
            await log.ainfo("transport.http_error", error=repr(e))
            raise SlackTransportError(
                f"Request to {endpoint} failed: {e!r}", endpoint=endpoint
            ) from e

        if not response.is_success:
            await log.ainfo("transport.status_error", status_code=response.status_code)
            raise SlackStatusCodeError(
                f"Request to {endpoint} failed: {response.status_code} {response.text}",
                endpoint=endpoint,
                status_code=response.status_code,
            )

        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as e:
            await log.ainfo("transport.decode_error", error=str(e))
            raise ResponseDecodeError(
                f"Could not decode response from {endpoint}", endpoint=endpoint
            ) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "SlackTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
