"""HTTP transport adapter backed by httpx."""

from collections.abc import Mapping

import httpx

from carbonsink.core.exceptions import TransportError


class HttpTransport:
    """httpx implementation of TransportPort.

    Each POST asks the server to close the connection afterwards, so no
    connection outlives an export. No timeout is applied unless one is given.

    Example:
        ```python
        transport = HttpTransport()
        status, body = transport.post(url, b"...", {"Content-Type": "text/plain"})
        ```
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: httpx.Timeout | float | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            client: Client to send requests with. When omitted the transport
                creates one and owns it.
            timeout: Timeout for a created client. Defaults to no timeout.
        """
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    @property
    def client(self) -> httpx.Client:
        return self._client

    def post(
        self, url: str, body: bytes, headers: Mapping[str, str]
    ) -> tuple[int, str]:
        """POST body to url and return the status code and response text.

        Raises:
            TransportError: If the request cannot be built or sent.
        """
        if self._client.is_closed:
            raise TransportError("error executing request: client is closed", url)
        request_headers = {**headers, "Connection": "close"}
        try:
            request = self._client.build_request(
                "POST", url, content=body, headers=request_headers
            )
        except (httpx.InvalidURL, httpx.HTTPError) as e:
            raise TransportError(f"error creating request: {e}", url) from e
        try:
            response = self._client.send(request)
        except httpx.HTTPError as e:
            raise TransportError(f"error executing request: {e}", url) from e
        try:
            return response.status_code, response.text
        finally:
            response.close()

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()
