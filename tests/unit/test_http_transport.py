"""Tests for the httpx transport adapter."""

import httpx
import pytest
from tests.helpers import SINK_URL, RecordedRequests

from carbonsink.adapters.transport import HttpTransport
from carbonsink.core.exceptions import TransportError


@pytest.mark.unit
class TestHttpTransport:
    """Tests for HttpTransport.post()."""

    def test_post_returns_status_and_body(
        self, mock_transport: HttpTransport, recorded: RecordedRequests
    ) -> None:
        recorded.status_code = 202
        recorded.response_body = "queued"

        result = mock_transport.post(SINK_URL, b"line\n", {"Content-Type": "text/x"})

        assert result == (202, "queued")

    def test_post_sends_body_and_headers(
        self, mock_transport: HttpTransport, recorded: RecordedRequests
    ) -> None:
        mock_transport.post(SINK_URL, b"line\n", {"Content-Type": "text/x"})

        [request] = recorded.requests
        assert request.method == "POST"
        assert request.content == b"line\n"
        assert request.headers["Content-Type"] == "text/x"
        assert request.headers["Connection"] == "close"

    def test_invalid_url_raises_transport_error(self) -> None:
        transport = HttpTransport()
        try:
            with pytest.raises(TransportError, match="error creating request"):
                transport.post("http://example.com:notaport/", b"", {})
        finally:
            transport.close()

    def test_send_failure_raises_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            transport = HttpTransport(client=client)
            with pytest.raises(TransportError) as info:
                transport.post(SINK_URL, b"", {})

        assert info.value.url == SINK_URL

    def test_close_leaves_injected_client_open(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200))
        client = httpx.Client(transport=transport)
        HttpTransport(client=client).close()
        assert not client.is_closed
        client.close()

    def test_close_closes_owned_client(self) -> None:
        transport = HttpTransport()
        transport.close()
        assert transport.client.is_closed

    def test_post_after_close_raises_transport_error(self) -> None:
        transport = HttpTransport()
        transport.close()
        with pytest.raises(TransportError, match="client is closed") as info:
            transport.post(SINK_URL, b"", {})
        assert info.value.url == SINK_URL

    def test_default_client_has_no_timeout(self) -> None:
        transport = HttpTransport()
        try:
            assert transport.client.timeout == httpx.Timeout(None)
        finally:
            transport.close()

    def test_injected_client_is_used(self) -> None:
        mock = httpx.MockTransport(lambda request: httpx.Response(200))
        with httpx.Client(transport=mock) as client:
            assert HttpTransport(client=client).client is client
