"""Testes do cliente OpenProject (httpx.MockTransport como upstream)."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import httpx
import pytest
import pytest_asyncio

from api.connectors.openproject import (
    ClientConfig,
    OpenProjectClient,
    OpenProjectError,
    OpenProjectErrorKind,
    ProjectRecord,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    ClientFactory = Callable[..., OpenProjectClient]

BASE_URL = "http://upstream:8080"


class RecordingHandler:
    """Handler do MockTransport que guarda as requisições recebidas."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self._respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)


@pytest_asyncio.fixture
async def make_client() -> AsyncIterator[ClientFactory]:
    """Fábrica de clientes sobre MockTransport; fecha os pools ao final."""
    http_clients: list[httpx.AsyncClient] = []

    def _make(
        handler: Callable[[httpx.Request], object],
        *,
        api_token: str = "tok",
        host_header: str | None = None,
        timeout_ms: int = 10_000,
    ) -> OpenProjectClient:
        config = ClientConfig(
            base_url=BASE_URL,
            api_token=api_token,
            host_header=host_header,
            timeout_ms=timeout_ms,
        )
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return OpenProjectClient(config, http_client)

    yield _make

    for http_client in http_clients:
        await http_client.aclose()


class TestFetchProjectSuccess:
    """Respostas 2xx são normalizadas para ProjectRecord."""

    @pytest.mark.asyncio
    async def test_full_payload_is_normalized(self, make_client: ClientFactory) -> None:
        payload = {
            "id": 123,
            "identifier": "proj-x",
            "name": "Proj X",
            "description": {"raw": "hi"},
        }
        handler = RecordingHandler(lambda request: httpx.Response(200, json=payload))
        client = make_client(handler)

        result = await client.fetch_project("123")

        assert isinstance(result, ProjectRecord)
        assert result.id == "123"
        assert result.identifier == "proj-x"
        assert result.name == "Proj X"
        assert result.description == "hi"
        assert result.raw == payload

    @pytest.mark.asyncio
    async def test_upstream_id_wins_over_requested_identifier(
        self,
        make_client: ClientFactory,
    ) -> None:
        handler = RecordingHandler(lambda request: httpx.Response(200, json={"id": 42}))
        client = make_client(handler)

        result = await client.fetch_project("proj-x")

        assert isinstance(result, ProjectRecord)
        assert result.id == "42"

    @pytest.mark.asyncio
    async def test_missing_id_falls_back_to_requested_identifier(
        self,
        make_client: ClientFactory,
    ) -> None:
        handler = RecordingHandler(
            lambda request: httpx.Response(200, json={"identifier": "no-id", "name": "No Id"})
        )
        client = make_client(handler)

        result = await client.fetch_project("fallback-id")

        assert isinstance(result, ProjectRecord)
        assert result.id == "fallback-id"

    @pytest.mark.asyncio
    async def test_request_targets_versioned_path_with_headers(
        self,
        make_client: ClientFactory,
    ) -> None:
        handler = RecordingHandler(lambda request: httpx.Response(200, json={"id": 1}))
        client = make_client(handler)

        await client.fetch_project("123")

        assert len(handler.requests) == 1
        request = handler.requests[0]
        assert request.method == "GET"
        assert str(request.url) == "http://upstream:8080/api/v3/projects/123"
        assert request.headers["Authorization"] == "Bearer tok"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Host"] == "upstream:8080"

    @pytest.mark.asyncio
    async def test_host_header_override(self, make_client: ClientFactory) -> None:
        handler = RecordingHandler(lambda request: httpx.Response(200, json={"id": 1}))
        client = make_client(handler, host_header="projects.example.com")

        await client.fetch_project("123")

        assert handler.requests[0].headers["Host"] == "projects.example.com"

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self, make_client: ClientFactory) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            project_id = request.url.path.rsplit("/", 1)[-1]
            return httpx.Response(200, json={"id": project_id, "name": f"P{project_id}"})

        handler = RecordingHandler(respond)
        client = make_client(handler)

        results = await asyncio.gather(*(client.fetch_project(str(i)) for i in range(5)))

        assert [r.id for r in results if isinstance(r, ProjectRecord)] == ["0", "1", "2", "3", "4"]
        assert len(handler.requests) == 5


class TestFetchProjectFailures:
    """Cada falha sai como um OpenProjectError classificado."""

    @pytest.mark.asyncio
    async def test_missing_token_returns_config_error_without_network(
        self,
        make_client: ClientFactory,
    ) -> None:
        handler = RecordingHandler(lambda request: httpx.Response(200, json={"id": 1}))
        client = make_client(handler, api_token="")

        result = await client.fetch_project("123")

        assert isinstance(result, OpenProjectError)
        assert result.kind is OpenProjectErrorKind.CONFIG_ERROR
        assert result.message == "OpenProject API token not configured"
        assert handler.requests == []

    @pytest.mark.asyncio
    async def test_401_is_unauthorized(self, make_client: ClientFactory) -> None:
        client = make_client(RecordingHandler(lambda request: httpx.Response(401)))

        result = await client.fetch_project("123")

        assert isinstance(result, OpenProjectError)
        assert result.kind is OpenProjectErrorKind.UNAUTHORIZED
        assert result.message == "Unauthorized access to OpenProject"

    @pytest.mark.asyncio
    async def test_404_is_not_found_with_identifier(self, make_client: ClientFactory) -> None:
        client = make_client(RecordingHandler(lambda request: httpx.Response(404)))

        result = await client.fetch_project("999")

        assert isinstance(result, OpenProjectError)
        assert result.kind is OpenProjectErrorKind.NOT_FOUND
        assert "999" in result.message

    @pytest.mark.asyncio
    async def test_status_is_read_by_code_not_body(self, make_client: ClientFactory) -> None:
        client = make_client(
            RecordingHandler(lambda request: httpx.Response(404, json={"id": 1, "name": "x"}))
        )

        result = await client.fetch_project("1")

        assert isinstance(result, OpenProjectError)
        assert result.kind is OpenProjectErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_500_is_upstream_error_with_status_and_text(
        self,
        make_client: ClientFactory,
    ) -> None:
        client = make_client(RecordingHandler(lambda request: httpx.Response(500)))

        result = await client.fetch_project("123")

        assert isinstance(result, OpenProjectError)
        assert result.kind is OpenProjectErrorKind.UPSTREAM_ERROR
        assert result.message == "OpenProject API error: 500 Internal Server Error"
        assert result.upstream_status == 500

    @pytest.mark.asyncio
    async def test_invalid_json_is_upstream_error(self, make_client: ClientFactory) -> None:
        client = make_client(
            RecordingHandler(lambda request: httpx.Response(200, content=b"<html>oops</html>"))
        )

        result = await client.fetch_project("123")

        assert isinstance(result, OpenProjectError)
        assert result.kind is OpenProjectErrorKind.UPSTREAM_ERROR
        assert result.upstream_status is None

    @pytest.mark.asyncio
    async def test_non_object_json_is_upstream_error(self, make_client: ClientFactory) -> None:
        client = make_client(RecordingHandler(lambda request: httpx.Response(200, json=[1, 2])))

        result = await client.fetch_project("123")

        assert isinstance(result, OpenProjectError)
        assert result.kind is OpenProjectErrorKind.UPSTREAM_ERROR

    @pytest.mark.asyncio
    async def test_timeout_cancels_in_flight_request(self, make_client: ClientFactory) -> None:
        cancelled = asyncio.Event()
        completed = asyncio.Event()

        async def slow_handler(request: httpx.Request) -> httpx.Response:
            try:
                await asyncio.sleep(5)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            completed.set()
            return httpx.Response(200, json={"id": 1})

        client = make_client(slow_handler, timeout_ms=50)

        result = await client.fetch_project("123")

        assert isinstance(result, OpenProjectError)
        assert result.kind is OpenProjectErrorKind.TIMEOUT
        assert "50 ms" in result.message
        assert cancelled.is_set()
        assert not completed.is_set()

    @pytest.mark.asyncio
    async def test_transport_timeout_is_timeout(self, make_client: ClientFactory) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        client = make_client(handler, timeout_ms=1_500)

        result = await client.fetch_project("123")

        assert isinstance(result, OpenProjectError)
        assert result.kind is OpenProjectErrorKind.TIMEOUT
        assert "1500 ms" in result.message

    @pytest.mark.asyncio
    async def test_connection_error_is_network_error_without_leaking_details(
        self,
        make_client: ClientFactory,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused by 10.0.0.7", request=request)

        client = make_client(handler)

        with caplog.at_level(logging.ERROR, logger="api.connectors.openproject"):
            result = await client.fetch_project("123")

        assert isinstance(result, OpenProjectError)
        assert result.kind is OpenProjectErrorKind.NETWORK_ERROR
        assert result.message == "Failed to connect to OpenProject"
        assert "10.0.0.7" not in result.message
        assert any(r.getMessage() == "openproject_transport_error" for r in caplog.records)

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_network_error(self, make_client: ClientFactory) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise RuntimeError("tls handshake exploded")

        client = make_client(handler)

        result = await client.fetch_project("123")

        assert isinstance(result, OpenProjectError)
        assert result.kind is OpenProjectErrorKind.NETWORK_ERROR
        assert "tls" not in result.message

    @pytest.mark.asyncio
    async def test_deeply_nested_json_is_upstream_error(
        self,
        make_client: ClientFactory,
    ) -> None:
        depth = 100_000
        body = b'{"id": ' + b"[" * depth + b"]" * depth + b"}"
        client = make_client(RecordingHandler(lambda request: httpx.Response(200, content=body)))

        result = await client.fetch_project("123")

        assert isinstance(result, OpenProjectError)
        assert result.kind is OpenProjectErrorKind.UPSTREAM_ERROR
        assert result.upstream_status is None

    @pytest.mark.asyncio
    async def test_failure_while_processing_response_is_classified(
        self,
        make_client: ClientFactory,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        def broken_normalizer(payload: object, requested_id: str) -> ProjectRecord:
            raise KeyError("unexpected shape")

        monkeypatch.setattr(
            "api.connectors.openproject.client.normalize_project",
            broken_normalizer,
        )
        client = make_client(RecordingHandler(lambda request: httpx.Response(200, json={"id": 1})))

        with caplog.at_level(logging.ERROR, logger="api.connectors.openproject"):
            result = await client.fetch_project("123")

        assert isinstance(result, OpenProjectError)
        assert result.kind is OpenProjectErrorKind.NETWORK_ERROR
        assert "unexpected shape" not in result.message
        assert any(
            r.getMessage() == "openproject_response_processing_error" for r in caplog.records
        )
