import logging

import httpx
import pytest
from pytest_httpx import HTTPXMock

from create_user_signup.signup.http.http_client_factory import HttpClientFactory
from create_user_signup.signup.utilities.logger.logging_transport import (
    LoggingTransport,
    mask_headers,
)
from tests.common import TestSignupEnvironmentVariables


def test_mask_headers_hides_credentials() -> None:
    headers = httpx.Headers(
        {"Authorization": "Bearer secret-token", "Accept": "application/json"}
    )

    masked = mask_headers(headers)

    assert masked["authorization"] == "Bearer ***"
    assert masked["accept"] == "application/json"


@pytest.mark.asyncio
async def test_logging_transport_never_logs_secrets(
    httpx_mock: HTTPXMock, caplog: pytest.LogCaptureFixture
) -> None:
    httpx_mock.add_response(url="https://signup.test/echo", status_code=200)
    caplog.set_level(
        logging.DEBUG,
        logger="create_user_signup.signup.utilities.logger.logging_transport",
    )

    async with httpx.AsyncClient(
        transport=LoggingTransport(httpx.AsyncHTTPTransport())
    ) as client:
        response = await client.post(
            "https://signup.test/echo",
            headers={"Authorization": "Bearer secret-token"},
            json={"username": "alice", "password": "Abcdefghi1"},
        )

    assert response.status_code == 200
    assert "secret-token" not in caplog.text
    assert "Abcdefghi1" not in caplog.text
    assert "Bearer ***" in caplog.text


def test_http_client_factory_applies_timeout() -> None:
    factory = HttpClientFactory(environment_variables=TestSignupEnvironmentVariables())

    client = factory.create_http_client(headers={"X-Test": "1"})

    assert client.headers["x-test"] == "1"
    assert client.timeout.read == 30
