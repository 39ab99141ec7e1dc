import logging

import httpx

from create_user_signup.signup.utilities.logger.log_levels import SRC_LOG_LEVELS
from create_user_signup.signup.utilities.logger.logging_transport import (
    LoggingTransport,
)
from create_user_signup.signup.utilities.signup_environment_variables import (
    SignupEnvironmentVariables,
)

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["HTTP"])

CONNECT_TIMEOUT_SECONDS = 10.0


class HttpClientFactory:
    """Build the httpx clients used to talk to upstream services."""

    def __init__(self, *, environment_variables: SignupEnvironmentVariables) -> None:
        self._environment_variables = environment_variables
        if self._environment_variables is None:
            raise ValueError("environment_variables must not be None")
        if not isinstance(self._environment_variables, SignupEnvironmentVariables):
            raise TypeError(
                "environment_variables must be an instance of SignupEnvironmentVariables"
            )

    def create_http_client(
        self,
        *,
        base_url: str = "",
        headers: dict[str, str] | None = None,
    ) -> httpx.AsyncClient:
        timeout_seconds = self._environment_variables.signup_http_timeout_seconds
        timeout = httpx.Timeout(
            timeout_seconds, connect=min(CONNECT_TIMEOUT_SECONDS, timeout_seconds)
        )
        transport: httpx.AsyncBaseTransport | None = None
        if self._environment_variables.signup_log_http_traffic:
            transport = LoggingTransport(httpx.AsyncHTTPTransport())
        return httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )
