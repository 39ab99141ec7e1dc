import logging
from typing import Any

import httpx

from create_user_signup.signup.exceptions.signup_local_validation_exception import (
    USERNAME_REQUIRED_MESSAGE,
    SignupLocalValidationException,
)
from create_user_signup.signup.http.http_client_factory import HttpClientFactory
from create_user_signup.signup.models.signup_credentials import SignupCredentials
from create_user_signup.signup.models.submission_outcome import SubmissionOutcome
from create_user_signup.signup.policy.password_policy import PasswordPolicy
from create_user_signup.signup.utilities.exception_logger import ExceptionLogger
from create_user_signup.signup.utilities.logger.log_levels import SRC_LOG_LEVELS
from create_user_signup.signup.utilities.signup_environment_variables import (
    SignupEnvironmentVariables,
)

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["SIGNUP"])

NOT_ALLOWED_ERROR_CODE = "not_allowed"


class SignupSubmissionManager:
    """Validate signup credentials locally and submit them to the create-user API."""

    def __init__(
        self,
        *,
        http_client_factory: HttpClientFactory,
        environment_variables: SignupEnvironmentVariables,
        password_policy: PasswordPolicy,
    ) -> None:
        self._http_client_factory = http_client_factory
        if self._http_client_factory is None:
            raise ValueError("http_client_factory must not be None")
        if not isinstance(self._http_client_factory, HttpClientFactory):
            raise TypeError(
                "http_client_factory must be an instance of HttpClientFactory"
            )
        self._environment_variables = environment_variables
        if self._environment_variables is None:
            raise ValueError("environment_variables must not be None")
        if not isinstance(self._environment_variables, SignupEnvironmentVariables):
            raise TypeError(
                "environment_variables must be an instance of SignupEnvironmentVariables"
            )
        self._password_policy = password_policy
        if self._password_policy is None:
            raise ValueError("password_policy must not be None")
        if not isinstance(self._password_policy, PasswordPolicy):
            raise TypeError("password_policy must be an instance of PasswordPolicy")

    @property
    def password_policy(self) -> PasswordPolicy:
        return self._password_policy

    def validate(self, *, credentials: SignupCredentials) -> None:
        """
        Raise SignupLocalValidationException if the credentials must not be sent.
        """
        username_error = (
            USERNAME_REQUIRED_MESSAGE if not credentials.username.strip() else None
        )
        password_violations = self._password_policy.evaluate(credentials.password)
        if username_error or password_violations:
            raise SignupLocalValidationException(
                username_error=username_error,
                password_violations=password_violations,
            )

    async def submit_async(
        self, *, credentials: SignupCredentials, token: str
    ) -> SubmissionOutcome:
        """
        Send the create-user request and map the response to an outcome.

        Local validation runs first and raises SignupLocalValidationException
        without touching the network. Once the request is attempted every
        failure, transport errors included, is returned as an outcome.
        """
        self.validate(credentials=credentials)

        url = self._environment_variables.signup_api_url
        headers = {
            "Content-Type": "application/json",
            # an empty token still goes out so the service answers 401
            "Authorization": f"Bearer {token}".strip(),
        }

        try:
            async with self._http_client_factory.create_http_client(
                headers=headers
            ) as client:
                response = await client.post(
                    url,
                    json=credentials.model_dump(),
                )
                outcome = self.map_response(response)
        except Exception as exc:  # noqa: BLE001 - every failure maps to an outcome
            logger.error(
                "Signup request could not be completed: %s",
                ExceptionLogger.extract_error_details(exc),
            )
            outcome = SubmissionOutcome.unknown_failure()

        logger.info(
            "Signup request for %r finished with status %s: %s",
            credentials.username,
            outcome.status_code,
            outcome.kind.value,
        )
        return outcome

    def map_response(self, response: httpx.Response) -> SubmissionOutcome:
        status_code = response.status_code
        if status_code == 200:
            return SubmissionOutcome.success(status_code=status_code)
        if status_code in (401, 403):
            return SubmissionOutcome.auth_failure(status_code=status_code)
        if status_code == 500:
            return SubmissionOutcome.server_error(status_code=status_code)
        if status_code == 422:
            return self._map_unprocessable_response(response)
        logger.warning("Signup service returned unexpected status %s", status_code)
        return SubmissionOutcome.unknown_failure(status_code=status_code)

    def _map_unprocessable_response(
        self, response: httpx.Response
    ) -> SubmissionOutcome:
        payload: Any
        try:
            payload = response.json()
        except ValueError:
            logger.warning("Signup service returned a 422 without a JSON body")
            return SubmissionOutcome.unknown_failure(status_code=422)

        errors = payload.get("errors") if isinstance(payload, dict) else None
        if not isinstance(errors, list):
            logger.warning("Signup service returned a 422 without an errors list")
            return SubmissionOutcome.unknown_failure(status_code=422)

        error_codes = [str(error) for error in errors]
        if NOT_ALLOWED_ERROR_CODE in error_codes:
            return SubmissionOutcome.policy_rejected(errors=error_codes)
        logger.warning("Signup service rejected the request: %s", error_codes)
        return SubmissionOutcome.unknown_failure(status_code=422, errors=error_codes)
