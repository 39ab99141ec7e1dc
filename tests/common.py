import uuid
from typing import override

from oidcauthlib.container.simple_container import SimpleContainer

from create_user_signup.container.container_factory import SignupContainerFactory
from create_user_signup.signup.utilities.signup_environment_variables import (
    SignupEnvironmentVariables,
)

TEST_SIGNUP_API_URL = "https://signup.test/challenge-signup"


class TestSignupEnvironmentVariables(SignupEnvironmentVariables):
    """Test Signup Environment Variables"""

    @override
    @property
    def signup_api_url(self) -> str:
        return TEST_SIGNUP_API_URL

    @override
    @property
    def signup_log_http_traffic(self) -> bool:
        return True


def create_test_container() -> SimpleContainer:
    container: SimpleContainer = SignupContainerFactory.create_container(
        source=f"{__name__}[{uuid.uuid4().hex}]"
    )
    test_signup_environment_variables = TestSignupEnvironmentVariables()
    container.singleton(
        SignupEnvironmentVariables,
        lambda c: test_signup_environment_variables,
    )
    return container
