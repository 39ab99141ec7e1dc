import logging

from oidcauthlib.container.simple_container import SimpleContainer

from create_user_signup.signup.auth.token_resolver import TokenResolver
from create_user_signup.signup.http.http_client_factory import HttpClientFactory
from create_user_signup.signup.managers.signup_submission_manager import (
    SignupSubmissionManager,
)
from create_user_signup.signup.policy.password_policy import PasswordPolicy
from create_user_signup.signup.utilities.logger.log_levels import SRC_LOG_LEVELS
from create_user_signup.signup.utilities.signup_environment_variables import (
    SignupEnvironmentVariables,
)

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["INITIALIZATION"])


class SignupContainerFactory:
    @classmethod
    def create_container(cls, *, source: str) -> SimpleContainer:
        logger.info("Initializing DI container")

        container = SimpleContainer(source=source)

        container.singleton(
            SignupEnvironmentVariables, lambda c: SignupEnvironmentVariables()
        )
        container.singleton(
            HttpClientFactory,
            lambda c: HttpClientFactory(
                environment_variables=c.resolve(SignupEnvironmentVariables)
            ),
        )
        container.singleton(PasswordPolicy, lambda c: PasswordPolicy())
        container.singleton(TokenResolver, lambda c: TokenResolver())
        container.singleton(
            SignupSubmissionManager,
            lambda c: SignupSubmissionManager(
                http_client_factory=c.resolve(HttpClientFactory),
                environment_variables=c.resolve(SignupEnvironmentVariables),
                password_policy=c.resolve(PasswordPolicy),
            ),
        )

        logger.info("DI container initialized")
        return container
