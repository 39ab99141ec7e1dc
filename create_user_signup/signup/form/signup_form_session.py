import logging
from typing import Callable, Optional

import httpx

from create_user_signup.signup.auth.token_resolver import TokenResolver
from create_user_signup.signup.exceptions.signup_local_validation_exception import (
    SignupLocalValidationException,
)
from create_user_signup.signup.managers.signup_submission_manager import (
    SignupSubmissionManager,
)
from create_user_signup.signup.models.signup_credentials import SignupCredentials
from create_user_signup.signup.models.submission_outcome import SubmissionOutcome
from create_user_signup.signup.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["SIGNUP"])

UserCreatedCallback = Callable[[bool], None]


class SignupFormSession:
    """
    State behind one create-user form: the field values, the live password
    feedback, the message currently shown and whether the user was created.

    Overlapping submits are allowed. Only the most recently started one may
    update the session; results of earlier ones are returned to their callers
    and otherwise dropped.
    """

    def __init__(
        self,
        *,
        url: str | httpx.URL,
        submission_manager: SignupSubmissionManager,
        token_resolver: TokenResolver | None = None,
        base_path: str = "",
        on_user_created: UserCreatedCallback | None = None,
    ) -> None:
        if submission_manager is None:
            raise ValueError("submission_manager must not be None")
        if not isinstance(submission_manager, SignupSubmissionManager):
            raise TypeError(
                "submission_manager must be an instance of SignupSubmissionManager"
            )
        self._submission_manager = submission_manager
        self._token: str = (token_resolver or TokenResolver()).resolve_token(
            url=url, base_path=base_path
        )
        self._on_user_created = on_user_created

        self.username: str = ""
        self.password: str = ""
        self.username_error: Optional[str] = None
        self.api_error: Optional[str] = None
        self.outcome: Optional[SubmissionOutcome] = None
        self.user_was_created: bool = False
        self._generation: int = 0
        self._pending: int = 0

    @property
    def token(self) -> str:
        return self._token

    @property
    def password_violations(self) -> list[str]:
        return self._submission_manager.password_policy.evaluate(self.password)

    @property
    def show_password_violations(self) -> bool:
        return bool(self.password) and bool(self.password_violations)

    @property
    def in_flight(self) -> bool:
        return self._pending > 0

    async def submit_async(self) -> Optional[SubmissionOutcome]:
        """
        Submit the current field values. Returns None when local validation
        stopped the submit, otherwise the outcome of this attempt.
        """
        self._generation += 1
        generation = self._generation
        self.api_error = None
        self.username_error = None
        self.outcome = None

        credentials = SignupCredentials(username=self.username, password=self.password)
        try:
            self._submission_manager.validate(credentials=credentials)
        except SignupLocalValidationException as exc:
            self.username_error = exc.username_error
            return None

        self._pending += 1
        try:
            outcome = await self._submission_manager.submit_async(
                credentials=credentials, token=self._token
            )
        finally:
            self._pending -= 1

        if generation != self._generation:
            logger.info(
                "Discarding signup outcome %s from superseded submit %s (latest is %s)",
                outcome.kind.value,
                generation,
                self._generation,
            )
            return outcome

        self._apply_outcome(outcome)
        return outcome

    def _apply_outcome(self, outcome: SubmissionOutcome) -> None:
        self.outcome = outcome
        self.api_error = outcome.message
        if outcome.is_success:
            self.user_was_created = True
            if self._on_user_created is not None:
                self._on_user_created(True)
