import logging
from enum import Enum
from typing import Sequence

from fastapi import APIRouter, params
from fastapi.responses import JSONResponse
from starlette.requests import Request

from create_user_signup.signup.auth.token_resolver import TokenResolver
from create_user_signup.signup.form.signup_form_session import SignupFormSession
from create_user_signup.signup.managers.signup_submission_manager import (
    SignupSubmissionManager,
)
from create_user_signup.signup.models.signup_api_models import (
    PasswordCheckRequest,
    PasswordCheckResponse,
    SignupRequest,
    SignupResponse,
)
from create_user_signup.signup.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["SIGNUP"])


class SignupRouter:
    """Router exposing live password feedback and the create-user submit."""

    _password_policy_route: str = "/password-policy"

    def __init__(
        self,
        *,
        submission_manager: SignupSubmissionManager,
        token_resolver: TokenResolver | None = None,
        prefix: str = "/signup",
        tags: list[str | Enum] | None = None,
        dependencies: Sequence[params.Depends] | None = None,
    ) -> None:
        if submission_manager is None:
            raise ValueError("submission_manager must not be None")
        self._submission_manager = submission_manager
        self._token_resolver = token_resolver or TokenResolver()
        self.prefix = prefix
        self.tags = tags or ["signup"]
        self.dependencies = dependencies or []
        self.router = APIRouter(
            prefix=self.prefix, tags=self.tags, dependencies=self.dependencies
        )
        self._register_routes()

    def _register_routes(self) -> None:
        # registered first so "password-policy" is never taken for a token
        self.router.add_api_route(
            self._password_policy_route,
            self.check_password,
            methods=["POST"],
            response_model=PasswordCheckResponse,
        )
        self.router.add_api_route(
            "",
            self.submit,
            methods=["POST"],
            response_model=SignupResponse,
        )
        self.router.add_api_route(
            "/{token}",
            self.submit,
            methods=["POST"],
            response_model=SignupResponse,
        )

    async def check_password(
        self, password_check: PasswordCheckRequest
    ) -> PasswordCheckResponse:
        return PasswordCheckResponse(
            violations=self._submission_manager.password_policy.evaluate(
                password_check.password
            )
        )

    async def submit(self, request: Request, signup: SignupRequest) -> JSONResponse:
        """
        Run one submit for the posted field values. The token comes from the
        request URL, either ``?token=`` or the last path segment after the
        router prefix.
        """
        session = SignupFormSession(
            url=str(request.url),
            submission_manager=self._submission_manager,
            token_resolver=self._token_resolver,
            base_path=request.scope.get("root_path", "") + self.prefix,
        )
        session.username = signup.username
        session.password = signup.password

        outcome = await session.submit_async()

        response = SignupResponse(
            outcome=outcome.kind if outcome is not None else None,
            message=session.api_error,
            user_was_created=session.user_was_created,
            username_error=session.username_error,
            password_violations=session.password_violations,
        )
        if outcome is None:
            logger.info("Signup refused by local validation")
        return JSONResponse(
            content=response.model_dump(mode="json"),
            status_code=200 if outcome is not None else 422,
        )

    def get_router(self) -> APIRouter:
        return self.router
