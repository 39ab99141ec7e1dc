from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

NOT_AUTHENTICATED_MESSAGE = "Not authenticated to access this resource."
GENERIC_ERROR_MESSAGE = "Something went wrong, please try again."
PASSWORD_NOT_ALLOWED_MESSAGE = (
    "Sorry, the entered password is not allowed, please try a different one."
)


class SubmissionOutcomeKind(str, Enum):
    """Enumerate the possible results of a create-user request."""

    SUCCESS = "success"
    AUTH_FAILURE = "auth_failure"
    SERVER_ERROR = "server_error"
    POLICY_REJECTED = "policy_rejected"
    UNKNOWN_FAILURE = "unknown_failure"


class SubmissionOutcome(BaseModel):
    """The single result of a submit attempt, as shown to the user."""

    model_config = ConfigDict(frozen=True)

    kind: SubmissionOutcomeKind
    message: Optional[str] = None
    status_code: Optional[int] = None
    errors: list[str] = Field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return self.kind == SubmissionOutcomeKind.SUCCESS

    @classmethod
    def success(cls, *, status_code: int = 200) -> "SubmissionOutcome":
        return cls(kind=SubmissionOutcomeKind.SUCCESS, status_code=status_code)

    @classmethod
    def auth_failure(cls, *, status_code: int) -> "SubmissionOutcome":
        return cls(
            kind=SubmissionOutcomeKind.AUTH_FAILURE,
            message=NOT_AUTHENTICATED_MESSAGE,
            status_code=status_code,
        )

    @classmethod
    def server_error(cls, *, status_code: int = 500) -> "SubmissionOutcome":
        return cls(
            kind=SubmissionOutcomeKind.SERVER_ERROR,
            message=GENERIC_ERROR_MESSAGE,
            status_code=status_code,
        )

    @classmethod
    def policy_rejected(cls, *, errors: list[str]) -> "SubmissionOutcome":
        return cls(
            kind=SubmissionOutcomeKind.POLICY_REJECTED,
            message=PASSWORD_NOT_ALLOWED_MESSAGE,
            status_code=422,
            errors=errors,
        )

    @classmethod
    def unknown_failure(
        cls, *, status_code: Optional[int] = None, errors: list[str] | None = None
    ) -> "SubmissionOutcome":
        return cls(
            kind=SubmissionOutcomeKind.UNKNOWN_FAILURE,
            message=GENERIC_ERROR_MESSAGE,
            status_code=status_code,
            errors=errors or [],
        )
