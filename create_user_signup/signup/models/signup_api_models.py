from typing import Optional

from pydantic import BaseModel, Field

from create_user_signup.signup.models.submission_outcome import SubmissionOutcomeKind


class PasswordCheckRequest(BaseModel):
    password: str = Field(repr=False)


class PasswordCheckResponse(BaseModel):
    violations: list[str]


class SignupRequest(BaseModel):
    """Field values posted by the signup form."""

    username: str = ""
    password: str = Field(default="", repr=False)


class SignupResponse(BaseModel):
    """What the form has to display after a submit."""

    outcome: Optional[SubmissionOutcomeKind] = None
    message: Optional[str] = None
    user_was_created: bool = False
    username_error: Optional[str] = None
    password_violations: list[str] = Field(default_factory=list)
