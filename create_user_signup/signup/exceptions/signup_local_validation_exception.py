from typing import Optional

USERNAME_REQUIRED_MESSAGE = "Username is required"


class SignupLocalValidationException(Exception):
    """
    Raised when a signup is refused before any request is sent: the username is
    blank or the password fails one or more policy rules.
    """

    def __init__(
        self,
        *,
        username_error: Optional[str],
        password_violations: list[str],
    ) -> None:
        self.username_error: Optional[str] = username_error
        self.password_violations: list[str] = list(password_violations)
        problems: list[str] = []
        if username_error:
            problems.append(username_error)
        problems.extend(self.password_violations)
        self.message = "; ".join(problems)
        super().__init__(self.message)
