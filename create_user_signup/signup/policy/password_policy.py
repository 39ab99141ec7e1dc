import re
from dataclasses import dataclass
from typing import Callable

MIN_PASSWORD_LENGTH = 10
MAX_PASSWORD_LENGTH = 24

_DIGIT = re.compile(r"[0-9]")
_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")


@dataclass(frozen=True, slots=True)
class PasswordRule:
    """A single password requirement and the message shown when it is not met."""

    message: str
    is_violated: Callable[[str], bool]


PASSWORD_RULES: tuple[PasswordRule, ...] = (
    PasswordRule(
        message=f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
        is_violated=lambda password: len(password) < MIN_PASSWORD_LENGTH,
    ),
    PasswordRule(
        message=f"Password must be at most {MAX_PASSWORD_LENGTH} characters long",
        is_violated=lambda password: len(password) > MAX_PASSWORD_LENGTH,
    ),
    PasswordRule(
        message="Password cannot contain spaces",
        is_violated=lambda password: " " in password,
    ),
    PasswordRule(
        message="Password must contain at least one number",
        is_violated=lambda password: _DIGIT.search(password) is None,
    ),
    PasswordRule(
        message="Password must contain at least one uppercase letter",
        is_violated=lambda password: _UPPERCASE.search(password) is None,
    ),
    PasswordRule(
        message="Password must contain at least one lowercase letter",
        is_violated=lambda password: _LOWERCASE.search(password) is None,
    ),
)


class PasswordPolicy:
    """
    Evaluates a candidate password against every rule, in order, without
    short-circuiting. An empty result means the password is acceptable.

    The same instance backs the live feedback shown while typing and the gate
    checked before a signup request is sent.
    """

    def __init__(self, *, rules: tuple[PasswordRule, ...] = PASSWORD_RULES) -> None:
        self._rules = rules

    def evaluate(self, password: str) -> list[str]:
        return [rule.message for rule in self._rules if rule.is_violated(password)]
