import os
from typing import Optional

DEFAULT_SIGNUP_API_URL = "https://api.challenge.hennge.com/password-validation-challenge-api/001/challenge-signup"


class SignupEnvironmentVariables:
    @staticmethod
    def str2bool(v: str | None) -> bool:
        return v is not None and str(v).lower() in ("yes", "true", "t", "1", "y")

    @property
    def signup_api_url(self) -> str:
        return os.environ.get("SIGNUP_API_URL") or DEFAULT_SIGNUP_API_URL

    @property
    def signup_http_timeout_seconds(self) -> float:
        return float(os.environ.get("SIGNUP_HTTP_TIMEOUT_SECONDS", 30))

    @property
    def signup_log_http_traffic(self) -> bool:
        return self.str2bool(os.environ.get("SIGNUP_LOG_HTTP_TRAFFIC"))

    @property
    def allowed_origins(self) -> Optional[list[str]]:
        allowed_origins: str | None = os.environ.get("ALLOWED_ORIGINS")
        return allowed_origins.split(",") if allowed_origins else None
