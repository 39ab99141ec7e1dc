import logging

import httpx

from create_user_signup.signup.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["SIGNUP"])


class TokenResolver:
    """Pull the signup bearer token out of the URL the form was opened with."""

    query_parameter: str = "token"

    def resolve_token(self, *, url: str | httpx.URL, base_path: str = "") -> str:
        """
        Return the ``token`` query parameter when it is present and non-empty,
        otherwise the last non-empty path segment, otherwise an empty string.

        Path segments are taken from the raw (still percent-encoded) path, and
        the segments of ``base_path`` are skipped when the path starts with them.
        No validation is done here; a bad token surfaces as an upstream 401/403.
        """
        parsed = url if isinstance(url, httpx.URL) else httpx.URL(url)

        from_query: str | None = parsed.params.get(self.query_parameter)
        if from_query:
            return from_query

        raw_path = parsed.raw_path.decode("ascii").partition("?")[0]
        segments = [segment for segment in raw_path.split("/") if segment]
        base_segments = [segment for segment in base_path.split("/") if segment]
        if base_segments and segments[: len(base_segments)] == base_segments:
            segments = segments[len(base_segments) :]

        if not segments:
            logger.debug("No signup token found in path %r", raw_path)
            return ""
        return segments[-1]
