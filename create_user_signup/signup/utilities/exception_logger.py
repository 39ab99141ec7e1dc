import logging
import traceback
from typing import List, Optional

from create_user_signup.signup.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["ERRORS"])


class ExceptionLogger:
    @staticmethod
    def extract_error_details(error: BaseException) -> str:
        """
        Extract the messages of an exception and its cause chain, plus the
        traceback when debug logging is enabled.

        Args:
            error (BaseException): The exception to extract details from

        Returns:
            str: A formatted string containing error details
        """
        error_lines: List[str] = []
        current_exception: Optional[BaseException] = error
        while current_exception is not None:
            error_lines.append(
                f"{type(current_exception).__name__}: {current_exception}"
            )
            current_exception = (
                current_exception.__cause__ or current_exception.__context__
            )

        if logger.isEnabledFor(logging.DEBUG):
            error_lines.append("Traceback:")
            for frame in traceback.extract_tb(error.__traceback__):
                error_lines.append(
                    f"  File {frame.filename}, line {frame.lineno}, in {frame.name}"
                )
                if frame.line:
                    error_lines.append(f"    {frame.line.strip()}")
        return "\n".join(error_lines)
