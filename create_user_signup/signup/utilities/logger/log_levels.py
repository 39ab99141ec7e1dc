import logging
import os

GLOBAL_LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

if GLOBAL_LOG_LEVEL not in logging.getLevelNamesMapping():
    GLOBAL_LOG_LEVEL = "INFO"

LOG_SOURCES: list[str] = [
    "SIGNUP",
    "HTTP",
    "INITIALIZATION",
    "ERRORS",
]

SRC_LOG_LEVELS: dict[str, str] = {}

for source in LOG_SOURCES:
    log_env_var = source + "_LOG_LEVEL"
    level = os.environ.get(log_env_var, "").upper()
    if level not in logging.getLevelNamesMapping():
        level = GLOBAL_LOG_LEVEL
    SRC_LOG_LEVELS[source] = level
