import json
import logging
import logging.config
import os
from pathlib import Path
from typing import Optional

from i18n_generator.common.constants import LOG_CONFIG
from i18n_generator.common.enum import ErrorCode

LOGGER_NAME = "i18n_generator"


class GeneratorError(Exception):
    """Base error for a run that cannot complete; always fatal."""

    code: ErrorCode
    exit_code = 1

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.source: Optional[Path] = None

    def __str__(self):
        if self.source is not None:
            return f"{self.message} ({self.source})"
        return self.message


class KeyConflictError(GeneratorError):
    """A key is used both as a string and as a parent of other keys."""

    code = ErrorCode.CONFLICT

    def __init__(self, path: str, reason: str = "it is already a parent of other keys"):
        super().__init__(f"Cannot create \"{path}\": {reason}", path)


class EmptyPathError(GeneratorError):
    code = ErrorCode.EMPTY_PATH

    def __init__(self, path: str):
        super().__init__(f'Cannot create a string property "{path}"', path)


class LocaleLoadError(GeneratorError):
    code = ErrorCode.LOCALE_LOAD

    def __init__(self, locale_path: Path, reason: str):
        super().__init__(
            f"{locale_path}: Please fix {reason} "
            'or force to rewrite the file with the option "--forceReWrite"',
            str(locale_path),
        )
        self.reason = reason


def expand_env(obj):
    if isinstance(obj, dict):
        return {k: expand_env(v) for k, v in obj.items()}

    elif isinstance(obj, list):
        return [expand_env(i) for i in obj]

    elif isinstance(obj, str) and obj.startswith("${") and obj.endswith("}"):
        expr = obj[2:-1]

        # Support default values: ${VAR:DEFAULT}
        if ":" in expr:
            name, default = expr.split(":", 1)
            return os.getenv(name, default)

        return os.getenv(expr, "")

    return obj


def setup_logger():
    try:
        config_path = (
            Path(LOG_CONFIG)
            if LOG_CONFIG
            else Path(__file__).resolve().parent.parent / "logging.json"
        )
        with open(config_path, encoding="utf-8") as f:
            raw = json.load(f)

        config = expand_env(raw)

        # Never let a broken logging config stop a run
        logging.config.dictConfig(config)

        return logging.getLogger(LOGGER_NAME)

    except Exception as e:
        fallback = logging.getLogger(LOGGER_NAME)
        fallback.setLevel(logging.INFO)

        if not fallback.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
            fallback.addHandler(handler)

        fallback.warning(f"Failed to load logging config. Using fallback. Error: {e}")

        return fallback
