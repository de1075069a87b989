import json
import logging
from pathlib import Path

from i18n_generator.common.constants import JSON_INDENT
from i18n_generator.core.exceptions import LocaleLoadError

logger = logging.getLogger(__name__)


def load_locale(path: Path, force_rewrite: bool = False) -> dict:
    """
    Read the locale tree stored at ``path``.

    A missing file is an empty tree. A file that is not a JSON object raises
    ``LocaleLoadError``, or is treated as empty when ``force_rewrite`` is set.
    """
    if not path.exists():
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    except (OSError, ValueError) as e:
        error = LocaleLoadError(path, str(e))
        if not force_rewrite:
            raise error from e
        logger.warning(f"{error.message}; rewriting it from scratch")
        return {}

    return data


def save_locale(path: Path, content: dict):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(content, ensure_ascii=False, indent=JSON_INDENT),
        encoding="utf-8",
    )
