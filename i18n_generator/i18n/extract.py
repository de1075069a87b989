import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, Sequence, Union

from i18n_generator.common.constants import DEFAULT_FUNCTION_NAME
from i18n_generator.core.exceptions import (
    EmptyPathError,
    GeneratorError,
    KeyConflictError,
)
from i18n_generator.i18n.config import GeneratorSettings
from i18n_generator.i18n.tree import is_container

logger = logging.getLogger(__name__)


def build_pattern(function_name: str = DEFAULT_FUNCTION_NAME) -> re.Pattern:
    """
    Compile the regex that finds ``<function_name>('<key>')`` calls.

    ``function_name`` is inserted as regex source, not escaped: the default
    ``\\$t`` already carries the escape needed for a literal ``$``.
    """
    return re.compile(rf"\W{function_name}\('([^']*)'(\)|,)")


def iter_keys(text: str, function_name: str = DEFAULT_FUNCTION_NAME) -> Iterator[str]:
    for match in build_pattern(function_name).finditer(text):
        key = match.group(1)
        if key:
            yield key


def insert_key(container: dict, key: Union[str, Sequence[str]]) -> dict:
    """
    Insert a dotted key into ``container``, creating parents as needed.

    The new leaf holds its own last segment as a placeholder. Inserting a key
    that already exists as a leaf does nothing.
    """
    orig = key if isinstance(key, str) else ".".join(key)
    key_parts = key.split(".") if isinstance(key, str) else list(key)

    if not key_parts or any(part == "" for part in key_parts):
        raise EmptyPathError(orig)

    current = container
    for depth, part in enumerate(key_parts[:-1]):
        if part not in current:
            current[part] = {}
        elif not is_container(current[part]):
            prefix = ".".join(key_parts[: depth + 1])
            raise KeyConflictError(orig, f'"{prefix}" is already a string')
        current = current[part]

    part = key_parts[-1]
    if part not in current:
        current[part] = part
    elif is_container(current[part]):
        raise KeyConflictError(orig)

    return container


def discover_files(settings: GeneratorSettings) -> list[Path]:
    """
    Expand ``{base}/@(dirs)/**/*.@(extensions)`` into a sorted list of files.

    Hidden files and directories below a scanned directory are skipped.
    """
    base = Path(settings.base) if settings.base else Path("/")
    files: set[Path] = set()

    for directory in settings.directories:
        root = base / directory
        if not root.is_dir():
            logger.debug(f"Skipping missing directory {root}")
            continue
        for ext in settings.extensions:
            for path in root.glob(f"**/*.{ext}"):
                if any(p.startswith(".") for p in path.relative_to(root).parts):
                    continue
                if path.is_file():
                    files.add(path)

    return sorted(files)


def build_tree(
    sources: Iterable[tuple[Path, str]],
    function_name: str = DEFAULT_FUNCTION_NAME,
) -> dict:
    """Build the extracted key tree from ``(path, text)`` pairs."""
    tree: dict = {}

    for source, text in sources:
        for key in iter_keys(text, function_name):
            try:
                insert_key(tree, key)
            except GeneratorError as e:
                e.source = source
                raise

    return tree


def read_sources(files: Iterable[Path]) -> Iterator[tuple[Path, str]]:
    for path in files:
        yield path, path.read_text(encoding="utf-8", errors="replace")


def extract_tree(settings: GeneratorSettings) -> dict:
    files = discover_files(settings)
    logger.info(f"Found {len(files)} source files")

    tree = build_tree(read_sources(files), settings.function_name)
    return tree
