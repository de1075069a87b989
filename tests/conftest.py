"""
Pytest fixtures for i18n-lang-generator tests.
"""

import json
import logging
import os
from pathlib import Path
from typing import Callable

import pytest

from i18n_generator.core.exceptions import LOGGER_NAME
from i18n_generator.i18n.config import GeneratorSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep I18N_* variables and stray .env files out of every test."""
    for name in list(os.environ):
        if name.startswith("I18N_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield
    # setup_logger binds handlers to the stream that was active at the time
    logging.getLogger(LOGGER_NAME).handlers.clear()


@pytest.fixture
def project(tmp_path) -> Path:
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "lang").mkdir()
    return root


@pytest.fixture
def write_source(project) -> Callable[[str, str], Path]:
    def write(name: str, text: str) -> Path:
        path = project / "src" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return write


@pytest.fixture
def write_locale(project) -> Callable[[str, object], Path]:
    def write(lang: str, content) -> Path:
        path = project / "lang" / f"{lang}.json"
        text = content if isinstance(content, str) else json.dumps(content, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return write


@pytest.fixture
def read_locale(project) -> Callable[[str], dict]:
    def read(lang: str) -> dict:
        return json.loads((project / "lang" / f"{lang}.json").read_text(encoding="utf-8"))

    return read


@pytest.fixture
def make_settings(project) -> Callable[..., GeneratorSettings]:
    def make(**overrides) -> GeneratorSettings:
        values = {"base": str(project), "directories": ["src"], "languages": ["en"]}
        values.update(overrides)
        return GeneratorSettings(**values)

    return make
