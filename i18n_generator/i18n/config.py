import re
from pathlib import Path
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

from i18n_generator.common.constants import (
    DEFAULT_BASE,
    DEFAULT_EXTENSIONS,
    DEFAULT_FUNCTION_NAME,
    DEFAULT_OUTPUT,
)


class GeneratorSettings(BaseSettings):
    base: str = DEFAULT_BASE
    directories: Annotated[list[str], NoDecode] = []
    output: str = DEFAULT_OUTPUT
    languages: Annotated[list[str], NoDecode] = []
    extensions: Annotated[list[str], NoDecode] = list(DEFAULT_EXTENSIONS)
    function_name: str = DEFAULT_FUNCTION_NAME
    delete_expired: bool = False
    force_rewrite: bool = False

    class Config:
        env_prefix = "I18N_"
        env_file = ".env"
        extra = "ignore"
        frozen = True

    @field_validator("base")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return re.sub(r"/$", "", value)

    @field_validator("directories", "languages", "extensions", mode="before")
    @classmethod
    def split_words(cls, value):
        # "src components" and ["src", "components"] are both accepted
        if isinstance(value, str):
            return value.split()
        return value

    @property
    def locale_dir(self) -> Path:
        return Path(f"{self.base}/{self.output}")

    def locale_path(self, lang: str) -> Path:
        return self.locale_dir / f"{lang}.json"
