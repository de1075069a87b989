from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from i18n_generator.common.enum import ReportStatus


class LanguageReport(BaseModel):
    language: str
    path: Path
    entries: dict[str, ReportStatus] = Field(default_factory=dict)
    added: list[str] = Field(default_factory=list)
    deleted: list[str] = Field(default_factory=list)
    written: bool = False
    tree: dict[str, Any] = Field(default_factory=dict)

    @property
    def has_issues(self) -> bool:
        return bool(self.entries)
