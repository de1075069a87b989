from enum import Enum


class ReportStatus(str, Enum):
    UNUSED = "unused"
    NEW = "new item added"
    NEEDS_TRANSLATION = "needs translation"


class ErrorCode(str, Enum):
    CONFLICT = "CONFLICT"
    EMPTY_PATH = "EMPTY_PATH"
    LOCALE_LOAD = "LOCALE_LOAD"
