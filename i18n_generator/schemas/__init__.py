from .report import LanguageReport

__all__ = ["LanguageReport"]
