import logging
from typing import Callable

import click

from i18n_generator.common.enum import ReportStatus
from i18n_generator.i18n.config import GeneratorSettings
from i18n_generator.i18n.extract import extract_tree
from i18n_generator.i18n.loader import load_locale, save_locale
from i18n_generator.i18n.tree import (
    flatten,
    is_placeholder,
    iter_leaves,
    merge_trees,
    prune_paths,
    sort_tree,
)
from i18n_generator.schemas.report import LanguageReport

logger = logging.getLogger(__name__)

STATUS_COLORS = {
    ReportStatus.UNUSED: "yellow",
    ReportStatus.NEW: "green",
    ReportStatus.NEEDS_TRANSLATION: "cyan",
}


def diff_keys(locale_keys: list[str], result_keys: list[str]):
    """Return ``(expired, added)``: keys only in the locale, keys only in source."""
    known_locale = set(locale_keys)
    known_result = set(result_keys)

    expired = [key for key in locale_keys if key not in known_result]
    added = [key for key in result_keys if key not in known_locale]

    return expired, added


def untranslated(tree: dict) -> list[str]:
    return [
        path for path, key, value in iter_leaves(tree) if is_placeholder(key, value)
    ]


def sync_language(
    lang: str, extracted: dict, settings: GeneratorSettings
) -> LanguageReport:
    """
    Reconcile one locale file with the extracted key tree.

    The file is written only when keys were added or deleted; ``extracted`` is
    never modified.
    """
    path = settings.locale_path(lang)
    locale = load_locale(path, settings.force_rewrite)

    expired, added = diff_keys(flatten(locale), flatten(extracted))
    entries: dict[str, ReportStatus] = {}
    deleted: list[str] = []

    if settings.delete_expired:
        if expired:
            locale = prune_paths(locale, expired)
            deleted = expired
    else:
        for key in expired:
            entries[key] = ReportStatus.UNUSED

    for key in added:
        entries[key] = ReportStatus.NEW

    merged = sort_tree(merge_trees(extracted, locale))

    written = bool(added or deleted)
    if written:
        save_locale(path, merged)
        logger.info(
            f"Updated {path} ({len(added)} added, {len(deleted)} deleted)"
        )

    for key in untranslated(merged):
        entries.setdefault(key, ReportStatus.NEEDS_TRANSLATION)

    return LanguageReport(
        language=lang,
        path=path,
        entries=entries,
        added=added,
        deleted=deleted,
        written=written,
        tree=merged,
    )


def render_report(report: LanguageReport, echo: Callable[..., None] = click.echo):
    """Print the key/status table; the header is printed by ``run``."""
    if not report.has_issues:
        echo("No issues")
        return

    width = max(len("key"), *(len(key) for key in report.entries))
    echo(f"  {'key'.ljust(width)}  status")
    echo(f"  {'-' * width}  {'-' * len(ReportStatus.NEEDS_TRANSLATION.value)}")
    for key, status in report.entries.items():
        label = click.style(status.value, fg=STATUS_COLORS[status])
        echo(f"  {key.ljust(width)}  {label}")


def run(settings: GeneratorSettings, echo: Callable[..., None] = click.echo):
    """Extract keys once, then reconcile every language in order."""
    extracted = extract_tree(settings)
    logger.info(f"Found {len(flatten(extracted))} translation keys")

    reports = []
    for lang in settings.languages:
        # before loading, so a load error follows the file name
        echo(f"\n{lang}.json")
        report = sync_language(lang, extracted, settings)
        render_report(report, echo)
        reports.append(report)

    return reports
