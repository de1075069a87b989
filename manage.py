import json
import sys

import click
from pydantic import ValidationError

from i18n_generator.core.exceptions import GeneratorError, setup_logger
from i18n_generator.i18n.config import GeneratorSettings
from i18n_generator.i18n.extract import extract_tree
from i18n_generator.i18n.sync import run
from i18n_generator.i18n.tree import flatten, sort_tree

SCAN_OPTIONS = [
    click.option(
        "-b", "--baseDirectory", "base", default=None, help="Project root. [default: .]"
    ),
    click.option(
        "-d",
        "--directory",
        "directories",
        default=None,
        help="Space separated sub-directories to scan.",
    ),
    click.option(
        "-e",
        "--extensions",
        default=None,
        help="Space separated file extensions to scan. [default: vue js]",
    ),
    click.option(
        "-f",
        "--functionName",
        "function_name",
        default=None,
        help=r"Pattern of the translation function. [default: \$t]",
    ),
]

SYNC_OPTIONS = [
    click.option(
        "-l",
        "--languages",
        default=None,
        help="Space separated language codes to reconcile.",
    ),
    click.option(
        "-o",
        "--output",
        default=None,
        help="Locale directory, relative to the project root. [default: lang]",
    ),
    click.option(
        "-x",
        "--deleteExpired",
        "delete_expired",
        type=click.BOOL,
        is_flag=False,
        flag_value=True,
        default=None,
        help="Delete keys that are no longer used instead of reporting them.",
    ),
    click.option(
        "-r",
        "--forceReWrite",
        "force_rewrite",
        type=click.BOOL,
        is_flag=False,
        flag_value=True,
        default=None,
        help="Rewrite locale files that cannot be parsed.",
    ),
]

BLANK_MEANS_DEFAULT = ("base", "output")


def with_options(options):
    def decorator(f):
        for option in reversed(options):
            f = option(f)
        return f

    return decorator


def load_settings(**options) -> GeneratorSettings:
    # Unset options fall back to I18N_* variables, then to the defaults
    overrides = {
        k: v
        for k, v in options.items()
        if v is not None and not (k in BLANK_MEANS_DEFAULT and v == "")
    }
    try:
        return GeneratorSettings(**overrides)
    except ValidationError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
def i18n():
    """i18n utilities"""


@i18n.command()
@with_options(SCAN_OPTIONS + SYNC_OPTIONS)
def generate(**options):
    """Scan source files and synchronise the locale JSON files"""
    logger = setup_logger()
    settings = load_settings(**options)

    try:
        run(settings)
    except GeneratorError as e:
        logger.error(str(e))
        sys.exit(e.exit_code)


@i18n.command()
@with_options(SCAN_OPTIONS)
@click.option("--json", "as_json", is_flag=True, help="Print the nested key tree.")
def extract(as_json, **options):
    """Scan source files and print the translation keys in use"""
    logger = setup_logger()
    settings = load_settings(**options)

    try:
        tree = sort_tree(extract_tree(settings))
    except GeneratorError as e:
        logger.error(str(e))
        sys.exit(e.exit_code)

    if as_json:
        click.echo(json.dumps(tree, ensure_ascii=False, indent=2))
        return

    for key in flatten(tree):
        click.echo(key)


cli = click.CommandCollection(sources=[i18n])

if __name__ == "__main__":
    cli()
