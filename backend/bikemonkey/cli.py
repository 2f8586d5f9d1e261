"""
Command line interface for race results.

Usage:
    bikemonkey results.json
    bikemonkey -c Gran -c Medio -g Female results.json
    bikemonkey -f maria -l rossi https://example.org/results.json
    python -m bikemonkey --debug
"""

import logging

import click

from bikemonkey.config import settings
from bikemonkey.features.results import (
    Catalog,
    DocumentError,
    FilterCriteria,
    QueryRunner,
    ReportGenerator,
    load_document,
)
from bikemonkey.logging_setup import configure_logging
from bikemonkey.shared.constants import SELECTABLE_COURSES, Course, Gender

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "-c", "--course", "courses",
    multiple=True,
    type=click.Choice([c.value for c in SELECTABLE_COURSES], case_sensitive=False),
    help="Restricts which course to look at (repeatable)"
)
@click.option(
    "-g", "--gender",
    default=None,
    type=click.Choice([g.value for g in Gender], case_sensitive=False),
    help="Restricts which genders are looked at"
)
@click.option("-f", "--first-name", default=None, help="Look up riders by first name")
@click.option("-l", "--last-name", default=None, help="Look up riders by last name")
@click.option("-d", "--debug", is_flag=True, help="Enable debugging (report rejected records)")
@click.argument("source", required=False)
def main(courses, gender, first_name, last_name, debug, source):
    """
    Rank riders from a results export.

    SOURCE is a JSON/YAML file or an http(s) URL (default: lgfresults.json,
    see BIKEMONKEY_RESULTS_FILE). With --first-name/--last-name, prints
    only the matching riders and their overall rank.
    """
    debug = debug or settings.debug
    configure_logging("DEBUG" if debug else settings.log_level)

    source = source or settings.results_file
    try:
        document = load_document(source, timeout=settings.http_timeout)
    except DocumentError as exc:
        raise click.ClickException(str(exc)) from exc

    catalog = Catalog.from_document(document, debug=debug)
    criteria = FilterCriteria(
        courses=frozenset(Course(c) for c in courses) if courses else None,
        gender=Gender(gender) if gender else None,
        first_name=first_name,
        last_name=last_name,
    )
    logger.debug("Query: %s", criteria)

    result = QueryRunner(catalog).run(criteria)
    report = ReportGenerator().generate_console(result)
    if report:
        click.echo(report)


if __name__ == "__main__":
    main()
