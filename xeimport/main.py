#!/usr/bin/env python3
"""
xeimport - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Configures logging
3. Builds the connector, resolver and batch driver
4. Prints one JSON outcome per line

All business logic is in the modules.

Example:

    xeimport import -s sql01 -s sql02 --template db_query_wait_stats
    xeimport import -s sql01 --path ./long_queries.xml --name LongQueries
"""

import json
import logging
import sys
from typing import Optional, Tuple

import click
from dotenv import load_dotenv

from xeimport import __version__
from xeimport.logging_config import configure_logging
from xeimport.modules.batch import BatchDriver, ImportRequest
from xeimport.modules.config import ConfigModule
from xeimport.modules.errors import ConnectorError, RequestConflictError
from xeimport.modules.store import Credential, load_connector
from xeimport.modules.template import TemplateResolver

logger = logging.getLogger("xeimport.main")


@click.group()
@click.version_option(version=__version__)
def cli():
    """Provision Extended Events sessions from XML templates."""


@cli.command("import")
@click.option("--server", "-s", "servers", multiple=True, required=True, help="Target server (repeatable)")
@click.option("--sql-user", "sql_user", default=None, help="Login name passed to the connector")
@click.option(
    "--sql-password",
    "sql_password",
    default="",
    envvar="XEIMPORT_SQL_PASSWORD",
    help="Login password (default: XEIMPORT_SQL_PASSWORD)",
)
@click.option("--name", "name", default=None, help="Session name (single template only)")
@click.option("--path", "paths", multiple=True, help="Template file path (repeatable)")
@click.option("--template", "templates", multiple=True, help="Catalog template identifier (repeatable)")
@click.option("--target-file-path", default=None, help="Directory for event_file target files")
@click.option("--target-file-metadata-path", default=None, help="Directory for event_file metadata files")
@click.option(
    "--enable-exception",
    is_flag=True,
    default=False,
    help="Report failures as outcomes and exit non-zero instead of logging warnings",
)
@click.option("--connector", "connector_spec", default=None, help="Connector, 'package.module:attribute'")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML configuration file",
)
def import_templates(
    servers: Tuple[str, ...],
    sql_user: Optional[str],
    sql_password: str,
    name: Optional[str],
    paths: Tuple[str, ...],
    templates: Tuple[str, ...],
    target_file_path: Optional[str],
    target_file_metadata_path: Optional[str],
    enable_exception: bool,
    connector_spec: Optional[str],
    config_file: Optional[str],
):
    """Create sessions from templates on every given server."""
    try:
        config = ConfigModule(
            config_file, {"connector": connector_spec, "enable_exception": enable_exception or None}
        )
    except ValueError as e:
        raise click.ClickException(str(e))

    configure_logging(config.get("log_level"))

    if not config.get("connector"):
        raise click.UsageError(
            "No connector configured. Use --connector or set XEIMPORT_CONNECTOR."
        )

    try:
        connector = load_connector(config.get("connector"))
    except ConnectorError as e:
        raise click.ClickException(str(e))

    credential = Credential(username=sql_user, password=sql_password) if sql_user else None
    request = ImportRequest(
        servers=list(servers),
        credential=credential,
        name=name,
        paths=list(paths),
        templates=list(templates),
        target_file_path=target_file_path,
        target_file_metadata_path=target_file_metadata_path,
        enable_exception=config.get("enable_exception"),
    )

    resolver = TemplateResolver(config.get("catalog_root"), config.get("template_extension"))
    driver = BatchDriver(connector, resolver)

    try:
        outcomes = driver.run(request)
    except RequestConflictError as e:
        raise click.ClickException(str(e))

    for outcome in outcomes:
        click.echo(json.dumps(outcome.to_dict()))

    failures = [o for o in outcomes if o.is_failure]
    logger.info(f"{len(outcomes) - len(failures)} session(s) created, {len(failures)} failure(s)")
    if failures:
        sys.exit(1)


def main():
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
