"""CLI commands for idgen."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import click

from idgen.config import LOG_LEVELS, Config
from idgen.exceptions import IdgenError
from idgen.generators import SUPPORTED_VERSIONS, ObjectIdGenerator, UlidGenerator, UuidGenerator
from idgen.generators import objectid_generator, ulid_generator
from idgen.generators.uuid_generator import GREGORIAN_BITS, UNIX_MS_BITS
from idgen.parsing import parse_data, parse_namespace, parse_node_id, parse_timestamp

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Resolved group-level options shared with every command."""

    count: int
    config: Config


def fail(error: Exception) -> NoReturn:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def emit(values: list) -> None:
    for value in values:
        click.echo(str(value))


@click.group()
@click.version_option(package_name="idgen", prog_name="idgen")
@click.option(
    "-n",
    "--num",
    "count",
    type=click.IntRange(min=0),
    help="Number of identifiers to generate (default: 1)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to idgen.toml (default: nearest idgen.toml, if any)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Log level for stderr diagnostics",
)
@click.pass_context
def cli(ctx: click.Context, count: int | None, config_path: Path | None, log_level: str | None) -> None:
    """idgen - generate UUIDs, ULIDs and ObjectIds."""
    try:
        config = Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        fail(e)

    logging.basicConfig(
        level=(log_level or config.log.level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )

    ctx.obj = Settings(count=config.output.count if count is None else count, config=config)


@cli.command("uuid")
@click.option(
    "-v",
    "--version",
    "version",
    type=click.Choice([str(v) for v in SUPPORTED_VERSIONS]),
    help="UUID version (default: 4)",
)
@click.option(
    "--timestamp",
    help="v1/v6: 100-ns ticks since 1582-10-15; v7: Unix milliseconds",
)
@click.option("--namespace", help="v3/v5: dns, url, oid, x500 or a custom UUID")
@click.option("--name", help="v3/v5: name to hash within the namespace")
@click.option("--node-id", help="v1/v6: MAC address used as node (default: random)")
@click.option("--data", help="v8: up to 32 hex characters of payload")
@click.pass_obj
def uuid_command(
    settings: Settings,
    version: str | None,
    timestamp: str | None,
    namespace: str | None,
    name: str | None,
    node_id: str | None,
    data: str | None,
) -> None:
    """Generate a new UUID."""
    version_number = int(version) if version else settings.config.uuid.version

    try:
        options: dict = {}
        if timestamp is not None:
            if version_number == 7:
                options["timestamp"] = parse_timestamp(
                    timestamp, UNIX_MS_BITS, "milliseconds since 1970-01-01"
                )
            else:
                options["timestamp"] = parse_timestamp(
                    timestamp, GREGORIAN_BITS, "100-ns ticks since 1582-10-15"
                )
        if namespace is not None:
            options["namespace"] = parse_namespace(namespace)
        if name is not None:
            options["name"] = name
        if node_id is not None:
            options["node_id"] = parse_node_id(node_id)
        if data is not None:
            options["data"] = parse_data(data)

        logger.info(f"Generating {settings.count} UUIDv{version_number} value(s)")
        uuids = UuidGenerator().generate_batch(settings.count, version_number, **options)
    except IdgenError as e:
        fail(e)

    emit(uuids)


@cli.command("ulid")
@click.option("--timestamp", help="Unix milliseconds (default: now)")
@click.pass_obj
def ulid_command(settings: Settings, timestamp: str | None) -> None:
    """Generate a new ULID."""
    try:
        millis = None
        if timestamp is not None:
            millis = parse_timestamp(
                timestamp, ulid_generator.TIMESTAMP_BITS, "milliseconds since 1970-01-01"
            )

        logger.info(f"Generating {settings.count} ULID value(s)")
        ulids = UlidGenerator().generate_batch(settings.count, timestamp=millis)
    except IdgenError as e:
        fail(e)

    emit(ulids)


@cli.command("oid")
@click.option("--timestamp", help="Unix seconds (default: now)")
@click.pass_obj
def oid_command(settings: Settings, timestamp: str | None) -> None:
    """Generate a new ObjectId."""
    try:
        seconds = None
        if timestamp is not None:
            seconds = parse_timestamp(
                timestamp, objectid_generator.TIMESTAMP_BITS, "seconds since 1970-01-01"
            )

        logger.info(f"Generating {settings.count} ObjectId value(s)")
        oids = ObjectIdGenerator().generate_batch(settings.count, timestamp=seconds)
    except IdgenError as e:
        fail(e)

    emit(oids)


cli.add_command(oid_command, name="objectid")


if __name__ == "__main__":
    cli()
