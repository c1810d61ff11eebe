"""Command line interface: parse a query string and print it as JSON."""
from __future__ import annotations

import json
import re
import typing as t

import click
from werkzeug.utils import import_string

from parsequery.exceptions import DecodeError, OptionsError
from parsequery.logging import create_logger
from parsequery.options import ParseOptions
from parsequery.parser import parse_query


def _compile(ctx: click.Context, param: click.Parameter, value: str | None) -> t.Any:
    if value is None:
        return None
    try:
        return re.compile(value)
    except re.error as e:
        raise click.BadParameter(f"invalid regular expression: {e}") from e


def _import(ctx: click.Context, param: click.Parameter, value: str | None) -> t.Any:
    if value is None:
        return None
    try:
        return import_string(value)
    except ImportError as e:
        raise click.BadParameter(f"could not import {value!r}: {e}") from e


@click.command("parsequery")
@click.argument("query", required=False)
@click.option("--separator", "-s", help="Literal token separator (default '&').")
@click.option(
    "--separator-pattern",
    callback=_compile,
    help="Regular expression to split tokens on, e.g. '[&;]'.",
)
@click.option(
    "--array-keys",
    "-a",
    callback=_compile,
    help="Keys matching this regular expression collect all their values.",
)
@click.option(
    "--decode",
    callback=_import,
    help="Decode function as an import path, e.g. 'parsequery.decoders:int_keys_decode'.",
)
@click.option(
    "--set",
    "extra",
    multiple=True,
    metavar="NAME=VALUE",
    help="Extra option for custom decode functions; may be repeated.",
)
@click.option(
    "--env-prefix",
    default="PARSEQUERY",
    show_default=True,
    help="Load options from environment variables with this prefix.",
)
@click.option("--sort", is_flag=True, help="Sort keys in the output.")
@click.option("--debug", is_flag=True, help="Log the effective options.")
def main(
    query: str | None,
    separator: str | None,
    separator_pattern: t.Any,
    array_keys: t.Any,
    decode: t.Any,
    extra: tuple[str, ...],
    env_prefix: str,
    sort: bool,
    debug: bool,
) -> None:
    """Parse QUERY (or the current QUERY_STRING) and print it as JSON."""
    logger = create_logger("parsequery", debug=debug)

    options = ParseOptions()
    options.from_prefixed_env(env_prefix)
    for item in extra:
        name, sep, value = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected NAME=VALUE, got {item!r}", param_hint="--set")
        options[name] = value
    if separator is not None:
        options["separator"] = separator
    if separator_pattern is not None:
        options["separator"] = separator_pattern
    if array_keys is not None:
        options["array_keys"] = array_keys
    if decode is not None:
        options["decode"] = decode
    if query is not None:
        options["query"] = query
    logger.debug("Parsing with options %r", options)

    try:
        params = parse_query(options)
    except DecodeError as e:
        raise click.ClickException(str(e)) from e
    except OptionsError as e:
        raise click.UsageError(str(e)) from e
    click.echo(json.dumps(params, ensure_ascii=False, sort_keys=sort, default=str))
