"""CLI entry point for bitly_api package."""
from __future__ import annotations

import json
import logging
from typing import Optional

import click
from dotenv import find_dotenv, load_dotenv

from .client import BitlyClient
from .exceptions import BitlyError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _client(ctx: click.Context) -> BitlyClient:
    return ctx.ensure_object(dict)["client"]


def _run(fn, *args):
    try:
        return fn(*args)
    except BitlyError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.option("--login", envvar="BITLY_LOGIN", required=True, help="bit.ly account login [env: BITLY_LOGIN]")
@click.option("--api-key", envvar="BITLY_API_KEY", required=True, help="bit.ly API key [env: BITLY_API_KEY]")
@click.option("--base-url", default=None, help="Override the API host, e.g. https://api.bit.ly")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None, help="Request timeout in seconds")
@click.option("--verbose", "-v", is_flag=True, help="Log each request.")
@click.pass_context
def main(ctx: click.Context, login: str, api_key: str, base_url: Optional[str], timeout: Optional[float], verbose: bool) -> None:
    """bit.ly URL shortener command-line tool."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)
    overrides = {}
    if base_url:
        overrides["base_url"] = base_url
    if timeout is not None:
        overrides["timeout"] = timeout
    ctx.ensure_object(dict)["client"] = BitlyClient(login, api_key, BitlyClient.Valves(**overrides))


@main.command("shorten")
@click.argument("url")
@click.pass_context
def shorten_cmd(ctx: click.Context, url: str) -> None:
    """Shorten URL."""
    click.echo(_run(_client(ctx).shorten, url))


@main.command("expand")
@click.argument("url_or_hash")
@click.pass_context
def expand_cmd(ctx: click.Context, url_or_hash: str) -> None:
    """Print the long URL behind a bit.ly URL or hash."""
    click.echo(_run(_client(ctx).expand, url_or_hash))


@main.command("clicks")
@click.argument("url_or_hash")
@click.pass_context
def clicks_cmd(ctx: click.Context, url_or_hash: str) -> None:
    """Show click counts for a bit.ly URL or hash."""
    info = _run(_client(ctx).clicks, url_or_hash)
    click.echo(json.dumps(info.model_dump(exclude_none=True), indent=2))


@main.command("errors")
@click.pass_context
def errors_cmd(ctx: click.Context) -> None:
    """List bit.ly error codes."""
    codes = _run(_client(ctx).errors)
    click.echo(json.dumps([c.model_dump(by_alias=True, exclude_none=True) for c in codes], indent=2))


def cli() -> None:
    load_dotenv(find_dotenv(usecwd=True))
    main()


if __name__ == "__main__":
    cli()
