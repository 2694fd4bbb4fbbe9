"""CLI for the vanity import server."""

import asyncio
import sys

import click

from vanity_imports.config.logging import configure_logging
from vanity_imports.core.exceptions import ConfigurationError


def run_async(coro):
    """Run an async function synchronously."""
    return asyncio.run(coro)


def _load(source: str, timeout: float):
    from vanity_imports.config.loader import load_config

    try:
        return run_async(load_config(source, timeout=timeout))
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """Vanity Imports: serve go-import metadata for a custom domain."""
    log_level = "DEBUG" if verbose else "WARNING"
    configure_logging(log_level=log_level)


@cli.command()
def serve() -> None:
    """Run the HTTP server (configured from the environment)."""
    from vanity_imports.api.main import run

    run()


@cli.command()
@click.argument("source")
@click.option("--timeout", default=10.0, help="Fetch timeout in seconds")
def check(source: str, timeout: float) -> None:
    """Validate a configuration document.

    SOURCE is an http(s) URL, a file:// URL or a local path.
    """
    config = _load(source, timeout)

    click.echo(f"Host:          {config.host or '(request host)'}")
    click.echo(f"Cache max-age: {config.cache_max_age}s")
    click.echo(f"Paths:         {len(config.entries)}")
    for entry in config.entries:
        click.echo(f"  {entry.path or '/':<30} {entry.vcs.value:<4} {entry.repo_url}")


@cli.command()
@click.argument("source")
@click.argument("request_path")
@click.option("--host", "-H", default="localhost", help="Request host header")
@click.option("--timeout", default=10.0, help="Fetch timeout in seconds")
def resolve(source: str, request_path: str, host: str, timeout: float) -> None:
    """Resolve REQUEST_PATH against the configuration at SOURCE."""
    from vanity_imports.core.models.resolution import IndexListing, VanityMatch
    from vanity_imports.resolver.vanity import VanityResolver

    config = _load(source, timeout)
    result = VanityResolver(config).resolve(request_path, host)

    click.echo(f"Kind:    {result.kind}")
    if isinstance(result, VanityMatch):
        click.echo(f"Import:  {result.import_path}")
        click.echo(f"Subpath: {result.subpath}")
        click.echo(f"Repo:    {result.repo_url}")
        click.echo(f"VCS:     {result.vcs.value}")
        if result.display:
            click.echo(f"Display: {result.display}")
    elif isinstance(result, IndexListing):
        click.echo(f"Host:    {result.host}")
        for import_path in result.import_paths:
            click.echo(f"  - {import_path}")
    else:
        sys.exit(1)


if __name__ == "__main__":
    cli()
