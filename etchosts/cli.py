#!/usr/bin/env python3
"""
etchosts CLI - inspect, check and rewrite hosts files.

Bad lines are reported on stderr and skipped; with --strict the command
stops at the first one. Any bad line makes the command exit with status 1.
"""
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from etchosts import __version__
from etchosts.config.models import get_config
from etchosts.core.exceptions import ConfigurationError, LineReadError
from etchosts.hosts_file import HostsFile, format_lines
from etchosts.record import minify_lines
from etchosts.utils.log_config import get_log_config
from etchosts.utils.logger import log_prefix, setup_logger

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

path_argument = click.argument(
    "path", required=False, type=click.Path(dir_okay=False, path_type=Path)
)


@click.group()
@click.version_option(version=__version__, prog_name="etchosts")
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--strict/--no-strict', default=None, help='Stop at the first bad line')
@click.pass_context
def cli(ctx, verbose, strict):
    """Parse, check and normalize hosts files."""
    try:
        config = get_config()
        log_config = get_log_config()
    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(2)

    if verbose:
        setup_logger(verbose=True, config=log_config)

    ctx.ensure_object(dict)
    ctx.obj['strict'] = config.strict if strict is None else strict
    ctx.obj['failures'] = []


def _open(path):
    try:
        return HostsFile.load(path)
    except OSError as e:
        err_console.print(f"[red]{log_prefix('❌')} Cannot open hosts file: {escape(str(e))}[/red]")
        sys.exit(2)


def _drain(ctx, items):
    """Yield from a hosts file view, reporting bad lines instead of stopping."""
    failures = ctx.obj['failures']
    while True:
        try:
            item = next(items)
        except StopIteration:
            return
        except LineReadError as e:
            failures.append(e)
            err_console.print(f"[red]{log_prefix('❌')} {escape(e.message)}[/red]")
            if ctx.obj['strict']:
                return
            continue
        yield item


def _finish(ctx):
    if ctx.obj['failures']:
        sys.exit(1)


@cli.command()
@path_argument
@click.pass_context
def show(ctx, path):
    """Show the records of a hosts file as a table."""
    table = Table(title=None)
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Address", style="cyan")
    table.add_column("Aliases")
    table.add_column("Comment", style="dim")

    with _open(path) as hosts_file:
        for line in _drain(ctx, hosts_file.lines()):
            if line.is_blank:
                continue
            table.add_row(
                str(hosts_file.line_number),
                str(line.address) if line.address is not None else "",
                escape(" ".join(line.hosts())),
                escape(line.comment or ""),
            )

    console.print(table)
    _finish(ctx)


@cli.command()
@path_argument
@click.pass_context
def check(ctx, path):
    """Report every malformed line."""
    with _open(path) as hosts_file:
        count = sum(1 for _ in _drain(ctx, hosts_file.records()))
        name = escape(hosts_file.name)

    failures = ctx.obj['failures']
    if failures:
        console.print(f"[red]{log_prefix('❌')} {name}: {len(failures)} bad line(s), {count} record(s)[/red]")
    else:
        console.print(f"[green]{log_prefix('✅')} {name}: {count} record(s), no errors[/green]")
    _finish(ctx)


@cli.command(name="fmt")
@path_argument
@click.option('--strip-comments', is_flag=True, help='Drop comments, blank and comment-only lines')
@click.pass_context
def fmt(ctx, path, strip_comments):
    """Rewrite a hosts file with canonical spacing."""
    with _open(path) as hosts_file:
        if strip_comments:
            text = format_lines(_drain(ctx, hosts_file.records()))
        else:
            text = format_lines(_drain(ctx, hosts_file.lines()))
    click.echo(text, nl=False)
    _finish(ctx)


@cli.command()
@path_argument
@click.pass_context
def minify(ctx, path):
    """Merge records by address, deduplicating and sorting aliases."""
    with _open(path) as hosts_file:
        records = minify_lines(_drain(ctx, hosts_file.records()))
    click.echo(format_lines(records), nl=False)
    _finish(ctx)


@cli.command()
@path_argument
@click.pass_context
def pairs(ctx, path):
    """List every alias with its address, one per line."""
    with _open(path) as hosts_file:
        for alias, address in _drain(ctx, hosts_file.pairs()):
            click.echo(f"{alias}\t{address}")
    _finish(ctx)


def main():
    """Entry point for the etchosts command."""
    cli(obj={})


if __name__ == "__main__":
    main()
