"""branchdiff CLI."""

import json
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.table import Table

from branchdiff import __version__
from branchdiff.config import load_config
from branchdiff.core.errors import ConfigError, StructuredError
from branchdiff.core.logging import (
    configure_logging,
    current_request_id,
    get_logger,
    request_scope,
)
from branchdiff.git import BranchDiffError, FileDiff, diff_branches, open_repository

log = get_logger("branchdiff.cli")


def _display_path(path_old: str | None, path_new: str | None) -> str:
    if path_old and path_new and path_old != path_new:
        return f"{path_old} -> {path_new}"
    return path_new or path_old or ""


def _summary_line(diff: FileDiff) -> str:
    return (
        f"{diff.change_type} {_display_path(diff.path_old, diff.path_new)} "
        f"-{diff.start_old},{diff.end_old} +{diff.start_new},{diff.end_new}"
    )


def _stat_table(diffs: list[FileDiff]) -> Table:
    """Per-file totals: region count and lines touched on each side."""
    rows: dict[tuple[str | None, str | None], tuple[str, int, int, int]] = {}
    for d in diffs:
        key = (d.path_old, d.path_new)
        _, regions, removed, added = rows.get(key, (d.change_type, 0, 0, 0))
        rows[key] = (
            d.change_type,
            regions + 1,
            removed + d.end_old - d.start_old,
            added + d.end_new - d.start_new,
        )

    table = Table(box=None, padding=(0, 1), pad_edge=False)
    table.add_column("change", style="cyan")
    table.add_column("path")
    table.add_column("regions", justify="right")
    table.add_column("-", style="red", justify="right")
    table.add_column("+", style="green", justify="right")
    for (path_old, path_new), (kind, regions, removed, added) in rows.items():
        table.add_row(
            kind, _display_path(path_old, path_new), str(regions), str(removed), str(added)
        )
    return table


def _fail(ctx: click.Context, error: StructuredError, as_json: bool) -> NoReturn:
    """Report a failure: a JSON payload on stdout under --json, else a click error."""
    if as_json:
        payload = {**error.to_dict(), "request_id": current_request_id()}
        click.echo(json.dumps(payload, indent=2))
        ctx.exit(1)
    raise click.ClickException(str(error)) from error


@click.group()
@click.version_option(version=__version__, prog_name="branchdiff")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """branchdiff - line-level differences between two git branches."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command("diff")
@click.argument("repo", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("branch_a")
@click.argument("branch_b")
@click.option("--json", "as_json", is_flag=True, help="Output records as JSON")
@click.option("--stat", is_flag=True, help="Summarize changes per file")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Extra YAML config file",
)
@click.option("--detect-renames", is_flag=True, help="Report renames and copies")
@click.option("--skip-binary", is_flag=True, help="Skip binary files")
@click.pass_context
def diff_command(
    ctx: click.Context,
    repo: Path,
    branch_a: str,
    branch_b: str,
    as_json: bool,
    stat: bool,
    config_file: Path | None,
    detect_renames: bool,
    skip_binary: bool,
) -> None:
    """Diff BRANCH_A (old) against BRANCH_B (new) in REPO."""
    with request_scope():
        try:
            config = load_config(repo, config_file=config_file)
        except ConfigError as e:
            _fail(ctx, e, as_json)

        configure_logging(config.logging, level="DEBUG" if ctx.obj.get("verbose") else None)

        # Flags only switch behavior on; config decides otherwise
        overrides = {
            key: True
            for key, enabled in (("detect_renames", detect_renames), ("skip_binary", skip_binary))
            if enabled
        }
        diff_config = config.diff.model_copy(update=overrides)

        try:
            diffs = diff_branches(open_repository(repo), branch_a, branch_b, config=diff_config)
        except BranchDiffError as e:
            log.error("branch_diff_failed", code=e.code.name, error=str(e))
            _fail(ctx, e.to_structured(), as_json)

    if as_json:
        click.echo(json.dumps([d.to_dict() for d in diffs], indent=2))
        return

    if not diffs:
        click.echo("No differences.")
        return
    if stat:
        Console().print(_stat_table(diffs))
        return
    for d in diffs:
        click.echo(_summary_line(d))


if __name__ == "__main__":
    cli()
