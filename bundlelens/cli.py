from __future__ import annotations

import json
from pathlib import Path

import click
from loguru import logger
from result import Err
from rich.console import Console

from bundlelens.config.loader import load_config, sample_config_json
from bundlelens.config.schema import clamp_field
from bundlelens.logging_config import configure_logging
from bundlelens.models.bundle import InputFile
from bundlelens.services.hierarchy import build_hierarchy
from bundlelens.services.session import AnalysisSession
from bundlelens.services.summary import render_summary


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path), help="Config JSON file.")
@click.option("--json", "as_json", is_flag=True, help="Print the analysis result as JSON.")
@click.option("--tree", "as_tree", is_flag=True, help="Print the module hierarchy as JSON.")
@click.option("--top", "top_count", type=int, help="Rows shown in the largest-module and chunk tables.")
@click.option("--workers", type=int, help="Files parsed in parallel.")
@click.option("--sample-config", is_flag=True, help="Print the default config and exit.")
@click.option("-v", "--verbose", is_flag=True, help="Log parsing details to stderr.")
def main(
    files: tuple[Path, ...],
    config_path: Path | None,
    as_json: bool,
    as_tree: bool,
    top_count: int | None,
    workers: int | None,
    sample_config: bool,
    verbose: bool,
) -> None:
    """Analyze bundler stats, source maps, and scripts for size and optimization insights."""
    configure_logging("DEBUG" if verbose else "WARNING")

    if sample_config:
        click.echo(sample_config_json())
        return

    loaded = load_config(config_path)
    if isinstance(loaded, Err):
        click.echo(loaded.unwrap_err(), err=True)
        raise SystemExit(2)
    config = loaded.unwrap()
    if top_count is not None:
        config.top_count = clamp_field(top_count, "top_count")
    if workers is not None:
        config.parse_workers = clamp_field(workers, "parse_workers")

    if not files:
        raise click.UsageError("No input files given.")

    batch = [InputFile.from_path(path) for path in files]
    logger.debug("Loaded {} input files", len(batch))
    result = AnalysisSession(config).analyze(batch)

    if as_tree:
        root = build_hierarchy(result.modules)
        click.echo(json.dumps(root.to_dict() if root is not None else None, indent=2))
    elif as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        render_summary(Console(), result, config)


if __name__ == "__main__":
    main()
