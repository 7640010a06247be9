from __future__ import annotations

import logging
from pathlib import Path

import typer

logger = logging.getLogger(__name__)

app = typer.Typer(name="softverify", help="Inspect softverify config and reports")

DEFAULT_DEBUG_FILE = "softverify-debug.log"


@app.callback()
def main(
    debug_file: str | None = typer.Option(
        None, "--debug-file", help="Write debug logging to this file"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Inspect softverify config and reports."""
    if debug_file is None and not verbose:
        return

    from softverify.verbose import setup_logger

    setup_logger(Path(debug_file or DEFAULT_DEBUG_FILE), verbose=verbose)


@app.command()
def config(
    path: str | None = typer.Argument(None, help="Path to softverify YAML config"),
    no_env: bool = typer.Option(
        False, "--no-env", help="Ignore SOFTVERIFY_* environment overrides"
    ),
):
    """Print the effective verification configuration."""
    import yaml

    from softverify.config import config_from_env, default_config, load_config

    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {path}", err=True)
            raise typer.Exit(1)
        try:
            effective = load_config(config_path)
            logger.debug(f"Loaded config from {config_path}")
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
    else:
        effective = default_config()

    if not no_env:
        try:
            effective = config_from_env(effective)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    typer.echo(yaml.dump(effective.model_dump(), default_flow_style=False).rstrip())


@app.command()
def summary(
    junit_file: str = typer.Argument(help="Path to an exported junit.xml"),
):
    """Print totals from an exported report; exit 1 if anything failed."""
    from softverify.reporting.junit import read_junit_summary

    junit_path = Path(junit_file)
    if not junit_path.exists():
        typer.echo(f"Error: report not found: {junit_file}", err=True)
        raise typer.Exit(1)

    totals = read_junit_summary(junit_path)
    logger.debug(f"Read report {junit_path}: {totals}")
    passed = totals["tests"] - totals["failures"] - totals["errors"]
    typer.echo(
        f"{totals['tests']} verification(s): {passed} passed, "
        f"{totals['failures']} failed"
    )
    for message in totals["messages"]:
        typer.echo(f"  {message}")

    if totals["failures"] or totals["errors"]:
        raise typer.Exit(1)


@app.command()
def schema(
    out: str = typer.Option(
        "schemas/softverify.schema.json", help="Output path for JSON Schema"
    ),
    doc: str | None = typer.Option(None, help="Optional output path for schema docs"),
):
    """Generate JSON Schema (and optionally docs) for the config file."""
    from softverify.schema import write_json_schema, write_schema_doc

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
    if doc is not None:
        doc_path = Path(doc)
        write_schema_doc(doc_path)
        typer.echo(f"Wrote docs: {doc_path}")
