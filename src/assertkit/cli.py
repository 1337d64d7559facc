from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="assertkit", help="Run declarative assertion suites")
schema_app = typer.Typer(name="schema", help="Generate schema tooling for suite files")
app.add_typer(schema_app, name="schema")


@app.command()
def run(
    config: str = typer.Argument(help="Path to suite YAML config"),
    case: str | None = typer.Option(None, help="Run only this case"),
    output_dir: str = typer.Option("runs", help="Output directory for run results"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    parallel: int = typer.Option(
        1, "--parallel", "-p", min=1, max=100, help="Number of cases to run in parallel"
    ),
):
    """Run every case of a suite and write junit.xml."""
    from pydantic import ValidationError

    from assertkit.config import load_config
    from assertkit.reporting.junit import has_failures
    from assertkit.runner import Runner

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        suite = load_config(config_path)
    except (ValidationError, ValueError) as e:
        typer.echo(f"Error: invalid config {config}:\n{e}", err=True)
        raise typer.Exit(1)

    runner = Runner(
        config=suite,
        output_dir=Path(output_dir),
        case_filter=case,
        verbose=verbose,
        parallel=parallel,
    )

    try:
        run_dir = runner.execute()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Run complete: {run_dir}")
    typer.echo(f"JUnit report: {run_dir / 'junit.xml'}")
    if not verbose:
        typer.echo(f"Debug log: {run_dir / 'debug.log'}")

    # Exit with non-zero if any check failed
    if has_failures(run_dir / "junit.xml"):
        raise typer.Exit(1)


@schema_app.command("generate")
def schema_generate(
    out: str = typer.Option(
        "schemas/assertkit.schema.json", help="Output path for JSON Schema"
    ),
    doc: str = typer.Option("docs/schema.md", help="Output path for schema docs"),
):
    """Generate JSON Schema and docs for the suite YAML format."""
    from assertkit.schema import write_json_schema, write_schema_doc

    out_path = Path(out)
    doc_path = Path(doc)
    write_json_schema(out_path)
    write_schema_doc(doc_path)
    typer.echo(f"Wrote schema: {out_path}")
    typer.echo(f"Wrote docs: {doc_path}")
