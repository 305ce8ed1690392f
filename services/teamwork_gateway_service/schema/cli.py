"""Command-line entry point for regenerating the record models."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import typer
from gateway_service_libs.logging_utils import configure_service_logging

from services.teamwork_gateway_service.schema.codegen import (
    RECORDS_MODULE_PATH,
    SAMPLES_DIR,
    generate_records_source,
    load_bundled_samples,
)
from services.teamwork_gateway_service.schema.synthesizer import (
    SchemaSynthesisError,
    synthesize_all,
)

app = typer.Typer(help="Teamwork gateway record model generator")

SamplesDirOption = typer.Option(
    SAMPLES_DIR, "--samples-dir", help="Directory holding the sample payload files"
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log synthesis details to stderr"),
) -> None:
    """Keep stdout for command output; diagnostics go to stderr."""
    configure_service_logging(
        "teamwork-gateway-codegen",
        log_level="DEBUG" if verbose else "WARNING",
        log_to_file=False,
        stream=sys.stderr,
    )


def _render(samples_dir: Path) -> str:
    try:
        return generate_records_source(samples_dir)
    except (OSError, SchemaSynthesisError) as exc:
        typer.secho(f"Could not synthesize records: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc


@app.command()
def generate(
    output: Path = typer.Option(
        RECORDS_MODULE_PATH, "--output", "-o", help="Where to write the generated module"
    ),
    samples_dir: Path = SamplesDirOption,
) -> None:
    """Synthesize records from the samples and write the models module."""
    source = _render(samples_dir)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(source, encoding="utf-8")
    typer.secho(f"Wrote {output}", fg=typer.colors.GREEN)


@app.command()
def check(
    target: Path = typer.Option(
        RECORDS_MODULE_PATH, "--target", help="Generated module to compare against"
    ),
    samples_dir: Path = SamplesDirOption,
) -> None:
    """Exit non-zero when the checked-in module differs from a fresh generation."""
    source = _render(samples_dir)
    current = target.read_text(encoding="utf-8") if target.exists() else ""
    if current != source:
        typer.secho(
            f"{target} is out of date; run `teamwork-gateway-codegen generate`",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)
    typer.secho(f"{target} is up to date", fg=typer.colors.GREEN)


@app.command()
def show(samples_dir: Path = SamplesDirOption) -> None:
    """Print the synthesized record specs as JSON."""
    try:
        specs = synthesize_all(load_bundled_samples(samples_dir))
    except (OSError, SchemaSynthesisError) as exc:
        typer.secho(f"Could not synthesize records: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    payload = [
        {
            "name": spec.name,
            "fields": [
                {
                    "name": field.normalized_name,
                    "original": field.original_name,
                    "type": field.type_ref.kind.value,
                    "record": next(iter(field.type_ref.referenced_records()), None),
                }
                for field in spec.fields
            ],
        }
        for spec in specs
    ]
    typer.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    app()
