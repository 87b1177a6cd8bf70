"""Generate an EB-eye search XML file from a PX dataset descriptor."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from pxindex.config import get_settings
from pxindex.export.ebeye import EBeyeDocumentBuilder, ExportPreconditionError, ProjectNotPublicError
from pxindex.ingest.models import SubmissionFacts
from pxindex.ingest.protein_map import load_protein_map
from pxindex.ingest.px_reader import read_project

app = typer.Typer(help="Project PX dataset descriptors into EB-eye search XML")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")


@app.command()
def run(
    px_xml: Path = typer.Argument(..., exists=True, dir_okay=False, help="PX XML descriptor"),
    submission: Path = typer.Argument(..., exists=True, dir_okay=False, help="Submission facts JSON"),
    proteins: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="CSV/TSV of protein cross-references"),
    output_dir: Optional[Path] = typer.Option(None, help="Directory for the EB-eye XML (defaults to settings)"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Read, project and export a single dataset."""
    configure_logging(verbose)
    settings = get_settings()

    record = read_project(px_xml.read_text(encoding="utf-8"))
    if record is None:
        typer.secho(f"Could not parse {px_xml}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    try:
        facts = SubmissionFacts.model_validate_json(submission.read_text(encoding="utf-8"))
    except ValidationError as exc:
        typer.secho(f"Invalid submission facts in {submission}: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    try:
        protein_map = load_protein_map(proteins) if proteins else {}
    except ValueError as exc:
        typer.secho(f"Invalid protein table: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    builder = EBeyeDocumentBuilder(settings=settings)
    try:
        path = builder.generate(record, facts, output_dir or settings.output_dir, proteins=protein_map)
    except ProjectNotPublicError as exc:
        typer.secho(f"Skipped: {exc}", fg=typer.colors.YELLOW)
        raise typer.Exit(code=2)
    except ExportPreconditionError as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.secho(f"EB-eye XML written to {path}", fg=typer.colors.GREEN)


if __name__ == "__main__":  # pragma: no cover
    app()
