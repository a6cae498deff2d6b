from __future__ import annotations

"""
Typer CLI entry point: turn findings files into one SARIF document.

This is a thin shell around the library:
- Loads the rule-description catalog (optional)
- Pushes one run per findings file, in argument order
- Writes the SARIF text to --output or prints it to stdout
- Optionally prints a Rich summary of the runs
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer

from sarifgen.config import Config, get_default_config
from sarifgen.descriptions import CatalogError, RuleDescriptionCatalog, load_catalog
from sarifgen.findings.loader import load_all_findings
from sarifgen.reporting.console import print_document
from sarifgen.sarif.document import ReportDocument
from sarifgen.sarif.serializer import write_output

logger = logging.getLogger(__name__)

app = typer.Typer(help="sarifgen - assemble analysis findings into a SARIF 2.1.0 report.")


def _load_catalog_option(descriptions: Optional[Path]) -> RuleDescriptionCatalog:
    """Empty catalog when no file is given; a bad file is a usage error."""
    if descriptions is None:
        return RuleDescriptionCatalog()
    try:
        return load_catalog(descriptions)
    except CatalogError as exc:
        raise typer.BadParameter(str(exc), param_hint="--descriptions") from exc


@app.command()
def convert(
    findings: List[Path] = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        help="JSON findings files; each one becomes a run.",
    ),
    descriptions: Optional[Path] = typer.Option(
        None,
        "--descriptions",
        "-d",
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON rule-description catalog.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        dir_okay=False,
        help="Write the SARIF report here instead of stdout.",
    ),
    summary: bool = typer.Option(False, "--summary", help="Print a summary table of the runs."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress and show rule descriptions."),
) -> None:
    """
    Convert findings files into a single SARIF document.
    """
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config: Config = get_default_config()
    catalog = _load_catalog_option(descriptions)
    document = ReportDocument(catalog, config)

    # Unreadable files are logged and left out by load_all_findings
    for loaded in load_all_findings(findings):
        document.push(loaded)

    if output is not None:
        text = write_output(document, output)
    else:
        text = document.to_json()
        if text:
            typer.echo(text)

    if not text:
        typer.echo("Could not serialize the SARIF report.", err=True)
        raise typer.Exit(code=1)

    if summary:
        print_document(document, verbose=verbose)


def main() -> None:
    """Entry point for `python -m sarifgen.main` and the sarifgen script."""
    app()


if __name__ == "__main__":
    main()
