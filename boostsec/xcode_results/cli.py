"""CLI entry point for converting Xcode test summaries."""

import json
import logging
import sys
from pathlib import Path

import typer

from boostsec.xcode_results.config_loader import load_reader_config
from boostsec.xcode_results.models.reader_config import ReaderConfig
from boostsec.xcode_results.models.test_result import Status
from boostsec.xcode_results.reader import XcodeResultsReader
from boostsec.xcode_results.visitor import AllureResultsWriter

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
    force=True,
)
logger = logging.getLogger(__name__)

app = typer.Typer()


@app.command()
def main(
    results_dir: Path = typer.Option(..., help="Directory with *TestSummaries.plist files"),  # noqa: B008
    output_dir: Path = typer.Option(..., help="Directory receiving converted results"),  # noqa: B008
    config: Path | None = typer.Option(None, help="Optional YAML reader configuration"),  # noqa: B008
    strict: bool = typer.Option(
        False, help="Exit with an error when any test failed or is broken"
    ),
) -> None:
    """Convert Xcode test summaries into Allure-style results."""
    logger.info(f"Results directory: {results_dir}")
    logger.info(f"Output directory: {output_dir}")

    reader_config = ReaderConfig()
    if config is not None:
        try:
            reader_config = load_reader_config(config)
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Failed to load config: {e}")
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    writer = AllureResultsWriter(output_dir)
    XcodeResultsReader().read_results(reader_config, writer, results_dir)
    results = writer.results

    counts = {status: 0 for status in Status}
    for result in results:
        counts[result.status] += 1

    output = {"total": len(results)}
    output.update({status.value: count for status, count in counts.items()})
    typer.echo(json.dumps(output, indent=2))

    failed = counts[Status.FAILED] + counts[Status.BROKEN]
    if strict and failed:
        logger.error(f"Tests failed: {failed}/{len(results)}")
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover
    app()
