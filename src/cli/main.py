"""Main CLI entry point for the resume-docs command.

This module provides the Typer application that converts saved resume and
cover-letter HTML into .docx or PDF files, either from a local file or
from the object store.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.cli.convert_command import ConvertCommand
from src.cli.output import OutputHandler

VERSION = "0.1.0"

app = typer.Typer(
    name="resume-docs",
    help="""Convert saved resume and cover-letter HTML into .docx or PDF.

QUICK START:
  resume-docs resume.html                                   # Write resume.docx
  resume-docs resume.html --format pdf                      # Write resume.pdf
  resume-docs resume.html --outline                         # Show converted blocks
  resume-docs users/42/resume.html --from-store --user 42   # Download from S3""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"resume-docs_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"resume-docs version {VERSION}")
        raise typer.Exit()


@app.command()
def main_command(
    source: str = typer.Argument(
        ...,
        help="HTML file to convert, or an object key with --from-store",
    ),
    document_format: str = typer.Option(
        "docx",
        "--format",
        "-f",
        help="Output format: docx or pdf",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (default: next to the source, or document.<ext>)",
        metavar="PATH",
    ),
    from_store: bool = typer.Option(
        False,
        "--from-store",
        help="Treat SOURCE as an object key in S3_BUCKET_NAME",
    ),
    user_id: Optional[str] = typer.Option(
        None,
        "--user",
        help="Owner of the object key (required with --from-store)",
        metavar="USER_ID",
    ),
    outline: bool = typer.Option(
        False,
        "--outline",
        help="Print the converted block outline instead of writing a file",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Document style YAML (default: .resume-docs/config.yaml)",
        metavar="PATH",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Convert saved resume and cover-letter HTML into .docx or PDF.

    \b
    EXAMPLES:
      resume-docs resume.html
      resume-docs resume.html --format pdf --output Jane_Doe.pdf
      resume-docs resume.html --outline
      resume-docs users/42/cover-letter.html --from-store --user 42 -f docx
    """
    _configure_logging(verbosity, logdir)
    output_handler = OutputHandler(verbosity=verbosity, no_color=no_color)

    command = ConvertCommand(output_handler=output_handler)
    exit_code = command.run(
        source=source,
        document_format=document_format,
        output_path=output,
        from_store=from_store,
        user_id=user_id,
        outline=outline,
        config_path=config_path,
    )

    raise typer.Exit(int(exit_code))


def main() -> None:
    """Main entry point for the CLI application."""
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
