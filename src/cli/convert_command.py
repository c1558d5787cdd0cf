"""ConvertCommand for turning saved HTML into .docx or PDF files.

The source is either a local HTML file or, with --from-store, an object
key that is downloaded through the same pipeline as the HTTP endpoint.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from src.config.errors import ConfigError
from src.config.models import DocumentStyleConfig
from src.config.settings import SettingsLoader
from src.config.style_config import StyleConfigLoader
from src.document_converter.errors import ConversionError
from src.download.document_builder import DocumentBuilder
from src.download.download_service import DownloadService, parse_format
from src.download.errors import AccessDeniedError, DocumentDownloadError, InvalidDownloadRequestError
from src.download.models import DownloadedDocument
from src.storage.errors import ObjectNotFoundError

from .errors import CLIError, InputFileError, OutputFileError
from .models import ExitCode
from .output import OutputHandler

logger = logging.getLogger(__name__)

ServiceFactory = Callable[[DocumentStyleConfig], DownloadService]


def _service_from_env(style: DocumentStyleConfig) -> DownloadService:
    settings = SettingsLoader().load()
    return DownloadService.from_settings(settings, style)


class ConvertCommand:
    """Converts one document and writes it to disk.

    Example:
        >>> cmd = ConvertCommand(output_handler=OutputHandler())
        >>> cmd.run(source="resume.html", document_format="docx")
        <ExitCode.SUCCESS: 0>
    """

    def __init__(
        self,
        output_handler: Optional[OutputHandler] = None,
        service_factory: Optional[ServiceFactory] = None,
    ):
        """Initialize the convert command.

        Args:
            output_handler: Terminal output (default: OutputHandler())
            service_factory: Builds the DownloadService for --from-store
                (default: from environment settings)
        """
        self.output = output_handler or OutputHandler()
        self.service_factory = service_factory or _service_from_env

    def run(
        self,
        source: str,
        document_format: str = "docx",
        output_path: Optional[str] = None,
        from_store: bool = False,
        user_id: Optional[str] = None,
        outline: bool = False,
        config_path: Optional[str] = None,
    ) -> ExitCode:
        """Convert a document and report the outcome.

        Args:
            source: Local HTML path, or object key with from_store
            document_format: "docx" or "pdf"
            output_path: Destination file (default derived from the source)
            from_store: Read source from the object store
            user_id: Owner of the object key (required with from_store)
            outline: Print the converted block outline instead of writing a file
            config_path: YAML style file (default .resume-docs/config.yaml)

        Returns:
            ExitCode describing the result
        """
        try:
            style = StyleConfigLoader.load(config_path)
            fmt = parse_format(document_format)

            if from_store:
                if not user_id:
                    raise CLIError("--user is required with --from-store")
                service = self.service_factory(style)
                if outline:
                    html = service.fetch_html(user_id, source)
                    return self._print_outline(html, style)
                with self.output.spinner(f"Downloading {source}..."):
                    document = service.download(user_id, source, fmt)
                default_path = Path(document.filename)
            else:
                html = self._read_input(source)
                if outline:
                    return self._print_outline(html, style)
                with self.output.spinner(f"Converting {source} to {fmt.value}..."):
                    document = DocumentBuilder.from_style(style).build(html, fmt)
                default_path = Path(source).with_suffix(f".{fmt.extension}")

            target = Path(output_path) if output_path else default_path
            self._write_output(target, document)
            self.output.success(f"Wrote {target} ({len(document.content)} bytes)")
            return ExitCode.SUCCESS

        except AccessDeniedError as e:
            logger.error(f"Access denied for key {e.key}")
            self.output.error(f"{e}: {source} does not belong to user {user_id}")
            return ExitCode.ACCESS_DENIED

        except ObjectNotFoundError as e:
            self.output.error(str(e))
            return ExitCode.STORAGE_ERROR

        except DocumentDownloadError as e:
            cause = e.__cause__
            self.output.error(f"{e}: {cause}" if cause else str(e))
            if isinstance(cause, ConversionError):
                return ExitCode.CONVERSION_ERROR
            return ExitCode.STORAGE_ERROR

        except ConversionError as e:
            logger.error(f"Conversion failed: {e}")
            self.output.error(str(e))
            return ExitCode.CONVERSION_ERROR

        except (InvalidDownloadRequestError, ConfigError, CLIError) as e:
            self.output.error(str(e))
            return ExitCode.GENERAL_ERROR

    def _print_outline(self, html: str, style: DocumentStyleConfig) -> ExitCode:
        blocks = DocumentBuilder.from_style(style).converter.convert(html)
        self.output.print_outline(blocks)
        return ExitCode.SUCCESS

    @staticmethod
    def _read_input(source: str) -> str:
        try:
            with open(source, 'r', encoding='utf-8') as f:
                return f.read()
        except FileNotFoundError:
            raise InputFileError(source, "file not found")
        except UnicodeDecodeError:
            raise InputFileError(source, "not valid UTF-8")
        except OSError as e:
            raise InputFileError(source, str(e))

    @staticmethod
    def _write_output(target: Path, document: DownloadedDocument) -> None:
        try:
            target.write_bytes(document.content)
        except OSError as e:
            raise OutputFileError(str(target), str(e))
