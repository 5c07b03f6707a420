"""
Resume extraction pipeline: document bytes in, candidate profile out.

Only UnsupportedFormat, EmptyDocument and DocumentNotFound are raised to the
caller. Any other failure returns the safe-default profile so an upload is
never rejected just because extraction went wrong.
"""
import asyncio
import logging
from pathlib import Path
from typing import Optional

from ..config import Settings, get_settings
from ..exceptions import DocumentNotFound, EmptyDocument, UnsupportedFormat
from ..schemas.extraction import ExtractionResult, safe_default_result
from .clients import ProviderClients
from .orchestrator import ProviderOrchestrator, build_orchestrator
from .text_extractor import DocumentFormat, DocumentTextExtractor, TextExtractor
from .text_normalizer import normalize, preview

logger = logging.getLogger(__name__)

SURFACED_ERRORS = (UnsupportedFormat, EmptyDocument)


class ExtractionPipeline:
    def __init__(
        self,
        orchestrator: ProviderOrchestrator,
        text_extractor: Optional[TextExtractor] = None,
        preview_chars: int = 2000,
    ):
        self.orchestrator = orchestrator
        self.text_extractor = text_extractor or DocumentTextExtractor()
        self.preview_chars = preview_chars

    async def parse(self, raw_bytes: bytes, declared_format) -> ExtractionResult:
        """
        Parse a resume document into an ExtractionResult.

        Args:
            raw_bytes: Raw file contents
            declared_format: "pdf", "docx", "doc" (a leading dot or file name is fine)

        Returns:
            ExtractionResult with textPreview set

        Raises:
            UnsupportedFormat: declared_format is not a supported document type
            EmptyDocument: the document has no extractable text
        """
        try:
            fmt = DocumentFormat.resolve(declared_format)
            text = await asyncio.to_thread(self.text_extractor.extract, raw_bytes, fmt)
            if not text or not text.strip():
                raise EmptyDocument(f"{fmt.value.upper()} file appears to be empty or contains no extractable text")

            text = normalize(text)
            result = await self.orchestrator.extract(text)
            return result.model_copy(update={"text_preview": preview(text, self.preview_chars)})

        except SURFACED_ERRORS:
            raise
        except Exception as e:
            logger.error(f"Resume parsing failed, returning fallback data: {e}", exc_info=True)
            return safe_default_result()

    async def parse_file(self, path) -> ExtractionResult:
        """Parse a resume stored on disk, taking the format from its extension."""
        path = Path(path)
        if not path.is_file():
            raise DocumentNotFound(path)
        fmt = DocumentFormat.resolve(path.suffix)
        try:
            raw_bytes = path.read_bytes()
        except FileNotFoundError:
            raise DocumentNotFound(path) from None
        except OSError as e:
            logger.error(f"Could not read resume file {path}, returning fallback data: {e}", exc_info=True)
            return safe_default_result()
        return await self.parse(raw_bytes, fmt)


def create_pipeline(settings: Settings = None, clients: ProviderClients = None) -> ExtractionPipeline:
    """Wire a pipeline from settings, the shared provider clients and the default decoder."""
    settings = settings or get_settings()
    return ExtractionPipeline(
        orchestrator=build_orchestrator(settings, clients),
        text_extractor=DocumentTextExtractor(),
        preview_chars=settings.preview_chars,
    )
