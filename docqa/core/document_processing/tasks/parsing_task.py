"""
Document parsing task using LangChain community loaders.

Converts PDF, CSV and TXT files into LangChain Documents.
Extension checking is a pure function so callers can reject uploads
before any file is written or loaded.

Dependencies: langchain_community.document_loaders
System role: First stage of document ingestion pipeline
"""

from dataclasses import dataclass
from pathlib import Path

from langchain_community.document_loaders import CSVLoader, PyPDFLoader, TextLoader
from langchain_core.documents import Document
from langchain_core.document_loaders import BaseLoader

from docqa.core.exceptions import UnsupportedFileTypeError, ValidationError

SUPPORTED_EXTENSIONS: tuple[str, ...] = ("pdf", "csv", "txt")


class ParsingError(ValidationError):
    """Raised when a supported document cannot be read."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        self.file_path = file_path
        super().__init__(message, field="file", details={"file_path": file_path} if file_path else None)


@dataclass(frozen=True)
class ExtensionCheck:
    """Outcome of validating a file extension."""

    ok: bool
    extension: str
    reason: str | None = None


def normalize_extension(extension: str) -> str:
    """Lower-case an extension and strip surrounding whitespace and the leading dot."""
    return extension.strip().lower().lstrip(".")


def validate_extension(extension: str) -> ExtensionCheck:
    """
    Check whether an extension has a loader.

    Args:
        extension: File extension with or without leading dot (".pdf", "PDF")

    Returns:
        ExtensionCheck: ok=True with the normalized extension, or ok=False with a reason
    """
    normalized = normalize_extension(extension or "")
    if normalized in SUPPORTED_EXTENSIONS:
        return ExtensionCheck(ok=True, extension=normalized)
    return ExtensionCheck(
        ok=False,
        extension=normalized,
        reason="Invalid file type. Only PDF, TXT, or CSV files are allowed.",
    )


class ParsingTask:
    """Load documents with the loader registered for their extension."""

    def _get_loader(self, file_path: str, extension: str) -> BaseLoader:
        if extension == "pdf":
            return PyPDFLoader(file_path)
        if extension == "csv":
            return CSVLoader(file_path, autodetect_encoding=True)
        return TextLoader(file_path, autodetect_encoding=True)

    def parse(self, file_path: str, extension: str) -> list[Document]:
        """
        Parse a document into LangChain Documents.

        Args:
            file_path: Path to the document
            extension: Extension naming the loader (pdf, csv, txt)

        Returns:
            list[Document]: Parsed documents with content and metadata

        Raises:
            UnsupportedFileTypeError: When no loader exists for the extension
            ParsingError: When the file is missing or cannot be read
        """
        check = validate_extension(extension)
        if not check.ok:
            raise UnsupportedFileTypeError(check.extension)

        if not Path(file_path).exists():
            raise ParsingError(f"File not found: {file_path}", file_path)

        try:
            return self._get_loader(file_path, check.extension).load()
        except Exception as e:
            raise ParsingError(f"Failed to parse {check.extension.upper()} file: {e}", file_path) from e
