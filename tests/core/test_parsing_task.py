"""
Test suite for extension validation and ParsingTask.

System role: Verification of the document loading stage
"""

from pathlib import Path

import pytest

from docqa.core.document_processing.tasks import ParsingTask, validate_extension
from docqa.core.document_processing.tasks.parsing_task import ParsingError
from docqa.core.exceptions import UnsupportedFileTypeError, ValidationError


class TestValidateExtension:
    """Test suite for the pure extension check."""

    @pytest.mark.parametrize(
        "extension, expected",
        [("pdf", "pdf"), (".PDF", "pdf"), ("txt", "txt"), (" .Csv ", "csv")],
    )
    def test_supported_extensions_should_pass(self, extension: str, expected: str) -> None:
        # Act
        check = validate_extension(extension)

        # Assert
        assert check.ok is True
        assert check.extension == expected
        assert check.reason is None

    @pytest.mark.parametrize("extension", ["docx", ".xlsx", "", "pdf.exe"])
    def test_unsupported_extensions_should_fail_with_reason(self, extension: str) -> None:
        # Act
        check = validate_extension(extension)

        # Assert
        assert check.ok is False
        assert "PDF, TXT, or CSV" in check.reason


class TestParsingTask:
    """Test suite for ParsingTask.parse."""

    def test_parse_txt_should_return_document(self, write_file) -> None:
        # Arrange
        path = write_file("note.txt", "The sky is blue.")

        # Act
        documents = ParsingTask().parse(str(path), "txt")

        # Assert
        assert len(documents) == 1
        assert documents[0].page_content == "The sky is blue."
        assert documents[0].metadata["source"] == str(path)

    def test_parse_csv_should_return_one_document_per_row(self, write_file) -> None:
        # Arrange
        path = write_file("cities.csv", "city,country\nParis,France\nBerlin,Germany\n")

        # Act
        documents = ParsingTask().parse(str(path), ".csv")

        # Assert
        assert len(documents) == 2
        assert "city: Paris" in documents[0].page_content
        assert "country: Germany" in documents[1].page_content

    def test_parse_unsupported_extension_should_raise(self, write_file) -> None:
        # Arrange
        path = write_file("report.docx", "content")

        # Act & Assert
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            ParsingTask().parse(str(path), "docx")
        assert exc_info.value.details["extension"] == "docx"
        assert isinstance(exc_info.value, ValidationError)

    def test_parse_missing_file_should_raise_parsing_error(self, tmp_path: Path) -> None:
        with pytest.raises(ParsingError, match="File not found"):
            ParsingTask().parse(str(tmp_path / "missing.txt"), "txt")


class TestEncodingFallback:
    """Test suite for loading files that are not UTF-8."""

    def test_parse_latin1_txt_should_detect_encoding(self, tmp_path: Path) -> None:
        # Arrange
        path = tmp_path / "latin.txt"
        path.write_bytes("Café crème is sweet. The sky is blue.".encode("latin-1"))

        # Act
        documents = ParsingTask().parse(str(path), "txt")

        # Assert
        assert len(documents) == 1
        assert "The sky is blue." in documents[0].page_content
        assert documents[0].page_content.startswith("Caf")

    def test_parse_latin1_csv_should_detect_encoding(self, tmp_path: Path) -> None:
        # Arrange
        path = tmp_path / "latin.csv"
        path.write_bytes("dish,country\nCafé crème,France\nCrêpe,France\n".encode("latin-1"))

        # Act
        documents = ParsingTask().parse(str(path), "csv")

        # Assert
        assert len(documents) == 2
        assert "country: France" in documents[0].page_content
        assert documents[1].page_content.startswith("dish: Cr")
