"""Unit tests for the metadata builder and pre-validator."""
import pytest

from intake_api.application.services.metadata_builder import (
    build_file_metadata,
    check_extension,
    check_month,
    parse_month,
)
from intake_api.domain.entities.file_metadata import FileMetadata
from intake_api.domain.errors import (
    FieldRangeError,
    GrammarMismatchError,
    InvalidMonthError,
    UnsupportedDocumentTypeError,
)

TASK_ID = "ab12ef000000000000000000000000aa"


@pytest.mark.unit
class TestMonthChecks:
    """Tests for month parsing and range checks."""

    @pytest.mark.parametrize("text,expected", [(f"{m:02d}", m) for m in range(1, 13)])
    def test_parse_month_accepts_calendar_months(self, text, expected):
        assert parse_month(text, "id") == expected

    @pytest.mark.parametrize("text", ["00", "13", "99"])
    def test_parse_month_rejects_out_of_range(self, text):
        with pytest.raises(InvalidMonthError) as exc_info:
            parse_month(text, "some-identifier")

        assert exc_info.value.value == int(text)
        assert exc_info.value.identifier == "some-identifier"
        assert isinstance(exc_info.value, FieldRangeError)

    def test_check_month_message_names_value_and_identifier(self):
        with pytest.raises(InvalidMonthError) as exc_info:
            check_month(0, "abc.pdf")

        assert str(exc_info.value) == "Invalid month value: 0 in file name 'abc.pdf'"


@pytest.mark.unit
class TestCheckExtension:
    """Tests for the extension allow-list."""

    def test_pdf_is_accepted(self):
        assert check_extension("pdf", ("pdf",)) == "pdf"

    @pytest.mark.parametrize("value", ["docx", "txt", ""])
    def test_other_extensions_are_rejected(self, value):
        with pytest.raises(UnsupportedDocumentTypeError) as exc_info:
            check_extension(value, ("pdf",))

        assert exc_info.value.value == value
        assert str(exc_info.value) == f"Unsupported document type: {value}"

    def test_configured_allow_list(self):
        assert check_extension("docx", ["pdf", "docx"]) == "docx"


@pytest.mark.unit
class TestBuildFileMetadata:
    """Tests for build_file_metadata."""

    def test_builds_normalized_record(self):
        metadata = build_file_metadata(f"123456789202501.{TASK_ID}.INV.pdf")

        assert metadata == FileMetadata(
            business_number="123456789",
            year=2025,
            month=1,
            reference_task_id=TASK_ID,
            document_type="INV",
            extension="pdf",
        )

    def test_invalid_month_is_rejected(self):
        identifier = f"123456789202513.{TASK_ID}.INV.pdf"

        with pytest.raises(InvalidMonthError) as exc_info:
            build_file_metadata(identifier)

        assert exc_info.value.value == 13
        assert exc_info.value.identifier == identifier

    def test_month_zero_is_rejected(self):
        with pytest.raises(InvalidMonthError):
            build_file_metadata(f"123456789202500.{TASK_ID}.INV.pdf")

    def test_malformed_identifier_raises_grammar_mismatch(self):
        with pytest.raises(GrammarMismatchError):
            build_file_metadata("12345.xxxx.INV.pdf")

    def test_docx_is_rejected_by_default(self):
        with pytest.raises(GrammarMismatchError):
            build_file_metadata(f"123456789202501.{TASK_ID}.INV.docx")

    def test_docx_accepted_when_configured(self):
        metadata = build_file_metadata(f"123456789202501.{TASK_ID}.INV.docx", ("pdf", "docx"))
        assert metadata.extension == "docx"

    def test_to_message_shape(self):
        metadata = build_file_metadata(f"123456789202512.{TASK_ID}.RPT.pdf")

        assert metadata.to_message() == {
            "BusinessNumber": "123456789",
            "Year": 2025,
            "Month": 12,
            "ReferenceTaskId": TASK_ID,
            "DocumentType": "RPT",
            "Extension": "pdf",
        }
