"""Unit tests for the identifier grammar decoder."""
import pytest

from intake_api.domain.errors import GrammarMismatchError
from intake_api.domain.identifier.grammar import (
    IDENTIFIER_PATTERN,
    build_identifier_pattern,
    decode_identifier,
    split_composite_number,
)

TASK_ID = "ab12ef000000000000000000000000aa"


def _identifier(composite="123456789202501", task_id=TASK_ID, doc_type="INV", ext="pdf"):
    return f"{composite}.{task_id}.{doc_type}.{ext}"


@pytest.mark.unit
class TestDecodeIdentifier:
    """Tests for decode_identifier."""

    def test_decode_valid_identifier(self):
        captures = decode_identifier(_identifier())

        assert captures.composite_number == "123456789202501"
        assert captures.business_number == "123456789"
        assert captures.year == "2025"
        assert captures.month == "01"
        assert captures.reference_task_id == TASK_ID
        assert captures.document_type == "INV"
        assert captures.extension == "pdf"

    @pytest.mark.parametrize(
        "business_number,year,month,task_id,doc_type",
        [
            ("000000001", "1999", "12", "F" * 32, "ABC"),
            ("987654321", "2030", "07", "0123456789abcdefABCDEF0123456789", "XYZ"),
        ],
    )
    def test_captures_round_trip_to_source_substrings(self, business_number, year, month, task_id, doc_type):
        raw = _identifier(f"{business_number}{year}{month}", task_id, doc_type)

        captures = decode_identifier(raw)

        assert (captures.business_number, captures.year, captures.month) == (business_number, year, month)
        assert captures.reference_task_id == task_id
        assert captures.document_type == doc_type
        assert captures.extension == "pdf"

    def test_accepts_uppercase_hex_task_id(self):
        captures = decode_identifier(_identifier(task_id="AB12EF000000000000000000000000AA"))
        assert captures.reference_task_id == "AB12EF000000000000000000000000AA"

    def test_month_out_of_range_still_decodes(self):
        """Range checks belong to the pre-validator, not the grammar."""
        captures = decode_identifier(_identifier("123456789202513"))
        assert captures.month == "13"

    @pytest.mark.parametrize(
        "raw",
        [
            "12345.xxxx.INV.pdf",
            _identifier("12345678920250"),            # 14 digits
            _identifier("1234567892025011"),          # 16 digits
            _identifier(task_id=TASK_ID[:-1]),        # 31 hex chars
            _identifier(task_id=TASK_ID + "a"),       # 33 hex chars
            _identifier(task_id="g" * 32),            # not hex
            _identifier(doc_type="inv"),              # lowercase type
            _identifier(doc_type="INVO"),             # 4 letters
            _identifier(ext="docx"),
            _identifier(ext="PDF"),
            _identifier() + ".pdf",                   # extra field
            "123456789202501." + TASK_ID + ".INV",    # missing field
            _identifier().replace(".", "-"),
            "",
        ],
    )
    def test_invalid_identifiers_raise_grammar_mismatch(self, raw):
        with pytest.raises(GrammarMismatchError) as exc_info:
            decode_identifier(raw)

        assert exc_info.value.raw == raw
        assert exc_info.value.expected_grammar == IDENTIFIER_PATTERN

    def test_trailing_newline_is_rejected(self):
        with pytest.raises(GrammarMismatchError):
            decode_identifier(_identifier() + "\n")

    def test_non_ascii_digits_are_rejected(self):
        # Arabic-Indic digits match \d without re.ASCII
        with pytest.raises(GrammarMismatchError):
            decode_identifier(_identifier("١" * 15))

    def test_error_message_includes_expected_grammar(self):
        with pytest.raises(GrammarMismatchError) as exc_info:
            decode_identifier("12345.xxxx.INV.pdf")

        assert IDENTIFIER_PATTERN in str(exc_info.value)
        assert "12345.xxxx.INV.pdf" in str(exc_info.value)


@pytest.mark.unit
class TestBuildIdentifierPattern:
    """Tests for build_identifier_pattern."""

    def test_default_pattern_is_pdf_only(self):
        assert IDENTIFIER_PATTERN.endswith(r"\.(?P<Extension>pdf)$")

    def test_pattern_with_several_extensions(self):
        pattern = build_identifier_pattern(("pdf", "docx"))

        assert decode_identifier(_identifier(ext="docx"), pattern).extension == "docx"
        assert decode_identifier(_identifier(ext="pdf"), pattern).extension == "pdf"

    def test_empty_extension_list_is_rejected(self):
        with pytest.raises(ValueError):
            build_identifier_pattern(())


@pytest.mark.unit
class TestSplitCompositeNumber:
    """Tests for split_composite_number."""

    def test_split(self):
        assert split_composite_number("123456789202501") == ("123456789", "2025", "01")

    def test_wrong_length_raises(self):
        with pytest.raises(ValueError):
            split_composite_number("12345678920250")
