"""Metadata builder and pre-validator for submitted identifiers."""
import logging
from typing import Iterable

from ...domain.entities.file_metadata import FileMetadata
from ...domain.errors import InvalidMonthError, UnsupportedDocumentTypeError
from ...domain.identifier.grammar import build_identifier_pattern, decode_identifier

logger = logging.getLogger(__name__)

MIN_MONTH = 1
MAX_MONTH = 12


def check_month(value: int, identifier: str) -> int:
    """Return ``value`` if it is a calendar month, else raise InvalidMonthError."""
    if value < MIN_MONTH or value > MAX_MONTH:
        raise InvalidMonthError(value, identifier)
    return value


def parse_month(text: str, identifier: str) -> int:
    """Parse a two-digit month capture, e.g. ``"01"`` -> 1."""
    return check_month(int(text), identifier)


def check_extension(value: str, allowed_extensions: Iterable[str]) -> str:
    """
    Check an extension against the allow-list.

    Raises:
        UnsupportedDocumentTypeError: If ``value`` is not allowed
    """
    if not value or value not in tuple(allowed_extensions):
        raise UnsupportedDocumentTypeError(value)
    return value


def build_file_metadata(identifier: str, allowed_extensions: Iterable[str] = ("pdf",)) -> FileMetadata:
    """
    Decode and pre-validate an identifier into a FileMetadata record.

    Args:
        identifier: Raw caller-supplied identifier
        allowed_extensions: Extension allow-list; also drives the grammar

    Returns:
        FileMetadata ready to be enqueued

    Raises:
        GrammarMismatchError, InvalidMonthError, UnsupportedDocumentTypeError
    """
    allowed = tuple(allowed_extensions)
    pattern = build_identifier_pattern(allowed)

    captures = decode_identifier(identifier, pattern)
    year = int(captures.year)
    month = parse_month(captures.month, identifier)
    extension = check_extension(captures.extension, allowed)

    metadata = FileMetadata(
        business_number=captures.business_number,
        year=year,
        month=month,
        reference_task_id=captures.reference_task_id,
        document_type=captures.document_type,
        extension=extension,
    )
    logger.debug(f"Decoded identifier '{identifier}' into {metadata}")
    return metadata
