"""Semantic re-check of dequeued file metadata.

The producer already validated these records. The checks are repeated here
because messages can be duplicated, corrupted, produced by an older schema or
injected by another producer.
"""
import logging

from .errors import ConsumerValidationError
from .schema import FileMetadataMessage

logger = logging.getLogger(__name__)

BUSINESS_NUMBER_LENGTH = 9
YEAR_LENGTH = 4
REFERENCE_TASK_ID_LENGTH = 32


def validate_metadata(metadata: FileMetadataMessage) -> FileMetadataMessage:
    """
    Re-validate every field of a dequeued record.

    Year is checked by the length of its decimal string, not by a calendar
    range: 999 fails, 1000 and 9999 pass.

    Raises:
        ConsumerValidationError: For the first field that fails
    """
    if len(metadata.business_number) != BUSINESS_NUMBER_LENGTH:
        raise ConsumerValidationError(
            "BusinessNumber", metadata.business_number, "It must be exactly 9 digits."
        )

    if len(str(metadata.year)) != YEAR_LENGTH:
        raise ConsumerValidationError("Year", metadata.year, "It must be a 4-digit number.")

    if metadata.month < 1 or metadata.month > 12:
        raise ConsumerValidationError("Month", metadata.month, "It must be between 1 and 12.")

    if len(metadata.reference_task_id) != REFERENCE_TASK_ID_LENGTH:
        raise ConsumerValidationError(
            "ReferenceTaskId", metadata.reference_task_id, "It must be exactly 32 characters."
        )

    return metadata
