"""Submission use cases - decode, pre-validate, enqueue."""
import logging
from typing import Iterable

from ...domain.entities.file_metadata import FileMetadata
from ...domain.errors import MissingFieldError, QueueUnavailableError
from ...infrastructure.messaging.queue_gateway import SubmissionQueueGateway, serialize_metadata
from ..commands.submit_file_command import SubmitFileCommand
from ..services.metadata_builder import build_file_metadata

logger = logging.getLogger(__name__)

FILE_NAME_FIELD = "FileName"


def submit_file(
    command: SubmitFileCommand,
    gateway: SubmissionQueueGateway,
    allowed_extensions: Iterable[str] = ("pdf",)
) -> FileMetadata:
    """
    Submit file use case.

    Returns only after the gateway confirmed the send.

    Raises:
        MissingFieldError: If the identifier is empty
        GrammarMismatchError, InvalidMonthError, UnsupportedDocumentTypeError:
            If pre-validation fails; nothing is enqueued
        QueueUnavailableError: If the gateway failed
    """
    if not command.file_name:
        raise MissingFieldError(FILE_NAME_FIELD)

    metadata = build_file_metadata(command.file_name, allowed_extensions)
    serialized = serialize_metadata(metadata)

    try:
        gateway.enqueue(serialized)
    except QueueUnavailableError:
        raise
    except Exception as e:
        raise QueueUnavailableError(f"Queue publishing failed: {e}") from e

    return metadata
