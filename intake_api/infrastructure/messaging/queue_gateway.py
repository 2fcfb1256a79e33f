"""Submission queue gateway contract."""
import json
from abc import ABC, abstractmethod

from ...domain.entities.file_metadata import FileMetadata


class SubmissionQueueGateway(ABC):
    """Single at-least-once send of a serialized record to a named queue."""

    @abstractmethod
    def enqueue(self, serialized_record: str) -> None:
        """
        Send one serialized record.

        Raises:
            QueueUnavailableError: If the broker did not confirm the send
        """


def serialize_metadata(metadata: FileMetadata) -> str:
    """Serialize FileMetadata into the compact JSON queue message."""
    return json.dumps(metadata.to_message(), separators=(',', ':'), ensure_ascii=False)
